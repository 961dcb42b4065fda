from __future__ import annotations

from typing import Any

from lavaroute.exceptions.base import LavaRouteException


class RoutePlannerException(LavaRouteException):
    """Base exception for route planner errors"""


class MalformedPayloadException(RoutePlannerException):
    """Raised when a route planner status payload is not a JSON object.

    Attributes
    ----------
    payload : Any
        The value that was handed to the decoder.
    """

    def __init__(self, message: str, *args, payload: Any = None) -> None:
        super().__init__(message, *args)
        self.message = message
        self.payload = payload

    def __repr__(self) -> str:
        return f"MalformedPayloadException({self.message!r}, payload_type={type(self.payload).__name__})"
