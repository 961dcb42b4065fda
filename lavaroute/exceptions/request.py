from __future__ import annotations

from lavaroute.exceptions.base import LavaRouteException
from lavaroute.nodes.api.responses.errors import LavalinkError


class HTTPException(LavaRouteException):
    """Base exception for HTTP request errors"""

    def __init__(self, response: LavalinkError):
        super().__init__(response.message)
        self.response = response

    def __bool__(self):
        return False


class UnauthorizedException(HTTPException):
    """Raised when a REST request fails due to an incorrect password"""
