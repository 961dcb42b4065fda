from __future__ import annotations

from lavaroute.exceptions.base import LavaRouteException
from lavaroute.exceptions.request import HTTPException, UnauthorizedException
from lavaroute.exceptions.route_planner import MalformedPayloadException, RoutePlannerException

__all__ = (
    "LavaRouteException",
    "HTTPException",
    "UnauthorizedException",
    "RoutePlannerException",
    "MalformedPayloadException",
)
