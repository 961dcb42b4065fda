from __future__ import annotations

import typing

from packaging.version import Version, parse

from lavaroute.__version__ import __version__ as __version__
from lavaroute.enums.route_planner import RoutePlannerType, resolve_route_planner_type
from lavaroute.exceptions.route_planner import MalformedPayloadException
from lavaroute.nodes.api.decoding import decode_route_planner_status
from lavaroute.nodes.api.responses.route_planner import Details, FailingAddress, IPBlock, Status
from lavaroute.nodes.client import RoutePlannerClient

VERSION: Version = typing.cast(Version, parse(__version__))


__all__ = (
    "__version__",
    "VERSION",
    "Details",
    "FailingAddress",
    "IPBlock",
    "MalformedPayloadException",
    "RoutePlannerClient",
    "RoutePlannerType",
    "Status",
    "decode_route_planner_status",
    "resolve_route_planner_type",
)
