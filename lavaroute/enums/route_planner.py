from __future__ import annotations

from enum import Enum
from typing import Any

from lavaroute.constants.route_planner import (
    BALANCING_IP_ROUTE_PLANNER,
    NANO_IP_ROUTE_PLANNER,
    ROTATING_IP_ROUTE_PLANNER,
    ROTATING_NANO_IP_ROUTE_PLANNER,
    ROUTE_PLANNER_FIELD_APPLICABILITY,
)


class RoutePlannerType(Enum):
    """
    The IP rotation strategy a node is running
    """

    RotatingIp = ROTATING_IP_ROUTE_PLANNER
    """Switches the IP on ban."""
    BalancingIp = BALANCING_IP_ROUTE_PLANNER
    """Selects random IP addresses from the given block."""
    NanoIp = NANO_IP_ROUTE_PLANNER
    """Switches the IP on every clock update."""
    RotatingNanoIp = ROTATING_NANO_IP_ROUTE_PLANNER
    """Switches the IP on every clock update and rotates to the next IP block on a ban as a fallback."""

    @classmethod
    def resolve(cls, raw: Any) -> RoutePlannerType | None:
        """
        Resolve the ``class`` value of a route planner status into a planner type.

        Unknown or missing values resolve to ``None`` so newer planners don't break older clients.
        """
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None

    @property
    def class_name(self) -> str:
        """
        The name the node uses for this planner
        """
        return self.value

    @property
    def applicable_fields(self) -> frozenset[str]:
        """
        The details fields the node populates for this planner
        """
        return ROUTE_PLANNER_FIELD_APPLICABILITY[self.value]


def resolve_route_planner_type(raw: str | None) -> RoutePlannerType | None:
    return RoutePlannerType.resolve(raw)
