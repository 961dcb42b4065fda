from __future__ import annotations

ROTATING_IP_ROUTE_PLANNER = "RotatingIpRoutePlanner"
BALANCING_IP_ROUTE_PLANNER = "BalancingIpRoutePlanner"
NANO_IP_ROUTE_PLANNER = "NanoIpRoutePlanner"
ROTATING_NANO_IP_ROUTE_PLANNER = "RotatingNanoIpRoutePlanner"

# Signed and unsigned 64-bit bounds for the integer fields of the payload
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

COMMON_DETAIL_FIELDS = frozenset({"ipBlock", "failingAddresses"})

# Which details fields a consumer can expect for each planner class.
# Informative only, the decoder keeps whatever the node sends.
ROUTE_PLANNER_FIELD_APPLICABILITY: dict[str, frozenset[str]] = {
    ROTATING_IP_ROUTE_PLANNER: COMMON_DETAIL_FIELDS | {"rotateIndex", "ipIndex", "currentAddress"},
    BALANCING_IP_ROUTE_PLANNER: COMMON_DETAIL_FIELDS,
    NANO_IP_ROUTE_PLANNER: COMMON_DETAIL_FIELDS | {"currentAddressIndex"},
    ROTATING_NANO_IP_ROUTE_PLANNER: COMMON_DETAIL_FIELDS | {"currentAddressIndex", "blockIndex"},
}
