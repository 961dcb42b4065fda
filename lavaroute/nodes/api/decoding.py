from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dacite import from_dict

from lavaroute._internals.functions import read_field
from lavaroute.compat import json
from lavaroute.constants.route_planner import INT64_MAX, INT64_MIN, UINT64_MAX
from lavaroute.enums.route_planner import RoutePlannerType
from lavaroute.exceptions.route_planner import MalformedPayloadException
from lavaroute.logging import getLogger
from lavaroute.nodes.api.responses.route_planner import Status
from lavaroute.type_hints.dict_typing import JSON_DICT_TYPE

LOGGER = getLogger("LavaRoute.RoutePlanner")

__all__ = ("decode_route_planner_status", "ensure_json_object")


def ensure_json_object(payload: Any) -> Mapping[str, Any]:
    """Return ``payload`` as a JSON object, parsing it first if it is still text.

    Raises
    ------
    MalformedPayloadException
        If the text isn't valid JSON or the top level value isn't an object.
    """
    if isinstance(payload, (str, bytes, bytearray, memoryview)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise MalformedPayloadException("Route planner status is not valid JSON", payload=payload) from exc
    if not isinstance(payload, Mapping):
        raise MalformedPayloadException(
            f"Route planner status must be a JSON object, not {type(payload).__name__}", payload=payload
        )
    return payload


def _sanitize_ip_block(data: Mapping[str, Any]) -> JSON_DICT_TYPE:
    return {
        "type": read_field(data, "type", str, context="details.ipBlock"),
        "size": read_field(data, "size", str, context="details.ipBlock"),
    }


def _sanitize_failing_address(data: Mapping[str, Any]) -> JSON_DICT_TYPE:
    return {
        "address": read_field(data, "address", str, context="details.failingAddresses"),
        "failingTimestamp": read_field(
            data, "failingTimestamp", int, minimum=0, maximum=UINT64_MAX, context="details.failingAddresses"
        ),
        "failingTime": read_field(data, "failingTime", str, context="details.failingAddresses"),
    }


def _sanitize_failing_addresses(data: Mapping[str, Any]) -> tuple[JSON_DICT_TYPE, ...]:
    entries = read_field(data, "failingAddresses", list, context="details")
    if not entries:
        return ()
    sanitized = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            LOGGER.trace(
                "Skipping details.failingAddresses[%d]: expected an object but got %s", index, type(entry).__name__
            )
            continue
        sanitized.append(_sanitize_failing_address(entry))
    return tuple(sanitized)


def _sanitize_details(data: Mapping[str, Any]) -> JSON_DICT_TYPE:
    ip_block = read_field(data, "ipBlock", Mapping, context="details")
    return {
        "ipBlock": _sanitize_ip_block(ip_block) if ip_block is not None else None,
        "failingAddresses": _sanitize_failing_addresses(data),
        "rotateIndex": read_field(data, "rotateIndex", str, context="details"),
        "ipIndex": read_field(data, "ipIndex", str, context="details"),
        "currentAddress": read_field(data, "currentAddress", str, context="details"),
        "currentAddressIndex": read_field(
            data, "currentAddressIndex", int, minimum=INT64_MIN, maximum=INT64_MAX, context="details"
        ),
        "blockIndex": read_field(data, "blockIndex", str, context="details"),
    }


def decode_route_planner_status(payload: Any) -> Status:
    """Decode the response of the route planner status endpoint.

    Every field is read on its own: a missing field, or one of the wrong type, is left as ``None``
    without affecting the rest of the report.

    Parameters
    ----------
    payload: Any
        The parsed JSON object, or the raw ``str``/``bytes`` body.

    Returns
    -------
    :class:`Status`
        The decoded status.

    Raises
    ------
    MalformedPayloadException
        If ``payload`` is not a JSON object.
    """
    root = ensure_json_object(payload)
    planner_class = read_field(root, "class", str)
    if planner_class is not None and RoutePlannerType.resolve(planner_class) is None:
        LOGGER.verbose("Unknown route planner class %r, strategy will be unset", planner_class)
    details = read_field(root, "details", Mapping)
    data = {
        "type": planner_class,
        "details": _sanitize_details(details) if details is not None else None,
    }
    return from_dict(data_class=Status, data=data)
