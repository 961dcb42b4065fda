from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from lavaroute.logging import getLogger

LOGGER = getLogger("LavaRoute.Decoding")

T = TypeVar("T")


def _matches_type(value: Any, expected_type: type) -> bool:
    # JSON booleans come through as bool, which is an int subclass
    if expected_type is int and isinstance(value, bool):
        return False
    return isinstance(value, expected_type)


def read_field(
    data: Mapping[str, Any],
    key: str,
    expected_type: type[T],
    *,
    minimum: int | None = None,
    maximum: int | None = None,
    context: str = "payload",
) -> T | None:
    """Read ``key`` from ``data`` if it holds a value of ``expected_type``.

    A missing key, an explicit ``null``, a value of the wrong JSON type or an integer outside
    ``minimum``/``maximum`` all read as ``None``; only the offending field is lost.
    """
    value = data.get(key)
    if value is None:
        return None
    if not _matches_type(value, expected_type):
        LOGGER.trace(
            "Ignoring %s.%s: expected %s but got %s", context, key, expected_type.__name__, type(value).__name__
        )
        return None
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        LOGGER.trace("Ignoring %s.%s: %s is out of range [%s, %s]", context, key, value, minimum, maximum)
        return None
    return value
