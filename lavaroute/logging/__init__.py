from __future__ import annotations

import os

from red_commons.logging import RedTraceLogger  # type: ignore
from red_commons.logging import getLogger as redgetLogger
from red_commons.logging import maybe_update_logger_class

__all__ = ("getLogger",)

maybe_update_logger_class()

LOGGER_PREFIX = os.getenv("LAVAROUTE__LOGGER_PREFIX", "")


# noinspection PyPep8Naming
def getLogger(name: str) -> RedTraceLogger:  # noqa: N802
    """Get a logger with the prefix set in the environment variable LAVAROUTE__LOGGER_PREFIX."""
    return redgetLogger(f"{LOGGER_PREFIX}{name}")
