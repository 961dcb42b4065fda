from __future__ import annotations

from datetime import datetime

import pytz


def get_tz_utc() -> pytz.UTC:
    """A helper function to return a pytz.UTC object."""
    return pytz.UTC


def from_epoch_millis(timestamp: int) -> datetime:
    """Convert a millisecond epoch timestamp, as sent by the node, into an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp / 1000, tz=get_tz_utc())
