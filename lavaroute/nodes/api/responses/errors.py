from __future__ import annotations

import dataclasses
from datetime import datetime

from lavaroute.helpers.time import from_epoch_millis


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class LavalinkError:
    timestamp: int | datetime
    status: int
    error: str
    message: str
    path: str
    trace: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, int):
            object.__setattr__(self, "timestamp", from_epoch_millis(self.timestamp))

    def __bool__(self) -> bool:
        return False
