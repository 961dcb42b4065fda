from __future__ import annotations

import dataclasses

from lavaroute.enums.route_planner import RoutePlannerType
from lavaroute.type_hints.dict_typing import JSON_DICT_TYPE, JSON_TYPE


def _drop_absent(data: JSON_DICT_TYPE) -> JSON_DICT_TYPE:
    return {key: value for key, value in data.items() if value is not None}


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class IPBlock:
    type: str | None = None
    size: str | None = None

    def to_dict(self) -> JSON_DICT_TYPE:
        return _drop_absent({"type": self.type, "size": self.size})


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class FailingAddress:
    address: str | None = None
    failingTimestamp: int | None = None
    failingTime: str | None = None

    def to_dict(self) -> JSON_DICT_TYPE:
        return _drop_absent(
            {
                "address": self.address,
                "failingTimestamp": self.failingTimestamp,
                "failingTime": self.failingTime,
            }
        )


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Details:
    """The diagnostic fields of a route planner status.

    Every planner shares this record, fields that don't apply to the active planner are
    usually absent but are kept as sent when the node includes them anyway.
    """

    ipBlock: IPBlock | None = None
    failingAddresses: tuple[FailingAddress, ...] = ()
    rotateIndex: str | None = None
    ipIndex: str | None = None
    currentAddress: str | None = None
    currentAddressIndex: int | None = None
    blockIndex: str | None = None

    @property
    def failedAddresses(self) -> tuple[FailingAddress, ...]:
        """The addresses the node marked as failing, in the order it sent them."""
        return self.failingAddresses

    def populated_fields(self) -> tuple[str, ...]:
        """The names of the fields the node sent a usable value for."""
        populated = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None or value == ():
                continue
            populated.append(field.name)
        return tuple(populated)

    def unexpected_fields(self, strategy: RoutePlannerType | None) -> tuple[str, ...]:
        """The populated fields the given planner isn't documented to send.

        Returns an empty tuple when the planner is unknown.
        """
        if strategy is None:
            return ()
        return tuple(name for name in self.populated_fields() if name not in strategy.applicable_fields)

    def to_dict(self) -> JSON_DICT_TYPE:
        failing_addresses: list[JSON_TYPE] | None = None
        if self.failingAddresses:
            failing_addresses = [address.to_dict() for address in self.failingAddresses]
        return _drop_absent(
            {
                "ipBlock": self.ipBlock.to_dict() if self.ipBlock is not None else None,
                "failingAddresses": failing_addresses,
                "rotateIndex": self.rotateIndex,
                "ipIndex": self.ipIndex,
                "currentAddress": self.currentAddress,
                "currentAddressIndex": self.currentAddressIndex,
                "blockIndex": self.blockIndex,
            }
        )


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Status:
    details: Details | None = None
    type: str | None = None  # replacement for the "class" key

    @property
    def strategy(self) -> RoutePlannerType | None:
        """The planner the node is running, ``None`` if it didn't say or isn't one this library knows."""
        return RoutePlannerType.resolve(self.type)

    @classmethod
    def from_dict(cls, data: JSON_TYPE | str | bytes) -> Status:
        from lavaroute.nodes.api.decoding import decode_route_planner_status

        return decode_route_planner_status(data)

    def to_dict(self) -> JSON_DICT_TYPE:
        return _drop_absent(
            {
                "class": self.type,
                "details": self.details.to_dict() if self.details is not None else None,
            }
        )
