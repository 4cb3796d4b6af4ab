"""Device records and the events that change a gateway's device list."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _require_int(data: Mapping[str, Any], name: str, low: int, high: int) -> int:
    try:
        raw = data[name]
    except KeyError:
        raise ValueError(f"missing field {name!r}") from None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"field {name!r} must be an integer")
    if not low <= raw <= high:
        raise ValueError(f"field {name!r} out of range: {raw}")
    return raw


@dataclass
class Device:
    """A device known to the gateway, with its current reading."""

    id: int
    value: int

    @classmethod
    def from_mapping(cls, data: Any) -> Device:
        """Build a device from a decoded JSON object, validating both fields."""
        if not isinstance(data, Mapping):
            raise ValueError("device payload must be an object")
        device_id = _require_int(data, "id", 0, _U32_MAX)
        value = _require_int(data, "value", _I32_MIN, _I32_MAX)
        return cls(id=device_id, value=value)


@dataclass(frozen=True)
class Update:
    """Set a device's value, adding the device if it is unknown."""

    id: int
    value: int


@dataclass(frozen=True)
class Remove:
    """Drop a device from the gateway."""

    id: int


@dataclass(frozen=True)
class Tick:
    """Add an amount to every device's value."""

    amount: int


GatewayEvent = Union[Update, Remove, Tick]


@dataclass
class GatewayState:
    """The ordered list of devices a gateway tracks."""

    devices: list[Device] = field(default_factory=list)

    def apply_event(self, event: GatewayEvent) -> None:
        """Change the device list according to one event."""
        match event:
            case Update(id=device_id, value=value):
                existing = next((d for d in self.devices if d.id == device_id), None)
                if existing is None:
                    self.devices.append(Device(id=device_id, value=value))
                else:
                    existing.value = value
            case Remove(id=device_id):
                self.devices[:] = [d for d in self.devices if d.id != device_id]
            case Tick(amount=amount):
                for device in self.devices:
                    device.value += amount
            case _:
                raise TypeError(f"unknown gateway event: {event!r}")