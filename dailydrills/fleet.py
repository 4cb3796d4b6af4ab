"""Device status reports, responses and updates to a gateway's device list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .device import Device, GatewayState, Remove, Update


@dataclass(frozen=True)
class Online:
    load: int


@dataclass(frozen=True)
class Offline:
    pass


@dataclass(frozen=True)
class Faulted:
    message: str


DeviceStatus = Union[Online, Offline, Faulted]


@dataclass
class MonitoredDevice:
    """A device and its current status."""

    id: int
    status: DeviceStatus


def status_msg(device: MonitoredDevice) -> str:
    """Describe a device's status; a load of 50 or more counts as high."""
    device_id = device.id
    match device.status:
        case Online(load=load) if load < 50:
            return f"Device {device_id}: OK"
        case Online():
            return f"Device {device_id}: HIGH LOAD"
        case Offline():
            return f"Device {device_id}: OFFLINE"
        case Faulted(message=message):
            return f"Device {device_id}: ERROR {message}"
    raise TypeError(f"unknown status: {device.status!r}")


def reset_if_error(device: MonitoredDevice) -> None:
    """Put a faulted device offline; leave any other device alone."""
    if isinstance(device.status, Faulted):
        device.status = Offline()


@dataclass(frozen=True)
class Data:
    value: Optional[int] = None


@dataclass(frozen=True)
class OkResponse:
    data: Data


@dataclass(frozen=True)
class Timeout:
    pass


@dataclass(frozen=True)
class NetworkErr:
    message: str


Response = Union[OkResponse, Timeout, NetworkErr]


def interpret(response: Response) -> str:
    """Classify a response; values from 1 to 100 are normal."""
    match response:
        case Timeout():
            return "timeout"
        case NetworkErr():
            return "network error"
        case OkResponse(data=Data(value=None)):
            return "no data"
        case OkResponse(data=Data(value=v)) if v < 0:
            return "invalid"
        case OkResponse(data=Data(value=v)) if 0 < v <= 100:
            return "normal"
        case OkResponse():
            return "overflow"
    raise TypeError(f"unknown response: {response!r}")


@dataclass(frozen=True)
class SensorReading:
    id: int
    value: int


@dataclass(frozen=True)
class CommandEvent:
    command: str


@dataclass(frozen=True)
class Disconnect:
    reason: Optional[str] = None


FleetEvent = Union[SensorReading, CommandEvent, Disconnect]


def summarize(event: FleetEvent) -> str:
    """Summarise a sensor reading, command or disconnect in one line."""
    match event:
        case SensorReading(id=sensor_id, value=v) if v < 0:
            return f"sensor {sensor_id} invalid"
        case SensorReading(id=sensor_id, value=v) if v > 1000:
            return f"sensor {sensor_id} overflow"
        case SensorReading(id=sensor_id, value=v):
            return f"sensor {sensor_id}: {v}"
        case CommandEvent(command="restart"):
            return "restarting"
        case CommandEvent(command=""):
            return "empty command"
        case CommandEvent(command=other):
            return f"cmd: {other}"
        case Disconnect(reason=None):
            return "disconnect"
        case Disconnect(reason=reason):
            return f"disconnect: {reason}"
    raise TypeError(f"unknown event: {event!r}")


def find_device(state: GatewayState, device_id: int) -> Optional[Device]:
    """Return the first device with the id, or None."""
    return next((d for d in state.devices if d.id == device_id), None)


def update_device(state: GatewayState, device_id: int, value: int) -> bool:
    """Set the value of a known device; return whether the device was found."""
    device = find_device(state, device_id)
    if device is None:
        return False
    device.value = value
    return True


def apply_event(state: GatewayState, event: Union[Update, Remove]) -> None:
    """Update or add a device, or remove every device with an id."""
    match event:
        case Update(id=device_id, value=value):
            if not update_device(state, device_id, value):
                state.devices.append(Device(id=device_id, value=value))
        case Remove(id=device_id):
            state.devices[:] = [d for d in state.devices if d.id != device_id]
        case _:
            raise TypeError(f"unsupported event: {event!r}")