"""Sensor records, configuration, connections and gateway messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Sensor:
    """A sensor's id, its last reading and whether it is switched on."""

    id: int
    value: int
    active: bool


def describe_sensor(sensor: Sensor) -> str:
    """Describe a sensor: inactive, in error for a negative reading, or its value."""
    if not sensor.active:
        return f"Sensor {sensor.id} inactive"
    if sensor.value < 0:
        return f"Sensor {sensor.id} error"
    return f"Sensor {sensor.id}: {sensor.value}"


@dataclass(frozen=True)
class SensorConfig:
    """Settings for a named sensor."""

    name: str
    retries: int
    enabled: bool


def is_enabled(config: SensorConfig) -> bool:
    return config.enabled


@dataclass(frozen=True)
class SensorData:
    """One reading with the time it was taken."""

    id: int
    value: int
    timestamp: int


@dataclass(frozen=True)
class SensorUpdate:
    data: SensorData


@dataclass(frozen=True)
class ConnectionLost:
    id: int
    reason: str


@dataclass(frozen=True)
class Shutdown:
    pass


GatewayEvent = Union[SensorUpdate, ConnectionLost, Shutdown]


def handle_event(event: GatewayEvent) -> str:
    """Describe a gateway event, flagging readings below 0 or above 1000."""
    match event:
        case SensorUpdate(data=SensorData(id=sensor_id, value=value, timestamp=ts)):
            if value < 0:
                return f"Sensor {sensor_id} invalid"
            if value > 1000:
                return f"Sensor {sensor_id} overflow"
            return f"Sensor {sensor_id}: {value} at {ts}"
        case ConnectionLost(id=sensor_id, reason=reason):
            return f"Lost {sensor_id}: {reason}"
        case Shutdown():
            return "Shutting down"
    raise TypeError(f"unknown gateway event: {event!r}")


@dataclass(frozen=True)
class Metrics:
    """Optional temperature and humidity readings."""

    temp: Optional[int] = None
    humidity: Optional[int] = None


def classify_metrics(metrics: Metrics) -> str:
    """Classify readings; temperature checks come before humidity."""
    match metrics:
        case Metrics(temp=None):
            return "no temp data"
        case Metrics(temp=t) if t < 0:
            return "freezing"
        case Metrics(temp=t) if t > 60:
            return "overheat"
        case Metrics(humidity=h) if h is not None and h > 80:
            return "humid"
    return "ok"


@dataclass(frozen=True)
class Wifi:
    ssid: str
    strength: int


@dataclass(frozen=True)
class Ethernet:
    speed: int


@dataclass(frozen=True)
class Bluetooth:
    name: Optional[str] = None


Connection = Union[Wifi, Ethernet, Bluetooth]


def describe_connection(connection: Connection) -> str:
    """Describe a network connection and its quality."""
    match connection:
        case Wifi(ssid=ssid, strength=strength) if strength < -80:
            return f"wifi weak ({ssid})"
        case Wifi():
            return "wifi ok"
        case Ethernet(speed=speed) if speed >= 1000:
            return "gb ethernet"
        case Ethernet():
            return "ethernet"
        case Bluetooth(name=None):
            return "bt: unknown"
        case Bluetooth(name=name):
            return f"bt: {name}"
    raise TypeError(f"unknown connection: {connection!r}")


@dataclass(frozen=True)
class Packet:
    id: int
    data: Optional[bytes] = None


@dataclass(frozen=True)
class DataMessage:
    packet: Packet


@dataclass(frozen=True)
class Heartbeat:
    ts: int


@dataclass(frozen=True)
class ErrorMessage:
    text: str


GatewayMessage = Union[DataMessage, Heartbeat, ErrorMessage]


def handle_message(message: GatewayMessage) -> str:
    """Describe a gateway message; packets without data or with id 0 are rejected."""
    match message:
        case DataMessage(packet=Packet(data=None)):
            return "empty packet"
        case DataMessage(packet=Packet(id=0)):
            return "invalid id"
        case DataMessage(packet=Packet(id=packet_id, data=payload)):
            if not payload:
                return "no bytes"
            return f"packet {packet_id}: {len(payload)} bytes"
        case Heartbeat(ts=ts):
            return f"hb {ts}"
        case ErrorMessage(text=text):
            return f"err: {text}"
    raise TypeError(f"unknown gateway message: {message!r}")