import pytest

from dailydrills.device import Device, GatewayState, Remove, Tick, Update
from dailydrills.fleet import (
    CommandEvent,
    Data,
    Disconnect,
    Faulted,
    MonitoredDevice,
    NetworkErr,
    Offline,
    OkResponse,
    Online,
    SensorReading,
    Timeout,
    apply_event,
    find_device,
    interpret,
    reset_if_error,
    status_msg,
    summarize,
    update_device,
)


def test_status_msg_online_pinned():
    assert status_msg(MonitoredDevice(id=7, status=Online(load=10))) == "Device 7: OK"


def test_status_msg_high_load_boundary():
    assert status_msg(MonitoredDevice(id=7, status=Online(load=50))).endswith(
        "HIGH LOAD"
    )
    assert status_msg(MonitoredDevice(id=7, status=Online(load=49))).endswith("OK")


def test_status_msg_offline_and_error():
    assert status_msg(MonitoredDevice(id=3, status=Offline())).endswith("OFFLINE")
    msg = status_msg(MonitoredDevice(id=3, status=Faulted("overheated")))
    assert "ERROR" in msg
    assert msg.endswith("overheated")


def test_reset_if_error_goes_offline():
    device = MonitoredDevice(id=1, status=Faulted("bad"))
    reset_if_error(device)
    assert device.status == Offline()


def test_reset_if_error_leaves_online_alone():
    device = MonitoredDevice(id=1, status=Online(load=20))
    reset_if_error(device)
    assert device.status == Online(load=20)


@pytest.mark.parametrize(
    "response, expected",
    [
        (Timeout(), "timeout"),
        (NetworkErr("dns"), "network error"),
        (OkResponse(Data(None)), "no data"),
        (OkResponse(Data(-1)), "invalid"),
        (OkResponse(Data(1)), "normal"),
        (OkResponse(Data(100)), "normal"),
        (OkResponse(Data(101)), "overflow"),
        (OkResponse(Data(0)), "overflow"),
    ],
)
def test_interpret(response, expected):
    assert interpret(response) == expected


def test_summarize_sensor():
    assert summarize(SensorReading(id=2, value=-1)).endswith("invalid")
    assert summarize(SensorReading(id=2, value=1001)).endswith("overflow")
    assert summarize(SensorReading(id=2, value=1000)) == "sensor 2: 1000"


def test_summarize_commands():
    assert summarize(CommandEvent("restart")) == "restarting"
    assert summarize(CommandEvent("")) == "empty command"
    assert summarize(CommandEvent("reboot")).endswith("reboot")


def test_summarize_disconnect():
    assert summarize(Disconnect(None)) == "disconnect"
    msg = summarize(Disconnect("timeout"))
    assert msg.startswith("disconnect")
    assert msg.endswith("timeout")


def _state():
    return GatewayState(devices=[Device(id=1, value=1), Device(id=2, value=2)])


def test_find_device_returns_same_object():
    state = _state()
    found = find_device(state, 2)
    assert found is state.devices[1]
    assert find_device(state, 99) is None


def test_update_device_known_and_unknown():
    state = _state()
    assert update_device(state, 1, 50) is True
    assert state.devices[0].value == 50
    assert update_device(state, 99, 5) is False
    assert len(state.devices) == 2


def test_apply_event_sequence_from_source():
    state = _state()
    apply_event(state, Update(id=1, value=100))
    apply_event(state, Update(id=2, value=200))
    assert state.devices == [Device(1, 100), Device(2, 200)]
    apply_event(state, Remove(1))
    assert state.devices == [Device(2, 200)]


def test_apply_event_adds_unknown_device_at_end():
    state = _state()
    apply_event(state, Update(id=3, value=30))
    assert [d.id for d in state.devices] == [1, 2, 3]
    assert state.devices[-1].value == 30


def test_apply_event_rejects_tick():
    with pytest.raises(TypeError):
        apply_event(_state(), Tick(1))