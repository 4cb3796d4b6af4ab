"""A small HTTP gateway that keeps device readings in shared state."""

from __future__ import annotations

import argparse
import json
import logging
import math
import random
import threading
import time
from dataclasses import asdict, replace
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlsplit

from .device import Device, GatewayEvent, GatewayState, Tick, Update

_DEVICES_PATH = "/devices"

_log = logging.getLogger(__name__)


class SharedState:
    """Gateway state guarded by a lock for use from several threads."""

    def __init__(self, state: GatewayState | None = None) -> None:
        self._state = state if state is not None else GatewayState()
        self._lock = threading.Lock()

    def apply(self, event: GatewayEvent) -> None:
        """Apply an event under the lock."""
        with self._lock:
            self._state.apply_event(event)

    def devices(self) -> list[Device]:
        """Return copies of the current devices."""
        with self._lock:
            return [replace(device) for device in self._state.devices]


def list_devices(shared: SharedState) -> list[dict[str, int]]:
    """Return the devices as plain dictionaries."""
    return [asdict(device) for device in shared.devices()]


def upsert_device(shared: SharedState, payload: Any) -> dict[str, int]:
    """Create or update a device from a decoded JSON payload and echo it back."""
    device = Device.from_mapping(payload)
    shared.apply(Update(id=device.id, value=device.value))
    return asdict(device)


def _random_reading() -> int:
    raw = random.randint(-(2**31), 2**31 - 1)
    # Remainder takes the sign of the dividend, so readings lie in -99..=99.
    return int(math.fmod(raw, 100))


def seed_state(shared: SharedState) -> None:
    """Register devices 1 and 2 with random readings."""
    for device_id in (1, 2):
        shared.apply(Update(id=device_id, value=_random_reading()))


def run_ticker(shared: SharedState, ticks: int = 10, interval: float = 0.5) -> None:
    """Every interval seconds add one to each device and print the devices."""
    for _ in range(ticks):
        time.sleep(interval)
        shared.apply(Tick(1))
        print(shared.devices())


def make_server(
    shared: SharedState, host: str = "127.0.0.1", port: int = 3000
) -> ThreadingHTTPServer:
    """Bind an HTTP server that serves GET and POST on /devices."""

    class Handler(BaseHTTPRequestHandler):
        def log_message(self, format: str, *args: Any) -> None:
            _log.debug("%s - %s", self.address_string(), format % args)

        def _send(self, status: HTTPStatus, payload: Any = None) -> None:
            body = b""
            if payload is not None:
                body = json.dumps(payload, separators=(",", ":")).encode("utf-8")
            self.send_response(status)
            if payload is not None:
                self.send_header("Content-Type", "application/json")
            if status == HTTPStatus.METHOD_NOT_ALLOWED:
                self.send_header("Allow", "GET,HEAD,POST")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def _on_devices(self) -> bool:
            return urlsplit(self.path).path == _DEVICES_PATH

        def do_GET(self) -> None:
            if not self._on_devices():
                self._send(HTTPStatus.NOT_FOUND)
                return
            self._send(HTTPStatus.OK, list_devices(shared))

        def do_POST(self) -> None:
            if not self._on_devices():
                self._send(HTTPStatus.NOT_FOUND)
                return
            if self.headers.get_content_type() != "application/json":
                self._send(HTTPStatus.UNSUPPORTED_MEDIA_TYPE)
                return
            try:
                length = int(self.headers.get("Content-Length") or 0)
                payload = json.loads(self.rfile.read(length))
            except ValueError:
                self._send(HTTPStatus.BAD_REQUEST)
                return
            try:
                device = upsert_device(shared, payload)
            except ValueError:
                self._send(HTTPStatus.UNPROCESSABLE_ENTITY)
                return
            self._send(HTTPStatus.OK, device)

        def _not_allowed(self) -> None:
            if self._on_devices():
                self._send(HTTPStatus.METHOD_NOT_ALLOWED)
            else:
                self._send(HTTPStatus.NOT_FOUND)

        do_PUT = _not_allowed
        do_DELETE = _not_allowed
        do_PATCH = _not_allowed

    return ThreadingHTTPServer((host, port), Handler)


def main(argv: list[str] | None = None) -> int:
    """Seed the state, start the ticker and serve until interrupted."""
    parser = argparse.ArgumentParser(
        prog="gateway", description="Serve device readings over HTTP."
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    parser.add_argument("--ticks", type=int, default=10)
    parser.add_argument("--interval", type=float, default=0.5)
    args = parser.parse_args(argv)

    shared = SharedState()
    seed_state(shared)
    threading.Thread(
        target=run_ticker, args=(shared, args.ticks, args.interval), daemon=True
    ).start()

    print(f"Server running on http://{args.host}:{args.port}")
    server = make_server(shared, args.host, args.port)
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())