"""Test fixtures for the relay.

Two layers:

1. ``emit_mock`` / ``client`` patch the shared Socket.IO server so the HTTP
   routes and event handlers can be checked without real sockets.
2. ``live_server`` / ``socket_client`` run the full ASGI app under uvicorn on
   a free port and connect real python-socketio clients, which is what the
   room fan-out tests need.
"""

import asyncio
import socket
from collections import defaultdict
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
import socketio
import uvicorn
from httpx import ASGITransport, AsyncClient

from relay.controllers.socket_instance import sio
from relay.main import app, socket_app

RELAYED_EVENTS = ("new_order", "order_status_updated", "notification", "promo")


@pytest.fixture()
def emit_mock(monkeypatch):
    mock = AsyncMock()
    monkeypatch.setattr(sio, "emit", mock)
    return mock


@pytest.fixture()
def enter_room_mock(monkeypatch):
    mock = AsyncMock()
    monkeypatch.setattr(sio, "enter_room", mock)
    return mock


@pytest_asyncio.fixture()
async def client(emit_mock):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest_asyncio.fixture()
async def live_server():
    port = _free_port()
    config = uvicorn.Config(
        socket_app,
        host="127.0.0.1",
        port=port,
        log_level="warning",
        lifespan="off",
    )
    server = uvicorn.Server(config)
    task = asyncio.create_task(server.serve())
    while not server.started:
        if task.done():
            task.result()
        await asyncio.sleep(0.05)

    yield f"http://127.0.0.1:{port}"

    server.should_exit = True
    await task


class RecordingClient:
    """A socket client that queues every relayed event it receives."""

    def __init__(self):
        self.sio = socketio.AsyncClient()
        self.received = defaultdict(asyncio.Queue)
        for event in RELAYED_EVENTS:
            self.sio.on(event, handler=self._recorder(event))

    def _recorder(self, event):
        async def record(data=None):
            await self.received[event].put(data)

        return record

    async def connect(self, url, transports=("websocket",)):
        await self.sio.connect(url, transports=list(transports), wait_timeout=5)

    async def next(self, event, timeout=3.0):
        return await asyncio.wait_for(self.received[event].get(), timeout)

    async def assert_nothing(self, *events, wait=0.5):
        await asyncio.sleep(wait)
        for event in events or RELAYED_EVENTS:
            assert self.received[event].empty(), f"unexpected {event}"


@pytest_asyncio.fixture()
async def socket_client(live_server):
    clients = []

    async def connect(transports=("websocket",)):
        rc = RecordingClient()
        await rc.connect(live_server, transports)
        clients.append(rc)
        return rc

    yield connect

    await asyncio.gather(*(rc.sio.disconnect() for rc in clients if rc.sio.connected))
