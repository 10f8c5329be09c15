import asyncio
import contextlib
import json
import socket

import pytest
import websockets
from websockets.exceptions import ConnectionClosed

from basic_practice.ws_server import REPLY, WelcomeMessage, handle_connection, run_server


@contextlib.asynccontextmanager
async def _server(idle_timeout):
    outcomes = []
    finished = asyncio.Event()

    async def handler(ws):
        outcomes.append(await handle_connection(ws, idle_timeout=idle_timeout))
        finished.set()

    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = next(iter(server.sockets)).getsockname()[1]
        yield f"ws://127.0.0.1:{port}", outcomes, finished


def test_welcome_message_wire_format():
    assert WelcomeMessage().to_json() == '{"msg":"Hello, World!"}'


def test_welcome_message_round_trip():
    assert json.loads(WelcomeMessage("hi there").to_json()) == {"msg": "hi there"}


@pytest.mark.asyncio
async def test_text_gets_reply_and_close_is_reported():
    async with _server(5) as (url, outcomes, finished):
        async with websockets.connect(url) as client:
            welcome = await client.recv()
            await client.send("hello")
            reply = await asyncio.wait_for(client.recv(), 5)
        await asyncio.wait_for(finished.wait(), 5)
    assert welcome == WelcomeMessage().to_json()
    assert json.loads(welcome) == {"msg": "Hello, World!"}
    assert reply == REPLY
    assert outcomes == ["closed"]


@pytest.mark.asyncio
async def test_binary_gets_no_reply():
    async with _server(5) as (url, outcomes, finished):
        async with websockets.connect(url) as client:
            welcome = await client.recv()
            await client.send(b"\x01\x02")
            await client.send("after")
            reply = await asyncio.wait_for(client.recv(), 5)
        await asyncio.wait_for(finished.wait(), 5)
    assert welcome == WelcomeMessage().to_json()
    assert reply == REPLY
    assert outcomes == ["closed"]


@pytest.mark.asyncio
async def test_idle_connection_times_out():
    async with _server(0.2) as (url, outcomes, finished):
        async with websockets.connect(url) as client:
            welcome = await client.recv()
            with pytest.raises(ConnectionClosed):
                await asyncio.wait_for(client.recv(), 5)
        await asyncio.wait_for(finished.wait(), 5)
    assert welcome == WelcomeMessage().to_json()
    assert outcomes == ["timeout"]


@pytest.mark.asyncio
async def test_run_server_greets_clients():
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    task = asyncio.create_task(run_server("127.0.0.1", port, 5))
    try:
        welcome = None
        for _ in range(100):
            try:
                async with websockets.connect(f"ws://127.0.0.1:{port}") as client:
                    welcome = await asyncio.wait_for(client.recv(), 5)
                break
            except OSError:
                await asyncio.sleep(0.05)
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
    assert welcome == WelcomeMessage().to_json()