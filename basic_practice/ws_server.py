"""Websocket server: greets each client, answers text, and drops idle connections."""

from __future__ import annotations

import argparse
import asyncio
import functools
import json
from collections.abc import Sequence
from dataclasses import dataclass

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK

IDLE_TIMEOUT = 10.0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9999
REPLY = "response received."


@dataclass(frozen=True)
class WelcomeMessage:
    """First message sent to every client."""

    msg: str = "Hello, World!"

    def to_json(self) -> str:
        """Return the message as compact JSON."""
        return json.dumps({"msg": self.msg}, separators=(",", ":"), ensure_ascii=False)


async def handle_connection(websocket, idle_timeout: float = IDLE_TIMEOUT) -> str:
    """Serve one client until it closes, fails or stays silent for ``idle_timeout`` seconds.

    Returns ``"closed"``, ``"error"`` or ``"timeout"``.
    """
    addr = websocket.remote_address
    print(f"Accepted connection from: {addr}")
    try:
        await websocket.send(WelcomeMessage().to_json())
        while True:
            try:
                message = await asyncio.wait_for(websocket.recv(), idle_timeout)
            except asyncio.TimeoutError:
                print(f"{addr} - nothing received for {idle_timeout:g}s (idle timeout)")
                await websocket.close()
                return "timeout"
            if isinstance(message, str):
                print(f"text message received {message}")
                await websocket.send(REPLY)
            else:
                print(f"binary received {list(message)}")
    except ConnectionClosedOK:
        print("client sent Close")
        return "closed"
    except ConnectionClosed as exc:
        print(f"error occurred! {exc!r}")
        return "error"


async def run_server(
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    idle_timeout: float = IDLE_TIMEOUT,
) -> None:
    """Accept clients on ``host:port`` forever, one task per connection."""
    handler = functools.partial(handle_connection, idle_timeout=idle_timeout)
    async with websockets.serve(handler, host, port):
        print(f"Listening on: {host}:{port}")
        await asyncio.Future()


def main(argv: Sequence[str] | None = None) -> None:
    """Start the server."""
    parser = argparse.ArgumentParser(description="Websocket greeting server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--idle-timeout", type=float, default=IDLE_TIMEOUT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_server(args.host, args.port, args.idle_timeout))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()