"""Websocket client: sends typed lines, shows server messages and in-process signals."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
import threading
from collections.abc import AsyncIterable, AsyncIterator, Sequence

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK

DEFAULT_URL = "ws://127.0.0.1:9999"
PING_INTERVAL = 15.0
_PRIORITY = ("signal", "server", "input", "ping")


def parse_welcome(text: str) -> str | None:
    """Return the ``msg`` of a welcome JSON message, or ``None`` if ``text`` is not one."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    if isinstance(data, dict) and isinstance(data.get("msg"), str):
        return data["msg"]
    return None


def is_quit_command(text: str) -> bool:
    """True for ``quit`` or ``exit`` in any case, surrounding whitespace ignored."""
    return text.strip().lower() in ("quit", "exit")


async def signal_producer(queue: asyncio.Queue, count: int = 30, delay: float = 2.0) -> None:
    """Put ``count`` numbered signals on ``queue``, ``delay`` seconds apart, then ``None``."""
    for i in range(1, count + 1):
        await asyncio.sleep(delay)
        await queue.put(f"main channel signal #{i}")
    await queue.put(None)


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    lines: asyncio.Queue = asyncio.Queue()

    def deliver(item: str | None) -> None:
        try:
            loop.call_soon_threadsafe(lines.put_nowait, item)
        except RuntimeError:
            pass

    def pump() -> None:
        for line in sys.stdin:
            deliver(line)
        deliver(None)

    threading.Thread(target=pump, daemon=True).start()
    while (line := await lines.get()) is not None:
        yield line


async def _next_line(lines: AsyncIterator[str]) -> str | None:
    try:
        return await lines.__anext__()
    except StopAsyncIteration:
        return None


async def run_client(
    signals: asyncio.Queue,
    url: str = DEFAULT_URL,
    lines: AsyncIterable[str] | None = None,
    ping_interval: float = PING_INTERVAL,
) -> list[str]:
    """Talk to the server at ``url`` until a stop condition; return the server's text messages.

    Signals take priority over server messages, which take priority over input lines.
    A ``None`` signal, ``quit``/``exit``, end of input or a lost connection stops the client.
    """
    line_source = (lines if lines is not None else _stdin_lines()).__aiter__()
    received: list[str] = []
    async with websockets.connect(url) as ws:
        print(f"connected: {url}")
        try:
            first = await ws.recv()
        except ConnectionClosed:
            print("[disconnected]")
            return received
        if isinstance(first, str):
            print(f"server -> {first}")
            received.append(first)
            welcome = parse_welcome(first)
            if welcome is not None:
                print(f"welcome message: {welcome}")
        else:
            print(f"server -> {first!r}")

        print("Type a line and press Enter to send. Stop with quit / exit (or Ctrl+D)")
        print("-" * 40)

        factories = {
            "signal": signals.get,
            "server": ws.recv,
            "input": lambda: _next_line(line_source),
            "ping": lambda: asyncio.sleep(ping_interval),
        }
        tasks: dict[str, asyncio.Task] = {}
        try:
            while True:
                for name, factory in factories.items():
                    if name not in tasks:
                        tasks[name] = asyncio.create_task(factory())
                done, _ = await asyncio.wait(tasks.values(), return_when=asyncio.FIRST_COMPLETED)
                name = next(n for n in _PRIORITY if tasks[n] in done)
                task = tasks.pop(name)

                if name == "signal":
                    signal = task.result()
                    if signal is None:
                        print("(signal channel closed)")
                        break
                    print(f"[signal] {signal}")
                elif name == "server":
                    try:
                        message = task.result()
                    except ConnectionClosedOK as exc:
                        print(f"[server] connection closed: {exc}")
                        return received
                    except ConnectionClosed as exc:
                        print(f"[receive error] {exc}", file=sys.stderr)
                        break
                    if isinstance(message, str):
                        print(f"[server] {message}")
                        received.append(message)
                    else:
                        print(f"[server] {message!r}")
                elif name == "input":
                    line = task.result()
                    if line is None:
                        print("(standard input closed)")
                        break
                    text = line.strip()
                    if is_quit_command(text):
                        print("Quitting.")
                        break
                    if text:
                        await ws.send(text)
                else:
                    print("ping sent!")
                    await ws.ping()
        finally:
            for task in tasks.values():
                task.cancel()
            await asyncio.gather(*tasks.values(), return_exceptions=True)
    return received


async def _run(url: str) -> None:
    signals: asyncio.Queue = asyncio.Queue(maxsize=16)
    producer = asyncio.create_task(signal_producer(signals))
    try:
        await run_client(signals, url)
    finally:
        producer.cancel()


def main(argv: Sequence[str] | None = None) -> None:
    """Connect to the server and relay standard input."""
    parser = argparse.ArgumentParser(description="Interactive websocket client.")
    parser.add_argument("--url", default=DEFAULT_URL)
    args = parser.parse_args(argv)
    try:
        asyncio.run(_run(args.url))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()