"""Live ticker quotes over a websocket: subscribe, print frames, send keep-alive pings."""

from __future__ import annotations

import argparse
import asyncio
import json
import uuid
from collections.abc import Sequence
from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK

UPBIT_QUOTE_URL = "wss://api.upbit.com/websocket/v1"
PING_INTERVAL_SECS = 55.0
DEFAULT_PAIRS = ("KRW-BTC", "KRW-ETH", "KRW-XRP", "KRW-USDT", "KRW-SOL")


@dataclass(frozen=True)
class WebsocketQuote:
    """One ticker quote as sent by the exchange."""

    code: str
    opening_price: Decimal
    high_price: Decimal
    low_price: Decimal
    trade_price: Decimal
    prev_close_price: Decimal
    change: str
    change_price: Decimal
    signed_change_rate: Decimal
    trade_volume: Decimal
    ask_bid: str

    @classmethod
    def from_json(cls, text: str | bytes) -> WebsocketQuote:
        """Parse a quote; unknown fields are ignored, missing or malformed ones raise ``ValueError``."""
        try:
            data = json.loads(text, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise ValueError(f"quote is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("quote must be a JSON object")
        values = {}
        for field in fields(cls):
            if field.name not in data:
                raise ValueError(f"missing field {field.name!r}")
            raw = data[field.name]
            if field.type == "str":
                if not isinstance(raw, str):
                    raise ValueError(f"field {field.name!r} must be a string")
                values[field.name] = raw
            else:
                if isinstance(raw, bool) or not isinstance(raw, (int, str, Decimal)):
                    raise ValueError(f"field {field.name!r} must be a number")
                try:
                    values[field.name] = Decimal(str(raw))
                except InvalidOperation as exc:
                    raise ValueError(f"field {field.name!r} is not a decimal: {raw!r}") from exc
        return cls(**values)


def build_subscribe_message(pairs: Sequence[str], ticket: str | None = None) -> str:
    """Return the subscription request for ``pairs``; a fresh UUID ticket is used by default."""
    ticket = ticket if ticket is not None else str(uuid.uuid4())
    request = [
        {"ticket": ticket},
        {"type": "ticker", "codes": list(pairs)},
        {"format": "DEFAULT"},
    ]
    return json.dumps(request, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def decode_frame(message: str | bytes) -> str:
    """Return a frame's text; binary frames are decoded as UTF-8 or described when they are not."""
    if isinstance(message, str):
        return message
    try:
        return message.decode("utf-8")
    except UnicodeDecodeError as exc:
        return f"binary (non-utf8): len={len(message)} err={exc}"


async def get_quote(
    pairs: Sequence[str],
    url: str = UPBIT_QUOTE_URL,
    ping_interval: float = PING_INTERVAL_SECS,
) -> list[str]:
    """Subscribe to ``pairs`` and print every frame until the stream ends; return the frames."""
    received: list[str] = []
    async with websockets.connect(url) as ws:
        await ws.send(build_subscribe_message(pairs))
        recv_task: asyncio.Task | None = None
        ping_task: asyncio.Task | None = None
        try:
            while True:
                if recv_task is None:
                    recv_task = asyncio.create_task(ws.recv())
                if ping_task is None:
                    ping_task = asyncio.create_task(asyncio.sleep(ping_interval))
                done, _ = await asyncio.wait(
                    {recv_task, ping_task}, return_when=asyncio.FIRST_COMPLETED
                )
                if recv_task in done:
                    finished, recv_task = recv_task, None
                    try:
                        message = finished.result()
                    except ConnectionClosedOK:
                        print("stream ended")
                        return received
                    except ConnectionClosed as exc:
                        print(f"error: {exc!r}")
                        return received
                    text = decode_frame(message)
                    print(text)
                    received.append(text)
                if ping_task in done:
                    ping_task = None
                    await ws.send("PING")
                    print("PING sent")
        finally:
            for task in (recv_task, ping_task):
                if task is not None:
                    task.cancel()


def main(argv: Sequence[str] | None = None) -> None:
    """Stream quotes for the given pairs, or for the default five."""
    parser = argparse.ArgumentParser(description="Print live ticker quotes.")
    parser.add_argument("pairs", nargs="*", default=list(DEFAULT_PAIRS), help="market codes")
    parser.add_argument("--url", default=UPBIT_QUOTE_URL, help="websocket endpoint")
    args = parser.parse_args(argv)
    try:
        asyncio.run(get_quote(args.pairs, url=args.url))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()