"""A shared cell whose whole value is replaced while readers keep reading it."""

from __future__ import annotations

import argparse
import asyncio
import copy
import sys
from collections.abc import Sequence
from typing import Any

REPLACEMENT = "the writer replaced this value"


class SwapCell:
    """Holds one value; ``set`` swaps it for another in a single step."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def get(self) -> Any:
        """Return a copy of the current value."""
        return copy.deepcopy(self._value)

    def set(self, value: Any) -> None:
        """Replace the current value."""
        self._value = value


async def run(
    cell: SwapCell,
    readers: int = 10,
    interval: float = 0.1,
    duration: float | None = None,
) -> list[Any]:
    """Run reader tasks and one writer task against ``cell``.

    Runs for ``duration`` seconds, or until cancelled when it is ``None``;
    returns every value the readers saw.
    """
    seen: list[Any] = []

    async def reader() -> None:
        while True:
            value = cell.get()
            seen.append(value)
            print(value)
            await asyncio.sleep(interval)

    async def writer() -> None:
        while True:
            print("writer is replacing the shared value")
            cell.set(REPLACEMENT)
            await asyncio.sleep(interval)

    tasks = [asyncio.create_task(reader()) for _ in range(readers)]
    tasks.append(asyncio.create_task(writer()))
    try:
        if duration is None:
            await asyncio.Event().wait()
        else:
            await asyncio.sleep(duration)
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
    return seen


def main(argv: Sequence[str] | None = None) -> None:
    """Run the readers and the writer until Ctrl+C or the given duration."""
    parser = argparse.ArgumentParser(description="Shared swap cell demonstration.")
    parser.add_argument("--duration", type=float, default=None,
                        help="seconds to run (default: until Ctrl+C)")
    args = parser.parse_args(argv)

    print("(stop: Ctrl+C)", file=sys.stderr)
    try:
        asyncio.run(run(SwapCell("Hello, world!"), duration=args.duration))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()