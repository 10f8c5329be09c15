"""A LIFO stack that many threads may push to and pop from at once."""

from __future__ import annotations

import argparse
import threading
from collections import deque
from collections.abc import Sequence
from typing import Any


class ConcurrentStack:
    """Last-in, first-out stack whose push and pop are single indivisible steps."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> Any | None:
        """Remove and return the top value, or ``None`` when empty."""
        try:
            return self._items.pop()
        except IndexError:
            return None


def fill_concurrently(stack: ConcurrentStack, threads: int = 4, per_thread: int = 256) -> None:
    """Thread ``t`` pushes ``t * 1000 + i`` for ``i`` in ``range(per_thread)``."""

    def work(t: int) -> None:
        for i in range(per_thread):
            stack.push(t * 1000 + i)

    workers = [threading.Thread(target=work, args=(t,)) for t in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def main(argv: Sequence[str] | None = None) -> None:
    """Fill a stack from four threads and pop it empty."""
    parser = argparse.ArgumentParser(description="Concurrent stack demonstration.")
    parser.parse_args(argv)

    stack = ConcurrentStack()
    fill_concurrently(stack)
    count = 0
    while stack.pop() is not None:
        count += 1
    print(f"popped {count} items (expected 1024)")


if __name__ == "__main__":
    main()