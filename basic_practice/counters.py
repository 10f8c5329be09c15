"""Counters updated from many threads: an indivisible counter and a fixed-slot map."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Callable, Sequence
from types import SimpleNamespace

SLOTS = 16


class AtomicCounter:
    """Integer counter whose updates never interleave."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def fetch_add(self, delta: int) -> int:
        """Add ``delta`` and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value += delta
            return previous

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value


class SlotCounterMap:
    """Counters for keys ``0..slots-1``; each key is its own slot, so keys never collide."""

    def __init__(self, slots: int = SLOTS) -> None:
        if slots <= 0:
            raise ValueError("a slot map needs at least one slot")
        self._slots = tuple(AtomicCounter() for _ in range(slots))

    def __len__(self) -> int:
        return len(self._slots)

    def _slot(self, key: int) -> AtomicCounter:
        if not 0 <= key < len(self._slots):
            raise IndexError(f"key {key} is outside 0..{len(self._slots) - 1}")
        return self._slots[key]

    def add(self, key: int, delta: int = 1) -> None:
        """Add ``delta`` to the counter of ``key``."""
        self._slot(key).fetch_add(delta)

    def get(self, key: int) -> int:
        """Return the counter of ``key``."""
        return self._slot(key).load()


def _run_threads(count: int, target: Callable[[int], None]) -> None:
    workers = [threading.Thread(target=target, args=(tid,)) for tid in range(count)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def demo_atomic_counter(threads: int = 10, increments: int = 1000) -> int:
    """Let ``threads`` threads each add 1 ``increments`` times; return the total."""
    total = AtomicCounter()

    def work(_tid: int) -> None:
        for _ in range(increments):
            total.fetch_add(1)

    _run_threads(threads, work)
    return total.load()


def demo_slot_map(threads: int = 4, increments: int = 1000) -> SlotCounterMap:
    """Thread ``tid`` adds 1 to key ``tid % SLOTS`` ``increments`` times."""
    counts = SlotCounterMap()

    def work(tid: int) -> None:
        key = tid % SLOTS
        for _ in range(increments):
            counts.add(key, 1)

    _run_threads(threads, work)
    return counts


def demo_unsynchronized_counter(threads: int = 10, increments: int = 1000) -> int:
    """Increment a plain shared field from many threads with no synchronisation.

    Updates may be lost, so the result is at most ``threads * increments``.
    """
    shared = SimpleNamespace(value=0)

    def work(_tid: int) -> None:
        for _ in range(increments):
            shared.value += 1

    _run_threads(threads, work)
    return shared.value


def main(argv: Sequence[str] | None = None) -> None:
    """Run the counter demonstrations and print their results."""
    parser = argparse.ArgumentParser(description="Concurrent counter demonstrations.")
    parser.parse_args(argv)

    total = demo_atomic_counter()
    print(f"[counter] atomic total = {total} (expected 10000)")

    counts = demo_slot_map()
    for key in range(4):
        print(f"[slot map] key {key} count = {counts.get(key)}")

    racy = demo_unsynchronized_counter()
    print(f"[race] expected count: 10000, actual count: {racy}")


if __name__ == "__main__":
    main()