"""Left-right cell: writers fill the inactive copy, then make it the active one."""

from __future__ import annotations

import argparse
import copy
import threading
import time
from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class LeftRight(Generic[T]):
    """Two copies of a value; readers always see a complete one."""

    def __init__(self, initial: T) -> None:
        self._slots: list[T] = [copy.deepcopy(initial), initial]
        self._active = 0
        self._write_lock = threading.Lock()

    def read(self) -> T:
        """Return a copy of the active value."""
        return copy.deepcopy(self._slots[self._active])

    def write(self, value: T) -> None:
        """Store ``value`` in the inactive slot, then switch readers to it."""
        with self._write_lock:
            inactive = 1 - self._active
            self._slots[inactive] = value
            self._active = inactive


def run_concurrent(
    cell: LeftRight[str],
    versions: int = 8,
    readers: int = 3,
    reads_per_reader: int = 25,
    write_delay: float = 0.015,
    read_delay: float = 0.008,
) -> list[list[str]]:
    """Write ``version-i`` strings while readers poll; return what each reader saw."""
    observed: list[list[str]] = [[] for _ in range(readers)]

    def write() -> None:
        for i in range(versions):
            cell.write(f"version-{i}")
            time.sleep(write_delay)

    def read(reader_id: int) -> None:
        for _ in range(reads_per_reader):
            observed[reader_id].append(cell.read())
            time.sleep(read_delay)

    workers = [threading.Thread(target=write)]
    workers += [threading.Thread(target=read, args=(rid,)) for rid in range(readers)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return observed


def main(argv: Sequence[str] | None = None) -> None:
    """Check a single-threaded update, then run one writer against several readers."""
    parser = argparse.ArgumentParser(description="Left-right cell demonstration.")
    parser.parse_args(argv)

    cell = LeftRight("initial")
    assert cell.read() == "initial"
    cell.write("first update")
    assert cell.read() == "first update"
    print("1) single thread: initial -> first update OK\n")

    shared = LeftRight("shared-start")
    for reader_id, values in enumerate(run_concurrent(shared)):
        for value in values:
            print(f"  [reader {reader_id}] {value}")
    print(f"\n2) concurrent run finished. final read: {shared.read()!r}\n")
    print("All done.")


if __name__ == "__main__":
    main()