"""Read-only data shared by many threads, initialised once and read without locks."""

from __future__ import annotations

import argparse
import functools
import random
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Element:
    """One shared entry."""

    value: str


@functools.lru_cache(maxsize=None)
def shared_resources() -> tuple[Element, ...]:
    """Return the shared elements, building them on the first call only."""
    return tuple(Element(value) for value in ("a", "b", "c", "d"))


def random_index(rng: random.Random | None = None) -> int:
    """Return a random valid index into ``shared_resources()``."""
    source = rng if rng is not None else random
    return source.randrange(len(shared_resources()))


def read_only_readers(threads: int = 10, reads: int = 10, delay: float = 0.1) -> list[tuple[int, str]]:
    """Let each thread read ``reads`` random elements; return ``(thread id, value)`` pairs."""
    results: list[tuple[int, str]] = []

    def work(thread_id: int) -> None:
        rng = random.Random()
        for _ in range(reads):
            element = shared_resources()[random_index(rng)]
            print(f"thread id = {thread_id}, get value = {element.value}")
            results.append((thread_id, element.value))
            time.sleep(delay)

    workers = [threading.Thread(target=work, args=(tid,)) for tid in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return results


def main(argv: Sequence[str] | None = None) -> None:
    """Initialise the shared data and run the reader threads."""
    parser = argparse.ArgumentParser(description="Read-only shared data demonstration.")
    parser.parse_args(argv)
    shared_resources()
    read_only_readers()


if __name__ == "__main__":
    main()