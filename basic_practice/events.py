"""Event-driven hand-off: a producer thread sends events, the consumer wakes only for them."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """A numbered tick from the producer."""

    value: int


@dataclass(frozen=True)
class Done:
    """Sent once the producer has finished."""


Event = Tick | Done


def produce(channel: queue.Queue, count: int = 5, delay: float = 0.05) -> None:
    """Put ``count`` ticks on ``channel``, ``delay`` seconds apart, then ``Done``."""
    for i in range(count):
        time.sleep(delay)
        channel.put(Tick(i))
    channel.put(Done())


def consume(channel: queue.Queue) -> Iterator[int]:
    """Yield the value of each tick taken from ``channel`` until ``Done`` arrives."""
    while True:
        event = channel.get()
        if isinstance(event, Done):
            return
        if not isinstance(event, Tick):
            raise TypeError(f"unexpected event: {event!r}")
        yield event.value


def main(argv: Sequence[str] | None = None) -> None:
    """Run one producer thread and consume its events on this thread."""
    parser = argparse.ArgumentParser(description="Channel event demonstration.")
    parser.parse_args(argv)

    channel: queue.Queue = queue.Queue()
    producer = threading.Thread(target=produce, args=(channel,))
    producer.start()
    for n in consume(channel):
        print(f"[consumer] handled Tick({n})")
    print("[consumer] Done received, stopping")
    producer.join()


if __name__ == "__main__":
    main()