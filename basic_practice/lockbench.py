"""Mutex versus reader-writer lock: correctness demos and a read/write-ratio benchmark."""

from __future__ import annotations

import argparse
import statistics
import threading
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

READ_INNER_LOOPS_DEFAULT = 512
TOTAL_READS_PER_RUN = 1_200_000
TOTAL_WRITES_PER_RUN = 20_000
BENCH_ROUNDS = 7
WARMUP_ROUNDS = 1


class RWLock:
    """Lock held by many readers at once or by one writer alone; waiting writers go first."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock shared for the duration of the ``with`` block."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the ``with`` block."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass(frozen=True)
class BenchConfig:
    """One benchmark scenario."""

    name: str
    num_readers: int
    num_writers: int
    reads_per_reader: int
    writes_per_writer: int
    read_inner_loops: int

    @property
    def expected_writes(self) -> int:
        return self.num_writers * self.writes_per_writer


def scenarios() -> list[BenchConfig]:
    """Return the four scenarios; total reads and writes match between them."""
    total_reads = TOTAL_READS_PER_RUN
    total_writes = TOTAL_WRITES_PER_RUN
    return [
        BenchConfig("READ_ONLY + fat_read (structure favouring RwLock)",
                    32, 0, total_reads // 32, 0, 1024),
        BenchConfig("read_heavy + fat_read (RwLock candidate)",
                    32, 2, total_reads // 32, total_writes // 2, READ_INNER_LOOPS_DEFAULT),
        BenchConfig("balanced + fat_read",
                    8, 8, total_reads // 8, total_writes // 8, READ_INNER_LOOPS_DEFAULT),
        BenchConfig("write_heavy + thin_read (Mutex candidate)",
                    2, 16, total_reads // 2, total_writes // 16, 1),
    ]


def _run_all(targets: list[Callable[[], None]]) -> None:
    workers = [threading.Thread(target=target) for target in targets]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def demo_mutex(threads: int = 10, increments: int = 1000) -> int:
    """Increment a shared value under a mutex from many threads; return the total."""
    element = SimpleNamespace(data=0)
    lock = threading.Lock()

    def work() -> None:
        for _ in range(increments):
            with lock:
                element.data += 1

    _run_all([work] * threads)
    with lock:
        return element.data


def demo_rwlock(threads: int = 10, increments: int = 1000) -> int:
    """Increment a shared value under a write lock from many threads; return the total."""
    element = SimpleNamespace(data=0)
    lock = RWLock()

    def work() -> None:
        for _ in range(increments):
            with lock.write_locked():
                element.data += 1

    _run_all([work] * threads)
    with lock.read_locked():
        return element.data


def _read_work(element: SimpleNamespace, inner: int) -> int:
    acc = 0
    for _ in range(inner):
        acc += element.data
    return acc


def _bench(cfg: BenchConfig, read_guard: Callable[[], Any], write_guard: Callable[[], Any]) -> tuple[float, int]:
    element = SimpleNamespace(data=0)

    def reader() -> None:
        for _ in range(cfg.reads_per_reader):
            with read_guard():
                _read_work(element, cfg.read_inner_loops)

    def writer() -> None:
        for _ in range(cfg.writes_per_writer):
            with write_guard():
                element.data += 1

    start = time.perf_counter()
    _run_all([reader] * cfg.num_readers + [writer] * cfg.num_writers)
    elapsed = time.perf_counter() - start
    with read_guard():
        return elapsed, element.data


def bench_mutex(cfg: BenchConfig) -> tuple[float, int]:
    """Run ``cfg`` with one mutex; return wall-clock seconds and the final value."""
    lock = threading.Lock()
    return _bench(cfg, lambda: lock, lambda: lock)


def bench_rwlock(cfg: BenchConfig) -> tuple[float, int]:
    """Run ``cfg`` with a reader-writer lock; return wall-clock seconds and the final value."""
    lock = RWLock()
    return _bench(cfg, lock.read_locked, lock.write_locked)


def _require(samples: Sequence[float]) -> None:
    if not samples:
        raise ValueError("no samples")


def duration_avg(samples: Sequence[float]) -> float:
    """Mean of ``samples``."""
    _require(samples)
    return statistics.fmean(samples)


def duration_median(samples: Sequence[float]) -> float:
    """Element at index ``len // 2`` of the sorted samples."""
    _require(samples)
    ordered = sorted(samples)
    return ordered[len(ordered) // 2]


def duration_min(samples: Sequence[float]) -> float:
    """Smallest of ``samples``."""
    _require(samples)
    return min(samples)


def faster(mutex_time: float, rwlock_time: float) -> str:
    """Name the quicker lock, or ``"equal"`` on a tie."""
    if mutex_time < rwlock_time:
        return "Mutex"
    if rwlock_time < mutex_time:
        return "RwLock"
    return "equal"


def _ms(seconds: float) -> str:
    return f"{seconds * 1000:>10.3f}ms"


def run_benchmarks(
    configs: Sequence[BenchConfig] | None = None,
    rounds: int = BENCH_ROUNDS,
    warmup: int = WARMUP_ROUNDS,
) -> list[dict[str, Any]]:
    """Time every scenario with both locks, print a report and return the figures."""
    if rounds < 1:
        raise ValueError("at least one measured round is needed")
    if warmup < 0:
        raise ValueError("warmup rounds cannot be negative")
    configs = scenarios() if configs is None else list(configs)

    print("Benchmark: Mutex vs RwLock")
    print(f"Warmup {warmup} round(s) excluded, then {rounds} measured round(s) per lock "
          "-> min / median / avg")
    print("Measured: wall-clock time until every thread has joined\n")

    results: list[dict[str, Any]] = []
    for cfg in configs:
        for _ in range(warmup):
            bench_mutex(cfg)
            bench_rwlock(cfg)

        mutex_samples: list[float] = []
        rwlock_samples: list[float] = []
        mutex_final = rwlock_final = 0
        for _ in range(rounds):
            t_m, mutex_final = bench_mutex(cfg)
            t_r, rwlock_final = bench_rwlock(cfg)
            mutex_samples.append(t_m)
            rwlock_samples.append(t_r)

        mutex_stats = (duration_min(mutex_samples), duration_median(mutex_samples),
                       duration_avg(mutex_samples))
        rwlock_stats = (duration_min(rwlock_samples), duration_median(rwlock_samples),
                        duration_avg(rwlock_samples))
        by_median = faster(mutex_stats[1], rwlock_stats[1])
        by_min = faster(mutex_stats[0], rwlock_stats[0])

        print(f"-- {cfg.name} --")
        print(f"  Mutex  min/median/avg: {' / '.join(map(_ms, mutex_stats))}  "
              f"final_data={mutex_final} (expected writes {cfg.expected_writes})")
        print(f"  RwLock min/median/avg: {' / '.join(map(_ms, rwlock_stats))}  "
              f"final_data={rwlock_final} (expected writes {cfg.expected_writes})")
        print(f"  -> faster by median: {by_median} | by min: {by_min}\n")

        results.append({
            "name": cfg.name,
            "mutex": mutex_stats,
            "rwlock": rwlock_stats,
            "mutex_final": mutex_final,
            "rwlock_final": rwlock_final,
            "expected_writes": cfg.expected_writes,
            "faster_median": by_median,
            "faster_min": by_min,
        })
    return results


def main(argv: Sequence[str] | None = None) -> None:
    """Run the demo or the benchmark (the default)."""
    parser = argparse.ArgumentParser(description="Mutex / RwLock demos and read/write benchmark.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("demo", help="writer threads only, 10x1000, check the total is 10000")
    commands.add_parser("bench", help="compare Mutex and RwLock over several read/write ratios")
    args = parser.parse_args(argv)

    if args.command == "demo":
        print(f"[demo] Mutex - expected 10000, result = {demo_mutex()}")
        print(f"[demo] RwLock - expected 10000, result = {demo_rwlock()}")
    else:
        run_benchmarks()


if __name__ == "__main__":
    main()