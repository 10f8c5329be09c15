import threading
import time

import pytest

from basic_practice.lockbench import (
    TOTAL_READS_PER_RUN,
    TOTAL_WRITES_PER_RUN,
    BenchConfig,
    RWLock,
    bench_mutex,
    bench_rwlock,
    demo_mutex,
    demo_rwlock,
    duration_avg,
    duration_median,
    duration_min,
    faster,
    main,
    run_benchmarks,
    scenarios,
)


def _small(readers=2, writers=3, writes=50):
    return BenchConfig("small", readers, writers, 20, writes, 4)


def _two_readers_outcomes(lock):
    """Return how two readers fared when both tried to hold the read lock at once."""
    barrier = threading.Barrier(2, timeout=5)
    outcomes = []
    guard = threading.Lock()

    def reader():
        with lock.read_locked():
            try:
                barrier.wait()
                result = "together"
            except threading.BrokenBarrierError:
                result = "serialized"
        with guard:
            outcomes.append(result)

    workers = [threading.Thread(target=reader) for _ in range(2)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()
    return outcomes


def _values_seen_during_write(lock):
    """Return what a reader observed when it started while a writer held the lock."""
    shared = {"value": "before"}
    seen = []

    def reader():
        with lock.read_locked():
            seen.append(shared["value"])

    with lock.write_locked():
        shared["value"] = "partial"
        worker = threading.Thread(target=reader)
        worker.start()
        time.sleep(0.1)
        shared["value"] = "after"
    worker.join(5)
    return seen


def test_demo_mutex_reaches_total():
    assert demo_mutex(10, 1000) == 10000


def test_demo_rwlock_reaches_total():
    assert demo_rwlock(10, 1000) == 10000


def test_demo_custom_sizes():
    assert demo_mutex(3, 7) == 21
    assert demo_rwlock(4, 5) == 20


def test_bench_mutex_counts_every_write():
    cfg = _small()
    elapsed, final = bench_mutex(cfg)
    assert final == cfg.expected_writes
    assert elapsed >= 0


def test_bench_rwlock_counts_every_write():
    cfg = _small(readers=4, writers=2, writes=30)
    elapsed, final = bench_rwlock(cfg)
    assert final == cfg.expected_writes
    assert elapsed >= 0


def test_read_only_scenario_has_zero_writes():
    cfg = BenchConfig("ro", 3, 0, 10, 0, 2)
    assert bench_rwlock(cfg)[1] == 0
    assert bench_mutex(cfg)[1] == 0


def test_scenarios_share_totals():
    configs = scenarios()
    assert len(configs) == 4
    for cfg in configs:
        assert cfg.num_readers * cfg.reads_per_reader == TOTAL_READS_PER_RUN
    assert configs[0].num_writers == 0
    for cfg in configs[1:]:
        assert cfg.expected_writes == TOTAL_WRITES_PER_RUN
    assert configs[-1].read_inner_loops == 1


def test_duration_stats():
    samples = [0.5, 0.1, 0.3, 0.2]
    assert duration_min(samples) == 0.1
    assert duration_median(samples) == 0.3
    assert duration_avg(samples) == pytest.approx(0.275)
    assert samples == [0.5, 0.1, 0.3, 0.2]


@pytest.mark.parametrize("func", [duration_min, duration_median, duration_avg])
def test_duration_stats_reject_empty(func):
    with pytest.raises(ValueError):
        func([])


def test_faster():
    assert faster(1.0, 2.0) == "Mutex"
    assert faster(2.0, 1.0) == "RwLock"
    assert faster(1.5, 1.5) == "equal"


def test_rwlock_allows_concurrent_readers():
    assert _two_readers_outcomes(RWLock()) == ["together", "together"]


def test_rwlock_writer_excludes_readers():
    assert _values_seen_during_write(RWLock()) == ["after"]


def test_run_benchmarks_reports_each_config(capsys):
    configs = [_small(), BenchConfig("ro", 2, 0, 5, 0, 2)]
    results = run_benchmarks(configs, rounds=2, warmup=0)
    assert [r["name"] for r in results] == ["small", "ro"]
    for result in results:
        assert result["mutex_final"] == result["expected_writes"]
        assert result["rwlock_final"] == result["expected_writes"]
        assert result["faster_median"] == faster(result["mutex"][1], result["rwlock"][1])
        assert result["mutex"][0] <= result["mutex"][2]
    assert "-- small --" in capsys.readouterr().out


def test_run_benchmarks_rejects_zero_rounds():
    with pytest.raises(ValueError):
        run_benchmarks([_small()], rounds=0)


def test_main_demo(capsys):
    main(["demo"])
    out = capsys.readouterr().out
    assert "Mutex - expected 10000, result = 10000" in out
    assert "RwLock - expected 10000, result = 10000" in out