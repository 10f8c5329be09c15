import pytest

from basic_practice.counters import (
    SLOTS,
    AtomicCounter,
    SlotCounterMap,
    demo_atomic_counter,
    demo_slot_map,
    demo_unsynchronized_counter,
    main,
)


def test_fetch_add_returns_previous_value():
    counter = AtomicCounter(5)
    assert counter.fetch_add(3) == 5
    assert counter.load() == 8


def test_default_counter_starts_at_zero():
    assert AtomicCounter().load() == 0


def test_atomic_counter_demo_loses_no_updates():
    assert demo_atomic_counter(10, 1000) == 10 * 1000


def test_atomic_counter_demo_with_custom_sizes():
    assert demo_atomic_counter(3, 250) == 3 * 250


def test_slot_map_add_and_get():
    counts = SlotCounterMap()
    counts.add(2, 7)
    counts.add(2, 1)
    assert counts.get(2) == 8
    assert counts.get(3) == 0


def test_slot_map_default_size():
    counts = SlotCounterMap()
    assert len(counts) == SLOTS
    assert counts.get(SLOTS - 1) == 0
    with pytest.raises(IndexError):
        counts.get(SLOTS)


@pytest.mark.parametrize("key", [-1, 4])
def test_slot_map_rejects_keys_out_of_range(key):
    counts = SlotCounterMap(4)
    with pytest.raises(IndexError):
        counts.add(key, 1)


def test_slot_map_needs_slots():
    with pytest.raises(ValueError):
        SlotCounterMap(0)


def test_slot_map_demo_counts_per_thread_key():
    counts = demo_slot_map(4, 1000)
    assert [counts.get(k) for k in range(4)] == [1000] * 4
    assert counts.get(4) == 0


def test_slot_map_demo_wraps_keys():
    counts = demo_slot_map(SLOTS + 2, 10)
    assert counts.get(0) == 20
    assert counts.get(1) == 20
    assert counts.get(2) == 10


def test_unsynchronized_counter_never_exceeds_total():
    result = demo_unsynchronized_counter(10, 1000)
    assert 0 < result <= 10 * 1000


def test_main_prints_totals(capsys):
    main([])
    out = capsys.readouterr().out
    assert "atomic total = 10000" in out
    assert "key 3 count = 1000" in out