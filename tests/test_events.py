import queue
import threading

import pytest

from basic_practice.events import Done, Tick, consume, main, produce


def test_consume_yields_ticks_in_order():
    channel = queue.Queue()
    produce(channel, count=5, delay=0)
    assert list(consume(channel)) == list(range(5))


def test_consume_stops_at_done():
    channel = queue.Queue()
    channel.put(Tick(1))
    channel.put(Done())
    channel.put(Tick(2))
    assert list(consume(channel)) == [1]
    assert channel.get_nowait() == Tick(2)


def test_produce_ends_with_done():
    channel = queue.Queue()
    produce(channel, count=2, delay=0)
    events = [channel.get_nowait() for _ in range(3)]
    assert events == [Tick(0), Tick(1), Done()]
    assert channel.empty()


def test_consume_rejects_unknown_events():
    channel = queue.Queue()
    channel.put("not an event")
    with pytest.raises(TypeError):
        list(consume(channel))


def test_consume_across_threads():
    channel = queue.Queue()
    producer = threading.Thread(target=produce, args=(channel, 4, 0.001))
    producer.start()
    received = list(consume(channel))
    producer.join()
    assert received == list(range(4))


def test_main_handles_every_tick(capsys):
    main([])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert sum("Tick(" in line for line in lines) == 5
    assert lines[-1].startswith("[consumer] Done")