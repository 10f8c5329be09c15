# basic_practice

Small, self-contained exercises on shared state across threads, message
passing, reading a large file line by line, and talking over WebSockets.
Each exercise is a module you can import. Most also have a command that runs
a short demonstration.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `basic_practice.counters` | `AtomicCounter` (`fetch_add`, `load`) and `SlotCounterMap` (`add`, `get`, keys `0..slots-1`, 16 slots by default); `demo_atomic_counter`, `demo_slot_map`, and `demo_unsynchronized_counter`, which increments a plain shared field with no lock |
| `basic_practice.events` | `Tick` and `Done` events; `produce` puts ticks and then `Done` on a `queue.Queue`, `consume` yields tick values until `Done` |
| `basic_practice.stack` | `ConcurrentStack` (`push`, `pop` returning `None` when empty) and `fill_concurrently`, where thread `t` pushes `t * 1000 + i` |
| `basic_practice.left_right` | `LeftRight`, a two-slot cell: `write` fills the inactive slot and then switches to it, `read` returns a copy of the active one; `run_concurrent` runs one writer against several readers and returns what each reader saw |
| `basic_practice.swap` | `SwapCell` (`get`, `set`) and the async `run`, which has reader tasks and a writer task share a cell |
| `basic_practice.shared_reads` | `Element`, `shared_resources()` (built once, then cached), `random_index`, and `read_only_readers`, which returns `(thread id, value)` pairs |
| `basic_practice.vectors` | `get_val`: the element at an index, else the first element, else `0` |
| `basic_practice.addables` | `AStruct`, `BStruct` and `CStruct` sharing the `Addable` interface; `trait_object()` calls `add` on one of each and returns the printed lines |
| `basic_practice.lockbench` | `RWLock` (`read_locked`, `write_locked` context managers, waiting writers go first), `BenchConfig`, `scenarios()`, `demo_mutex`, `demo_rwlock`, `bench_mutex`, `bench_rwlock`, `duration_min` / `duration_median` / `duration_avg`, `faster`, and `run_benchmarks` |
| `basic_practice.fileread` | `read_file_per_line`: prints up to 50,000 lines (or a given `limit`) with each line's size in bytes and returns how many it printed |
| `basic_practice.upbit` | `WebsocketQuote.from_json`, `build_subscribe_message`, `decode_frame`, and the async `get_quote`, which subscribes to ticker pairs, prints every frame and sends `PING` every 55 seconds |
| `basic_practice.ws_server` | `WelcomeMessage`, `handle_connection` (greets the client, answers each text message, closes after 10 idle seconds by default) and `run_server` |
| `basic_practice.ws_client` | `parse_welcome`, `is_quit_command`, `signal_producer`, and the async `run_client`, which sends input lines, prints server messages and queued signals, and pings every 15 seconds |

## Library use

```python
from basic_practice.left_right import LeftRight
from basic_practice.vectors import get_val

cell = LeftRight("initial")
cell.write("first update")
assert cell.read() == "first update"

assert get_val([1, 2, 3], 3) == 1
assert get_val([1, 2, 3], 2) == 3
assert get_val([], 1) == 0
```

```python
from basic_practice.counters import AtomicCounter

counter = AtomicCounter(0)
assert counter.fetch_add(5) == 0
assert counter.load() == 5
```

## Commands

| Command | Runs |
| --- | --- |
| `bp-counters` | Atomic counter, slot map and unsynchronized counter demonstrations |
| `bp-events` | A producer thread and a consumer over a queue |
| `bp-stack` | Fills the stack from four threads and counts what pops out (1024 expected) |
| `bp-left-right` | A single-threaded check of `LeftRight`, then one writer against three readers |
| `bp-swap [--duration SECONDS]` | Ten readers and a writer sharing a `SwapCell`, until Ctrl+C or the given duration |
| `bp-shared-reads` | Ten reader threads over the shared read-only elements |
| `bp-lockbench [demo \| bench]` | `demo` checks both locks reach 10000; `bench` (the default) times the four scenarios |
| `bp-fileread [FILE]` | Prints a file line by line (defaults to `./massive_file.txt`) |
| `bp-upbit [PAIRS ...] [--url URL]` | Streams ticker quotes, by default for KRW-BTC, KRW-ETH, KRW-XRP, KRW-USDT and KRW-SOL |
| `bp-ws-server [--host HOST] [--port PORT] [--idle-timeout SECONDS]` | Starts the WebSocket server, by default on `127.0.0.1:9999` |
| `bp-ws-client [--url URL]` | Connects to that server; type a line and press Enter to send it, `quit` or `exit` to leave |

Run any command with `--help` to see its options. For the WebSocket pair,
start `bp-ws-server` in one terminal and `bp-ws-client` in another.

## What it does not do

- `bp-upbit` only prints the frames it receives; it does not store quotes or
  turn them into `WebsocketQuote` objects. Call `WebsocketQuote.from_json`
  yourself for that.
- The WebSocket server answers each client on its own; it does not relay
  messages between clients.
- `bp-fileread` has no option for the line limit; pass `limit` to
  `read_file_per_line` to change it.