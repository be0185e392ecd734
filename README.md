# ringipc

An interactive producer-consumer demonstration. Producer threads generate
random messages and append them to a bounded ring. Each message carries a
CRC-16 checksum of its payload. Consumer threads remove messages from the
front of the ring. While it runs you can add and remove workers, resize the
ring and read statistics.

## Installation

```
pip install .
```

## Running

```
ringipc
```

Options:

- `--method {1,2}` picks the synchronization method, so the program does not
  ask for it.
- `--interval SECONDS` sets how long each worker sleeps between steps. The
  default is 2.

Without `--method` the program asks for the method when it starts:

```
1 - POSIX semaphores and mutex
2 - Conditional variables
```

An answer of `1` selects the first method. Any other answer selects the
second one. If input ends before an answer arrives, the first method is used.

After that the program reads commands from standard input. The commands are
separated by whitespace, and only the first character of each one counts.

| Command | Action                                  |
|---------|-----------------------------------------|
| `p`     | add a producer thread                   |
| `c`     | add a consumer thread                   |
| `r`     | remove the most recently added producer |
| `d`     | remove the most recently added consumer |
| `s`     | show statistics                         |
| `+`     | increase the ring capacity by one       |
| `-`     | decrease the ring capacity by one       |
| `h`     | show help                               |
| `q`     | stop all workers and quit               |

Unknown commands are ignored. The ring starts with a capacity of 10, and each
side can have at most 50 workers.

When `-` lowers the capacity below the number of messages held, the oldest
message is dropped. At a capacity of zero, `-` prints `RING IS EMPTY`.

When input ends, or when you press Ctrl-C, every worker is stopped before the
program exits.

## Synchronization methods

Both methods share one ring between threads of a single process.

- **Method 1 (semaphore):** each step takes a per-role gate and the ring lock.
  A producer does nothing when the ring is full. A consumer does nothing when
  the ring is empty.
- **Method 2 (condition):** a step waits on a condition until it can make
  progress or until the worker is asked to stop.

## Library use

The pieces can be used on their own.

- `ringipc.message`
  - `Message` is a frozen dataclass with `data` (at most 255 bytes), `type`
    (0 to 255) and a computed `checksum`. It also has `size` and `describe()`.
  - `crc16(data)` computes CRC-16/CCITT-FALSE: polynomial 0x1021, initial
    value 0xFFFF.
  - `random_message(rng=None)` builds a message with a random payload of
    ASCII letters.
- `ringipc.ring`
  - `Ring(size)` is a bounded FIFO of messages with `push`, `pop`,
    `is_full`, `grow`, `shrink`, `clear` and `len()`.
  - It keeps `added` and `deleted` counters.
  - `push` on a full ring raises `OverflowError`.
  - `pop` on an empty ring raises `IndexError`.
  - `shrink` at capacity zero raises `ValueError`.
- `ringipc.workers`
  - `SharedRing(method, size, output, rng)` guards a `Ring` with one of the
    `SyncMethod` values. It offers `produce_once`, `consume_once`, `stats`,
    `grow`, `shrink` and `wake_all`.
  - `Worker(role, shared, interval)` is a producer or consumer thread, chosen
    by `Role`, with `start()` and `stop()`.
- `ringipc.cli`
  - `Controller(method, output, interval)` runs single commands through
    `handle(command)` and stops everything with `shutdown()`. It can also be
    used as a context manager.
  - `main(argv=None)` is the console entry point.

## What it does not do

The workers are threads inside one process, and they coordinate through
Python locks and conditions. Separate processes cannot attach to the ring,
and nothing is stored or shared outside the running program. The label
"POSIX semaphores" in the menu only names the first method.

## Tests

```
pip install .[test]
pytest
```