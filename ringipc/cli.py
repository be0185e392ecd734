"""Interactive console that manages producer and consumer threads."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .workers import DEFAULT_INTERVAL, Role, SharedRing, SyncMethod, Worker

DEFAULT_RING_SIZE = 10
MAX_THREADS = 50

_COMMANDS = (
    "Commands:\n"
    "  p - Add new producer thread\n"
    "  c - Add new consumer thread\n"
    "  r - Remove last producer thread\n"
    "  d - Remove last consumer thread\n"
    "  s - Show statistics\n"
    "  + - Increase ring buffer size\n"
    "  - - Decrease ring buffer size\n"
    "  q - Quit program (graceful shutdown)\n"
    "  h - help\n"
)

_METHOD_NAMES = {
    SyncMethod.SEMAPHORE: "POSIX semaphores",
    SyncMethod.CONDITION: "conditional variables",
}


class Controller:
    """Owns the shared ring and the worker threads, and runs console commands."""

    def __init__(
        self,
        method: SyncMethod = SyncMethod.SEMAPHORE,
        output: TextIO | None = None,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        self.method = SyncMethod(method)
        self.output = output if output is not None else sys.stdout
        self.interval = interval
        self.shared = SharedRing(self.method, DEFAULT_RING_SIZE, self.output)
        self.producers: list[Worker] = []
        self.consumers: list[Worker] = []
        self._closed = False

    def __enter__(self) -> Controller:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def banner(self) -> str:
        """Return the greeting shown when the program starts."""
        return (
            "\n=== IPC Producer-Consumer Program ===\n"
            f"Using {_METHOD_NAMES[self.method]}\n"
            f"{_COMMANDS}"
            f"\nCurrent ring size: {self.shared.stats()['size']}\n"
        )

    def _help(self) -> str:
        return (
            "\n=== IPC Producer-Consumer Program ===\n"
            f"{_COMMANDS}"
            f"\nCurrent ring size: {self.shared.stats()['size']}\n"
        )

    def _add(self, role: Role, workers: list[Worker]) -> None:
        if len(workers) >= MAX_THREADS:
            self._write(f"Max {role.value.lower()} threads reached.\n")
            return
        worker = Worker(role, self.shared, self.interval)
        workers.append(worker)
        worker.start()

    def _remove(self, role: Role, workers: list[Worker]) -> None:
        name = role.value.lower()
        if not workers:
            self._write(f"No {name} threads to remove\n")
            return
        workers.pop().stop()
        self._write(f"Last {name} thread removed\n")

    def _stats(self) -> str:
        stats = self.shared.stats()
        return (
            "\n=====================\n"
            f"Added: {stats['added']}\n"
            f"Getted: {stats['deleted']}\n"
            f"Producers count: {len(self.producers)}\n"
            f"Consumers count: {len(self.consumers)}\n"
            f"Current size: {stats['current']}\n"
            f"Max size: {stats['size']}\n"
            "=====================\n\n"
        )

    def handle(self, command: str) -> bool:
        """Run one command; return False once the program should exit."""
        key = command[:1]
        if key == "p":
            self._add(Role.PRODUCER, self.producers)
        elif key == "c":
            self._add(Role.CONSUMER, self.consumers)
        elif key == "s":
            self._write(self._stats())
        elif key == "+":
            self.shared.grow()
        elif key == "-":
            try:
                self.shared.shrink()
            except ValueError:
                self._write("\nRING IS EMPTY\n")
        elif key == "r":
            self._remove(Role.PRODUCER, self.producers)
        elif key == "d":
            self._remove(Role.CONSUMER, self.consumers)
        elif key == "q":
            self.shutdown()
            return False
        elif key == "h":
            self._write(self._help())
        return True

    def shutdown(self) -> None:
        """Stop every worker, newest first, and empty the ring."""
        if self._closed:
            return
        self._closed = True
        while self.producers:
            self.producers.pop().stop()
        while self.consumers:
            self.consumers.pop().stop()
        self.shared.ring.clear()
        self._write("\nGraceful shutdown complete.\n")


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ringipc",
        description="Run producer and consumer threads over a bounded ring.",
    )
    parser.add_argument(
        "--method",
        type=int,
        choices=(1, 2),
        help="1 for semaphores and mutex, 2 for condition variables",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help="seconds each worker sleeps between steps",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive console on standard input and output."""
    args = _parse_args(argv)
    out = sys.stdout
    tokens = _tokens(sys.stdin)

    choice = args.method
    if choice is None:
        out.write(
            "Select synchronization method:\n"
            "1 - POSIX semaphores and mutex\n"
            "2 - Conditional variables\n"
            "Your choice: "
        )
        out.flush()
        answer = next(tokens, "1")
        choice = 1 if answer.strip() == "1" else 2
    method = SyncMethod.SEMAPHORE if choice == 1 else SyncMethod.CONDITION

    controller = Controller(method, out, args.interval)
    out.write(controller.banner())
    out.flush()
    try:
        for token in tokens:
            if not controller.handle(token):
                return 0
    except KeyboardInterrupt:
        pass
    controller.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())