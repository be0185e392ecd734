"""Producer and consumer threads sharing one bounded ring of messages."""

from __future__ import annotations

import enum
import random
import sys
import threading
from contextlib import ExitStack
from typing import TextIO

from .message import Message, random_message
from .ring import Ring

DEFAULT_INTERVAL = 2.0


class SyncMethod(enum.Enum):
    """How workers coordinate access to the shared ring."""

    SEMAPHORE = 1
    CONDITION = 2


class Role(enum.Enum):
    """What a worker does with the ring."""

    PRODUCER = "Producer"
    CONSUMER = "Consumer"


class SharedRing:
    """A ring guarded for concurrent producers and consumers.

    With ``SyncMethod.SEMAPHORE`` every step takes a per-role gate and the
    ring lock, and does nothing when the ring is full (for producers) or
    empty (for consumers). With ``SyncMethod.CONDITION`` a step waits on a
    condition until it can make progress or until ``stop`` is set.
    """

    def __init__(
        self,
        method: SyncMethod = SyncMethod.SEMAPHORE,
        size: int = 10,
        output: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.method = SyncMethod(method)
        self.ring = Ring(size)
        self._output = output if output is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()
        self._producer_gate = threading.Lock()
        self._consumer_gate = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._print_lock = threading.Lock()
        self._finished = {Role.PRODUCER: 0, Role.CONSUMER: 0}

    def _write(self, text: str) -> None:
        with self._print_lock:
            self._output.write(text)
            self._output.flush()

    def _guard(self, gate: threading.Lock) -> ExitStack:
        stack = ExitStack()
        if self.method is SyncMethod.SEMAPHORE:
            stack.enter_context(gate)
        stack.enter_context(self._lock)
        return stack

    def produce_once(self, stop: threading.Event | None = None) -> Message | None:
        """Append one random message if there is room; return it, or None."""
        stop = stop if stop is not None else threading.Event()
        with self._guard(self._producer_gate):
            if self.method is SyncMethod.CONDITION:
                while self.ring.is_full() and not stop.is_set():
                    self._not_full.wait()
                if stop.is_set():
                    return None
            if self.ring.is_full():
                return None
            message = random_message(self._rng)
            self.ring.push(message)
            self._write(f"--Append {self.ring.added} message:\n{message.describe()}\n")
            if self.method is SyncMethod.CONDITION:
                self._not_empty.notify()
            return message

    def consume_once(self, stop: threading.Event | None = None) -> Message | None:
        """Remove the oldest message if there is one; return it, or None."""
        stop = stop if stop is not None else threading.Event()
        with self._guard(self._consumer_gate):
            if self.method is SyncMethod.CONDITION:
                while len(self.ring) == 0 and not stop.is_set():
                    self._not_empty.wait()
                if stop.is_set():
                    return None
            if len(self.ring) == 0:
                return None
            index = self.ring.deleted
            message = self.ring.pop()
            self._write(f"--Ejected {index} message:\n{message.describe()}\n")
            if self.method is SyncMethod.CONDITION:
                self._not_full.notify()
            return message

    def stats(self) -> dict[str, int]:
        """Return a consistent snapshot of the ring's counters."""
        with self._lock:
            return {
                "added": self.ring.added,
                "deleted": self.ring.deleted,
                "current": len(self.ring),
                "size": self.ring.size,
            }

    def grow(self) -> None:
        """Raise the ring capacity by one."""
        with self._lock:
            self.ring.grow()
            if self.method is SyncMethod.CONDITION:
                self._not_full.notify_all()

    def shrink(self) -> Message | None:
        """Lower the ring capacity by one; return a message dropped to make it fit.

        Raises ValueError when the capacity is already zero.
        """
        with self._lock:
            dropped = self.ring.shrink()
            if self.method is SyncMethod.CONDITION:
                self._not_full.notify_all()
            return dropped

    def wake_all(self) -> None:
        """Wake every worker waiting on a condition so it can see a stop request."""
        with self._lock:
            self._not_empty.notify_all()
            self._not_full.notify_all()

    def _announce_finish(self, role: Role) -> None:
        with self._print_lock:
            self._finished[role] += 1
            number = self._finished[role]
            self._output.write(f"\n{role.value} {number} has finished\n")
            self._output.flush()


class Worker:
    """A thread that repeatedly produces into or consumes from a shared ring."""

    def __init__(
        self,
        role: Role,
        shared: SharedRing,
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        self.role = Role(role)
        self.shared = shared
        self.interval = interval
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    @property
    def alive(self) -> bool:
        """True while the worker thread is running."""
        return self._thread.is_alive()

    def _run(self) -> None:
        step = (
            self.shared.produce_once
            if self.role is Role.PRODUCER
            else self.shared.consume_once
        )
        while not self._stop.is_set():
            step(self._stop)
            self._stop.wait(self.interval)
        self.shared._announce_finish(self.role)

    def start(self) -> None:
        """Start the worker thread."""
        self._thread.start()

    def stop(self) -> None:
        """Ask the worker to finish and wait until it has."""
        self._stop.set()
        self.shared.wake_all()
        if self._thread.ident is not None:
            self._thread.join()