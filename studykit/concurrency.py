"""Classic synchronisation problems: bounded buffers, readers and writers, dining philosophers."""

from __future__ import annotations

import enum
import random
import threading
import time
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

BUFFER_CAPACITY = 100
VALUE_LIMIT = 100
SHARED_TEXT_LENGTH = 5
CHARACTER_LIMIT = 126
DEFAULT_SEATS = 5
DEFAULT_MEALS = 10000

_DONE = object()


class BoundedBuffer:
    """A first-in, first-out buffer of fixed capacity shared between threads.

    ``put`` waits while the buffer is full and ``get`` waits while it is empty.
    """

    def __init__(self, capacity: int = BUFFER_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def put(self, value: Any) -> None:
        """Add a value, waiting for room if the buffer is full."""
        with self._not_full:
            while len(self._items) >= self.capacity:
                self._not_full.wait()
            self._items.append(value)
            self._not_empty.notify()

    def get(self) -> Any:
        """Remove and return the oldest value, waiting if the buffer is empty."""
        with self._not_empty:
            while not self._items:
                self._not_empty.wait()
            value = self._items.popleft()
            self._not_full.notify()
            return value


class ReadersWriterLock:
    """A lock that admits many readers at once or a single writer.

    Readers take precedence: the first reader in shuts writers out and the
    last reader out lets them in again.
    """

    def __init__(self) -> None:
        self._readers = 0
        self._count_lock = threading.Lock()
        self._write = threading.Semaphore(1)

    @contextmanager
    def reading(self) -> Iterator[None]:
        """Hold the lock for reading for the duration of the block."""
        with self._count_lock:
            self._readers += 1
            if self._readers == 1:
                self._write.acquire()
        try:
            yield
        finally:
            with self._count_lock:
                self._readers -= 1
                if self._readers == 0:
                    self._write.release()

    @contextmanager
    def writing(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        self._write.acquire()
        try:
            yield
        finally:
            self._write.release()


class PhilosopherState(enum.Enum):
    THINKING = "thinking"
    HUNGRY = "hungry"
    EATING = "eating"


class PhilosopherTable:
    """A round table where a philosopher eats only when neither neighbour does."""

    def __init__(self, seats: int = DEFAULT_SEATS) -> None:
        if seats < 2:
            raise ValueError("a table needs at least two seats")
        self.seats = seats
        self._lock = threading.Lock()
        self._turns = [threading.Condition(self._lock) for _ in range(seats)]
        self._states = [PhilosopherState.THINKING] * seats

    def _check_seat(self, seat: int) -> None:
        if not 0 <= seat < self.seats:
            raise IndexError(f"seat {seat} is not in 0..{self.seats - 1}")

    def _left(self, seat: int) -> int:
        return (seat + self.seats - 1) % self.seats

    def _right(self, seat: int) -> int:
        return (seat + 1) % self.seats

    def _try_to_eat(self, seat: int) -> None:
        if (
            self._states[seat] is PhilosopherState.HUNGRY
            and self._states[self._left(seat)] is not PhilosopherState.EATING
            and self._states[self._right(seat)] is not PhilosopherState.EATING
        ):
            self._states[seat] = PhilosopherState.EATING
            self._turns[seat].notify()

    def take_forks(self, seat: int) -> None:
        """Wait until the philosopher at seat can pick up both forks."""
        self._check_seat(seat)
        with self._lock:
            if self._states[seat] is not PhilosopherState.THINKING:
                raise RuntimeError(f"philosopher {seat} is already at the forks")
            self._states[seat] = PhilosopherState.HUNGRY
            self._try_to_eat(seat)
            while self._states[seat] is not PhilosopherState.EATING:
                self._turns[seat].wait()

    def put_forks(self, seat: int) -> None:
        """Put both forks down and let hungry neighbours eat."""
        self._check_seat(seat)
        with self._lock:
            if self._states[seat] is not PhilosopherState.EATING:
                raise RuntimeError(f"philosopher {seat} is not eating")
            self._states[seat] = PhilosopherState.THINKING
            self._try_to_eat(self._left(seat))
            self._try_to_eat(self._right(seat))


@dataclass(frozen=True)
class ProducerConsumerResult:
    """Values produced, values consumed, and what was left in the buffer."""

    produced: list[int]
    consumed: list[int]
    remaining: int


@dataclass(frozen=True)
class ReadersWriterResult:
    """Every text written (the initial one first) and every text read."""

    writes: list[str]
    reads: list[str]


def _start_all(threads: list[threading.Thread]) -> None:
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def producer_consumer(
    item_count: int = 100,
    consumer_count: int = 2,
    capacity: int = BUFFER_CAPACITY,
    rng: random.Random | None = None,
) -> ProducerConsumerResult:
    """Run one producer of random values below 100 against several consumers."""
    if item_count < 0:
        raise ValueError("item_count must not be negative")
    if consumer_count < 1:
        raise ValueError("consumer_count must be at least 1")
    rng = rng if rng is not None else random.Random()
    buffer = BoundedBuffer(capacity)
    produced: list[int] = []
    consumed: list[int] = []
    consumed_lock = threading.Lock()

    def produce() -> None:
        for _ in range(item_count):
            value = rng.randrange(VALUE_LIMIT)
            produced.append(value)
            buffer.put(value)
        for _ in range(consumer_count):
            buffer.put(_DONE)

    def consume() -> None:
        while (value := buffer.get()) is not _DONE:
            with consumed_lock:
                consumed.append(value)

    threads = [threading.Thread(target=produce)]
    threads += [threading.Thread(target=consume) for _ in range(consumer_count)]
    _start_all(threads)
    return ProducerConsumerResult(produced, consumed, len(buffer))


def dining_philosophers(
    meals: int = DEFAULT_MEALS, seats: int = DEFAULT_SEATS
) -> list[int]:
    """Let philosophers eat until the meals run out; return meals eaten per seat."""
    if meals < 0:
        raise ValueError("meals must not be negative")
    table = PhilosopherTable(seats)
    eaten = [0] * seats
    served = 0
    served_lock = threading.Lock()

    def philosopher(seat: int) -> None:
        nonlocal served
        while True:
            table.take_forks(seat)
            try:
                with served_lock:
                    if served >= meals:
                        return
                    served += 1
                    eaten[seat] += 1
            finally:
                table.put_forks(seat)
            time.sleep(0)

    _start_all([threading.Thread(target=philosopher, args=(s,)) for s in range(seats)])
    return eaten


def readers_writer(
    rounds: int = 10, reader_count: int = 2, rng: random.Random | None = None
) -> ReadersWriterResult:
    """Let one writer rewrite a short shared text while readers read it.

    The writer writes ``rounds`` times and each reader reads ``rounds`` times.
    """
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    if reader_count < 1:
        raise ValueError("reader_count must be at least 1")
    rng = rng if rng is not None else random.Random()
    lock = ReadersWriterLock()

    def random_text() -> list[str]:
        return [chr(rng.randrange(CHARACTER_LIMIT)) for _ in range(SHARED_TEXT_LENGTH)]

    shared = random_text()
    writes = ["".join(shared)]
    reads: list[str] = []
    reads_lock = threading.Lock()

    def writer() -> None:
        for _ in range(rounds):
            text = random_text()
            with lock.writing():
                for position, char in enumerate(text):
                    shared[position] = char
                    time.sleep(0)
                writes.append("".join(shared))

    def reader() -> None:
        for _ in range(rounds):
            with lock.reading():
                snapshot = []
                for char in shared:
                    snapshot.append(char)
                    time.sleep(0)
            with reads_lock:
                reads.append("".join(snapshot))

    threads = [threading.Thread(target=writer)]
    threads += [threading.Thread(target=reader) for _ in range(reader_count)]
    _start_all(threads)
    return ReadersWriterResult(writes, reads)