"""Threads taking turns, chattering threads, and a sender/receiver pipeline."""

from __future__ import annotations

import random
import sys
import threading
import time
from collections import deque
from queue import Empty, Queue
from typing import Callable, Deque, Iterable, List, Optional, TextIO, Tuple

ARRAY_SIZE = 10
ZERO_MESSAGE = "Zero array detected!"
ENOUGH_MESSAGE = "Alright! That's enough babbling!"
_POLL_SECONDS = 0.05
_STOP = object()

Array = Tuple[int, ...]


def _announce(index: int) -> None:
    print(f"Thread {index} is running", flush=True)


def run_ring(
    n: int, rounds: int = 100, action: Optional[Callable[[int], None]] = None
) -> None:
    """Run ``n`` threads that take turns in order, each calling ``action(i)`` ``rounds`` times.

    The first error raised by ``action`` is re-raised once every thread has finished.
    """
    if n < 1:
        raise ValueError("at least one thread is required")
    if rounds < 0:
        raise ValueError("rounds must be non-negative")
    act = action if action is not None else _announce
    turns = [threading.Semaphore(0) for _ in range(n)]
    turns[0].release()
    errors: List[BaseException] = []

    def worker(index: int) -> None:
        for _ in range(rounds):
            turns[index].acquire()
            try:
                act(index)
            except Exception as exc:  # re-raised after all threads finish
                errors.append(exc)
            finally:
                turns[(index + 1) % n].release()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]


def babble(limit: int = 10, out: Optional[TextIO] = None) -> int:
    """Two threads print numbered babble lines until ``limit``, then the rest is silenced.

    Returns the number of babble lines written.
    """
    stream = out if out is not None else sys.stdout
    lock = threading.Lock()
    count = 0

    def talk() -> None:
        nonlocal count
        while True:
            with lock:
                if count >= limit:
                    return
                stream.write(f"Babble Babble {count}\n")
                count += 1

    other = threading.Thread(target=talk, daemon=True)
    other.start()
    talk()
    with lock:
        stream.write(f"{ENOUGH_MESSAGE}\n")
    other.join()
    return count


def _as_array(data: Iterable[int]) -> Array:
    array = tuple(int(value) for value in data)
    if len(array) != ARRAY_SIZE:
        raise ValueError(f"expected {ARRAY_SIZE} values, got {len(array)}")
    return array


def _write(out: Optional[TextIO], text: str) -> None:
    stream = out if out is not None else sys.stdout
    stream.write(text)
    stream.flush()


class DataQueue:
    """A thread-safe first-in first-out queue of fixed-size integer arrays."""

    def __init__(self) -> None:
        self._items: Queue = Queue()

    def enqueue(self, data: Iterable[int]) -> None:
        self._items.put(_as_array(data))

    def dequeue(self) -> Array:
        """Remove and return the oldest array, waiting for one if needed."""
        return self._items.get()

    def _poll(self, timeout: float) -> Array:
        return self._items.get(timeout=timeout)

    def __len__(self) -> int:
        return self._items.qsize()


class Sender:
    """Forwards arrays to a shared queue from a background thread.

    An all-zero array is reported and ends forwarding; it is not passed on.
    """

    def __init__(self, shared: DataQueue, out: Optional[TextIO] = None) -> None:
        self._shared = shared
        self._out = out
        self._inbox: Queue = Queue()
        self._closed = False
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def __enter__(self) -> Sender:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def send(self, data: Iterable[int]) -> None:
        if self._closed:
            raise RuntimeError("sender is closed")
        self._inbox.put(_as_array(data))

    def close(self) -> None:
        """Forward everything already sent, then stop the background thread."""
        if not self._closed:
            self._closed = True
            self._inbox.put(_STOP)
        self._thread.join()

    def _run(self) -> None:
        while True:
            item = self._inbox.get()
            if item is _STOP:
                return
            if not any(item):
                _write(self._out, f"{ZERO_MESSAGE}\n")
                return
            self._shared.enqueue(item)


class Receiver:
    """Collects arrays from a shared queue on a background thread.

    An all-zero array is reported and ends collecting.
    """

    def __init__(self, shared: DataQueue, out: Optional[TextIO] = None) -> None:
        self._shared = shared
        self._out = out
        self._items: Deque[Array] = deque()
        self._ready = threading.Condition()
        self._running = True
        self._active = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def __enter__(self) -> Receiver:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def receive(self) -> Array:
        """Return the oldest collected array, waiting while collection goes on.

        Raises ``IndexError`` when collection has ended and nothing is left.
        """
        with self._ready:
            self._ready.wait_for(lambda: self._items or not self._active)
            if not self._items:
                raise IndexError("no data to receive")
            return self._items.popleft()

    def close(self) -> None:
        """Stop collecting and wait for the background thread."""
        self._running = False
        self._thread.join()

    def _run(self) -> None:
        try:
            while self._running:
                try:
                    item = self._shared._poll(_POLL_SECONDS)
                except Empty:
                    continue
                if not any(item):
                    _write(self._out, f"{ZERO_MESSAGE}\n")
                    break
                with self._ready:
                    self._items.append(item)
                    self._ready.notify_all()
        finally:
            with self._ready:
                self._active = False
                self._ready.notify_all()


def send_random_data(
    queue: DataQueue, count: int, rng: Optional[random.Random] = None
) -> List[Array]:
    """Send ``count`` random arrays through a sender, pausing randomly, then a zero array.

    Values lie in ``[-100, 100)``. Returns the arrays sent, in order.
    """
    gen = rng if rng is not None else random.Random()
    sent: List[Array] = []
    with Sender(queue) as sender:
        for _ in range(count):
            data = tuple(gen.randrange(200) - 100 for _ in range(ARRAY_SIZE))
            time.sleep(gen.randrange(100_000) / 1_000_000)
            sender.send(data)
            sent.append(data)
        time.sleep(gen.randrange(100_000) / 1_000_000)
        sender.send([0] * ARRAY_SIZE)
    return sent