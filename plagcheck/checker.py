"""Background plagiarism checker comparing each new submission with earlier ones."""

from __future__ import annotations

import queue
import threading
import time
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .structures import Submission

SHORT_WINDOW = 15
LONG_WINDOW = 75
PAIR_THRESHOLD = 10
TOTAL_THRESHOLD = 20
RECENT_SECONDS = 1.0

_MOD = 1_000_000_007
_BASE = 257
_STOP = object()

Tokenizer = Callable[[str], Sequence[int]]
_Index = Dict[int, List[Tuple[Submission, int]]]


def _window_hashes(tokens: Sequence[int], length: int) -> Iterator[int]:
    """Yield the polynomial hash of every window of ``length`` tokens, in order."""
    if len(tokens) < length:
        return
    high = pow(_BASE, length - 1, _MOD)
    value = 0
    for token in tokens[:length]:
        value = (value * _BASE + token) % _MOD
    yield value
    for old, new in zip(tokens, tokens[length:]):
        value = ((value - old * high) * _BASE + new) % _MOD
        yield value


def _same_run(a: Sequence[int], b: Sequence[int], i: int, j: int, length: int) -> bool:
    return i + length <= len(a) and j + length <= len(b) and (
        a[i:i + length] == b[j:j + length]
    )


def _claim(
    a: Sequence[int], b: Sequence[int], i: int, j: int, length: int, taken: List[bool]
) -> bool:
    """Mark ``a[i:i+length]`` as used if it matches ``b`` there and is still free."""
    if not _same_run(a, b, i, j, length) or any(taken[i:i + length]):
        return False
    taken[i:i + length] = [True] * length
    return True


class PlagiarismChecker:
    """Tokenizes submissions and checks them against earlier ones in the background.

    Submissions given at construction are reference material: they are
    compared against but never flagged. ``close`` waits until every queued
    submission has been checked.
    """

    def __init__(
        self,
        tokenize: Tokenizer,
        submissions: Iterable[Optional[Submission]] = (),
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._tokenize = tokenize
        self._clock = clock
        self._lock = threading.Lock()
        self._tokens: Dict[Submission, List[int]] = {}
        self._timestamps: Dict[Submission, float] = {}
        self._short_index: _Index = {}
        self._long_index: _Index = {}
        self._found: Dict[Submission, None] = {}
        self._initial: set = set()
        self._errors: List[BaseException] = []
        self._closed = False
        self._tokenize_queue: queue.Queue = queue.Queue()
        self._check_queue: queue.Queue = queue.Queue()

        for submission in submissions:
            if submission is None:
                continue
            self._timestamps[submission] = clock()
            self._initial.add(submission)
            self._tokenize_queue.put(submission)

        self._threads = [
            threading.Thread(target=self._tokenize_worker, daemon=True),
            threading.Thread(target=self._check_worker, daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def __enter__(self) -> PlagiarismChecker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def flagged(self) -> Tuple[Submission, ...]:
        """Submissions flagged so far, in the order they were flagged."""
        with self._lock:
            return tuple(self._found)

    def add_submission(self, submission: Optional[Submission]) -> None:
        """Queue a new submission for checking; ``None`` is ignored."""
        if self._closed:
            raise RuntimeError("checker is closed")
        if submission is None:
            return
        with self._lock:
            self._timestamps[submission] = self._clock()
        self._tokenize_queue.put(submission)

    def close(self) -> None:
        """Finish checking everything queued and stop the workers.

        Re-raises the first error met while tokenizing or checking.
        """
        if not self._closed:
            self._closed = True
            self._tokenize_queue.put(_STOP)
            for thread in self._threads:
                thread.join()
        if self._errors:
            raise self._errors[0]

    def _tokenize_worker(self) -> None:
        while True:
            item = self._tokenize_queue.get()
            if item is _STOP:
                self._check_queue.put(_STOP)
                return
            try:
                tokens = list(self._tokenize(item.codefile))
            except Exception as exc:  # reported by close()
                self._errors.append(exc)
                continue
            with self._lock:
                self._tokens[item] = tokens
            self._check_queue.put(item)

    def _check_worker(self) -> None:
        while True:
            item = self._check_queue.get()
            if item is _STOP:
                return
            try:
                self._index(item)
                self._check_short(item)
                self._check_long(item)
            except Exception as exc:  # reported by close()
                self._errors.append(exc)

    def _tokens_of(self, submission: Submission) -> List[int]:
        with self._lock:
            return self._tokens.get(submission, [])

    def _time_of(self, submission: Submission) -> float:
        with self._lock:
            return self._timestamps[submission]

    def _index(self, submission: Submission) -> None:
        tokens = self._tokens_of(submission)
        for length, index in ((SHORT_WINDOW, self._short_index), (LONG_WINDOW, self._long_index)):
            for start, value in enumerate(_window_hashes(tokens, length)):
                index.setdefault(value, []).append((submission, start))

    def _candidates(
        self, index: _Index, value: int, submission: Submission, sub_time: float
    ) -> Iterator[Tuple[Submission, int]]:
        for other, start in index.get(value, ()):
            if other is not submission and self._time_of(other) <= sub_time:
                yield other, start

    def _check_short(self, submission: Submission) -> None:
        tokens = self._tokens_of(submission)
        if len(tokens) < SHORT_WINDOW:
            return
        sub_time = self._time_of(submission)
        taken_any = [False] * len(tokens)
        taken_per: Dict[Submission, List[bool]] = {}
        counts: Dict[Submission, int] = {}
        total = 0

        for i, value in enumerate(_window_hashes(tokens, SHORT_WINDOW)):
            for other, j in self._candidates(self._short_index, value, submission, sub_time):
                other_tokens = self._tokens_of(other)
                taken = taken_per.setdefault(other, [False] * len(tokens))
                if _claim(tokens, other_tokens, i, j, SHORT_WINDOW, taken):
                    counts[other] = counts.get(other, 0) + 1
                if _claim(tokens, other_tokens, i, j, SHORT_WINDOW, taken_any):
                    total += 1

        if total >= TOTAL_THRESHOLD:
            self._flag(submission)
        for other, count in counts.items():
            if count >= PAIR_THRESHOLD:
                self._flag(submission)
                if sub_time - self._time_of(other) <= RECENT_SECONDS:
                    self._flag(other)

    def _check_long(self, submission: Submission) -> None:
        tokens = self._tokens_of(submission)
        if len(tokens) < LONG_WINDOW:
            return
        sub_time = self._time_of(submission)
        sources: Dict[Submission, None] = {}

        for i, value in enumerate(_window_hashes(tokens, LONG_WINDOW)):
            for other, j in self._candidates(self._long_index, value, submission, sub_time):
                if _same_run(tokens, self._tokens_of(other), i, j, LONG_WINDOW):
                    sources[other] = None

        if sources:
            self._flag(submission)
            for other in sources:
                if sub_time - self._time_of(other) <= RECENT_SECONDS:
                    self._flag(other)

    def _flag(self, submission: Submission) -> None:
        with self._lock:
            if submission in self._found or submission in self._initial:
                return
            self._found[submission] = None
        if submission.student is not None:
            submission.student.flag(submission)
        if submission.professor is not None:
            submission.professor.flag(submission)