"""Token-sequence similarity: exact block matching and approximate matching."""

from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple

_MOD = 1_000_000_007
_BASE = 10
_MAX_SIZE = 1_000_000
_WINDOW = 10
_MAX_RECORDED = 20
_APPROX_MIN = 30
_PLAGIARISM_RATIO = 0.3


@dataclass(frozen=True)
class Match:
    """A common block of tokens; ends are inclusive."""

    start1: int
    start2: int
    end1: int
    end2: int
    length: int


def _leaf_count(size: int) -> int:
    if size <= 0 or size > _MAX_SIZE:
        return 1
    return 1 << (size - 1).bit_length()


class SegmentTree:
    """Point-update, range-maximum tree over half-open index ranges."""

    def __init__(self, size: int) -> None:
        self.leaf_count = _leaf_count(size)
        self.tree = [0] * (2 * self.leaf_count - 1)

    def update(self, index: int, value: int) -> None:
        """Raise the value stored at ``index`` to at least ``value``."""
        if not 0 <= index < self.leaf_count:
            raise IndexError(f"index {index} outside tree of {self.leaf_count} leaves")
        node = index + self.leaf_count - 1
        self.tree[node] = max(self.tree[node], value)
        while node:
            node = (node - 1) // 2
            self.tree[node] = max(self.tree[2 * node + 1], self.tree[2 * node + 2])

    def query(self, left: int, right: int) -> int:
        """Maximum over indices in ``[left, right)``, 0 when empty."""
        return self._query(left, right, 0, self.leaf_count, 0)

    def _query(self, left: int, right: int, lo: int, hi: int, node: int) -> int:
        if lo >= right or hi <= left:
            return 0
        if left <= lo and hi <= right:
            return self.tree[node]
        mid = (lo + hi) // 2
        return max(
            self._query(left, right, lo, mid, 2 * node + 1),
            self._query(left, right, mid, hi, 2 * node + 2),
        )


class SegmentTree2D:
    """Point-update, rectangle-maximum tree built from nested segment trees."""

    def __init__(self, size1: int, size2: int) -> None:
        valid = 0 < size1 <= _MAX_SIZE and 0 < size2 <= _MAX_SIZE
        self.leaf_count = _leaf_count(size1) if valid else 1
        self._inner_size = size2 if valid else 1
        self._trees: Dict[int, SegmentTree] = {}

    def _tree(self, node: int) -> SegmentTree:
        tree = self._trees.get(node)
        if tree is None:
            tree = self._trees[node] = SegmentTree(self._inner_size)
        return tree

    def update(self, x: int, y: int, value: int) -> None:
        """Raise the value stored at ``(x, y)`` to at least ``value``."""
        if not 0 <= x < self.leaf_count:
            raise IndexError(f"row {x} outside tree of {self.leaf_count} leaves")
        node = x + self.leaf_count - 1
        self._tree(node).update(y, value)
        while node:
            node = (node - 1) // 2
            self._tree(node).update(y, value)

    def query(self, x1: int, x2: int, y1: int, y2: int) -> int:
        """Maximum over ``[x1, x2) x [y1, y2)``, 0 when empty."""
        return self._query(x1, x2, y1, y2, 0, self.leaf_count, 0)

    def _query(self, x1: int, x2: int, y1: int, y2: int, lo: int, hi: int, node: int) -> int:
        if lo >= x2 or hi <= x1:
            return 0
        if x1 <= lo and hi <= x2:
            tree = self._trees.get(node)
            return tree.query(y1, y2) if tree is not None else 0
        mid = (lo + hi) // 2
        return max(
            self._query(x1, x2, y1, y2, lo, mid, 2 * node + 1),
            self._query(x1, x2, y1, y2, mid, hi, 2 * node + 2),
        )


def _window_hashes(tokens: Sequence[int], length: int) -> Iterator[int]:
    """Yield the polynomial hash of every window of ``length`` tokens, in order."""
    if length <= 0:
        raise ValueError("window length must be positive")
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


def rolling_hash(tokens: Sequence[int], length: int) -> Dict[int, List[int]]:
    """Map each window hash to the start positions of the windows having it."""
    positions: Dict[int, List[int]] = defaultdict(list)
    for start, value in enumerate(_window_hashes(tokens, length)):
        positions[value].append(start)
    return dict(positions)


def _common_run(s1: Sequence[int], s2: Sequence[int], i1: int, i2: int, limit: int) -> int:
    run = 0
    for a, b in zip(s1[i1:i1 + limit], s2[i2:i2 + limit]):
        if a != b:
            break
        run += 1
    return run


def sum_of_exact_matches(s1: Sequence[int], s2: Sequence[int]) -> int:
    """Largest total length of non-overlapping, order-preserving exact blocks.

    Blocks are between 10 and 20 tokens long.
    """
    if len(s1) < _WINDOW or len(s2) < _WINDOW:
        return 0
    index = rolling_hash(s1, _WINDOW)
    matches: List[Match] = []
    for i2, value in enumerate(_window_hashes(s2, _WINDOW)):
        for i1 in index.get(value, ()):
            run = _common_run(s1, s2, i1, i2, _MAX_RECORDED)
            matches.extend(
                Match(i1, i2, i1 + n - 1, i2 + n - 1, n)
                for n in range(_WINDOW, run + 1)
            )
    matches.sort(key=lambda m: (m.end1, m.end2))

    ends1 = sorted({m.end1 for m in matches})
    ends2 = sorted({m.end2 for m in matches})
    tree = SegmentTree2D(len(ends1), len(ends2))
    for m in matches:
        best = tree.query(0, bisect_left(ends1, m.start1), 0, bisect_left(ends2, m.start2))
        tree.update(bisect_left(ends1, m.end1), bisect_left(ends2, m.end2), best + m.length)
    return tree.query(0, len(ends1), 0, len(ends2))


def find_max_approx_match(
    s1: Sequence[int], s2: Sequence[int], x: float = 0.8
) -> Tuple[int, int, int]:
    """Longest aligned stretch where at least a fraction ``x`` of tokens agree.

    Returns ``(length, start1, start2)``; only stretches of 30 tokens or more
    count, otherwise ``(0, -1, -1)``.
    """
    if len(s1) < _APPROX_MIN or len(s2) < _APPROX_MIN:
        return 0, -1, -1
    tolerance = 1 - x
    width = len(s2) + 1
    prev_len = [0] * width
    prev_mis = [0] * width
    best, start1, start2 = 0, -1, -1
    for i, a in enumerate(s1, 1):
        cur_len = [0] * width
        cur_mis = [0] * width
        for j, b in enumerate(s2, 1):
            mismatches = prev_mis[j - 1] + (a != b)
            length = prev_len[j - 1] + 1
            if mismatches > tolerance * length:
                mismatches = length = 0
            cur_mis[j] = mismatches
            cur_len[j] = length
            if length > best and length >= _APPROX_MIN:
                best, start1, start2 = length, i - length, j - length
        prev_len, prev_mis = cur_len, cur_mis
    return best, start1, start2


def match_submissions(
    submission1: Sequence[int], submission2: Sequence[int]
) -> Tuple[int, int, int, int, int]:
    """Compare two token sequences.

    Returns ``(flag, exact_total, approx_length, approx_start1, approx_start2)``
    where ``flag`` is 1 when the exact total reaches 30% of the shorter one.
    """
    exact = sum_of_exact_matches(submission1, submission2)
    length, start1, start2 = find_max_approx_match(submission1, submission2, 0.8)
    flag = int(exact >= _PLAGIARISM_RATIO * min(len(submission1), len(submission2)))
    return flag, exact, length, start1, start2