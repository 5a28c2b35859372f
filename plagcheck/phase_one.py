"""Run a pairwise comparison against a directory holding expected results."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, List, Sequence, Tuple, Union

from .matching import match_submissions

RESULT_COUNT = 5

PathLike = Union[str, "os.PathLike[str]"]
Tokenizer = Callable[[Path], List[int]]


def read_expected(path: PathLike) -> Tuple[int, ...]:
    """Read the five whitespace-separated expected result values."""
    values = Path(path).read_text().split()
    if len(values) < RESULT_COUNT:
        raise ValueError(
            f"{path}: expected {RESULT_COUNT} values, found {len(values)}"
        )
    return tuple(int(value) for value in values[:RESULT_COUNT])


def run_testcase(
    test_dir: PathLike, tokenize: Tokenizer
) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Compare ``one.cpp`` with ``two.cpp`` in ``test_dir``.

    ``tokenize`` turns a file path into its token sequence. Returns the
    computed results and the expected ones from ``expected.txt``.
    """
    directory = Path(test_dir)
    output = match_submissions(
        tokenize(directory / "one.cpp"), tokenize(directory / "two.cpp")
    )
    return tuple(output), read_expected(directory / "expected.txt")


def format_report(output: Sequence[int], expected: Sequence[int]) -> str:
    """Side-by-side listing of computed and expected results."""
    lines = [
        f"Result {i}:\tYour output: {got:<10}\tSample output: {want}"
        for i, (got, want) in enumerate(zip(output, expected, strict=True))
    ]
    return "\n".join(lines) + "\n\n"