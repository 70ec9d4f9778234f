"""Drills built on running totals and prefix sums."""

from collections import Counter
from itertools import accumulate
from typing import Iterable, Sequence

_DIGITS = frozenset("0123456789")


def digit_sum(digits: str) -> int:
    """Return the sum of the decimal digits in ``digits``."""
    bad = set(digits) - _DIGITS
    if bad:
        raise ValueError(f"not a digit string: {digits!r}")
    return sum(int(ch) for ch in digits)


def adjusted_average(scores: Iterable[int]) -> float:
    """Average of the scores after rescaling each to ``score / best * 100``."""
    values = list(scores)
    if not values:
        raise ValueError("at least one score is required")
    best = max(0, max(values))
    if best == 0:
        raise ZeroDivisionError("the highest score is zero")
    return sum(values) * 100.0 / best / len(values)


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer inclusive, 1-based ``(start, end)`` range-sum queries."""
    prefix = [0, *accumulate(values)]
    size = len(values)
    answers = []
    for start, end in queries:
        if not 1 <= start <= end <= size:
            raise IndexError(f"range ({start}, {end}) outside 1..{size}")
        answers.append(prefix[end] - prefix[start - 1])
    return answers


def grid_range_sums(
    grid: Sequence[Sequence[int]],
    queries: Iterable[tuple[int, int, int, int]],
) -> list[int]:
    """Answer 1-based ``(x1, y1, x2, y2)`` rectangle-sum queries on ``grid``."""
    rows = [list(row) for row in grid]
    width = len(rows[0]) if rows else 0
    prefix = [[0] * (width + 1)]
    for row in rows:
        if len(row) != width:
            raise ValueError("grid rows must all have the same length")
        above = prefix[-1]
        line = [0]
        for col, value in enumerate(row, start=1):
            line.append(line[col - 1] + above[col] - above[col - 1] + value)
        prefix.append(line)

    height = len(rows)
    answers = []
    for x1, y1, x2, y2 in queries:
        if not (1 <= x1 <= x2 <= height and 1 <= y1 <= y2 <= width):
            raise IndexError(f"rectangle ({x1}, {y1}, {x2}, {y2}) outside the grid")
        answers.append(
            prefix[x2][y2]
            - prefix[x1 - 1][y2]
            - prefix[x2][y1 - 1]
            + prefix[x1 - 1][y1 - 1]
        )
    return answers


def count_divisible_subarrays(values: Iterable[int], m: int) -> int:
    """Count contiguous subarrays whose sum is divisible by ``m``."""
    if m < 1:
        raise ValueError("the divisor must be positive")
    remainders = Counter(total % m for total in accumulate(values))
    return remainders[0] + sum(c * (c - 1) // 2 for c in remainders.values())