"""Sorting drills: simple sorts, selection, merge-sort counting and counting sort."""

from itertools import accumulate
from typing import Iterable

COUNTING_SORT_LIMIT = 10000


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    for _ in range(len(items) - 1):
        for j in range(len(items) - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bubble_passes(values: Iterable[int]) -> int:
    """Number of outer passes bubble sort needs before it sees a pass with no swap."""
    ranked = sorted((value, index) for index, value in enumerate(values))
    shift = max((original - position for position, (_, original) in enumerate(ranked)), default=0)
    return shift + 1


def sort_digits_descending(text: str) -> str:
    """Rearrange a string of digits into descending order."""
    if not all(ch in "0123456789" for ch in text):
        raise ValueError(f"not a digit string: {text!r}")
    return "".join(sorted(text, reverse=True))


def total_wait_time(times: Iterable[int]) -> int:
    """Least total of everyone's waiting time when served shortest first."""
    return sum(accumulate(sorted(times)))


def kth_smallest(values: Iterable[int], k: int) -> int:
    """The ``k``-th smallest item (1-based), found by quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}")
    index = k - 1
    while True:
        pivot = items[len(items) // 2]
        lower = [v for v in items if v < pivot]
        equal_count = sum(1 for v in items if v == pivot)
        if index < len(lower):
            items = lower
        elif index < len(lower) + equal_count:
            return pivot
        else:
            index -= len(lower) + equal_count
            items = [v for v in items if v > pivot]


def _merge_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) < 2:
        return list(items), 0
    middle = (len(items) + 1) // 2
    left, left_swaps = _merge_count(items[:middle])
    right, right_swaps = _merge_count(items[middle:])
    merged: list[int] = []
    swaps = left_swaps + right_swaps
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
            swaps += len(left) - i
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, swaps


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using a stable merge sort."""
    return _merge_count(list(values))[0]


def count_swaps(values: Iterable[int]) -> int:
    """Number of adjacent swaps bubble sort performs (the inversion count)."""
    return _merge_count(list(values))[1]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in ``0..10000`` by counting occurrences."""
    counts = [0] * (COUNTING_SORT_LIMIT + 1)
    for value in values:
        if not 0 <= value <= COUNTING_SORT_LIMIT:
            raise ValueError(f"value {value} outside 0..{COUNTING_SORT_LIMIT}")
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]