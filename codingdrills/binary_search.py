"""Binary-search drills."""

from bisect import bisect_left
from typing import Iterable


def contains_all(values: Iterable[int], targets: Iterable[int]) -> list[bool]:
    """For each target, whether it occurs among ``values``."""
    ordered = sorted(values)

    def present(target: int) -> bool:
        position = bisect_left(ordered, target)
        return position < len(ordered) and ordered[position] == target

    return [present(target) for target in targets]


def min_blu_ray_size(lengths: Iterable[int], count: int) -> int:
    """Smallest disc size that fits all lessons, in order, on at most ``count`` discs."""
    items = list(lengths)
    low = max(0, max(items, default=0))
    high = sum(items)
    while low <= high:
        middle = (low + high) // 2
        used = 0
        filled = 0
        for length in items:
            if filled + length > middle:
                used += 1
                filled = 0
            filled += length
        if filled != 0:
            used += 1
        if used > count:
            low = middle + 1
        else:
            high = middle - 1
    return low


def kth_in_multiplication_table(n: int, k: int) -> int:
    """The ``k``-th smallest entry of the ``n`` by ``n`` multiplication table."""
    low, high = 1, k
    answer = 0
    while low <= high:
        middle = (low + high) // 2
        at_most = sum(min(middle // row, n) for row in range(1, n + 1))
        if at_most < k:
            low = middle + 1
        else:
            answer = middle
            high = middle - 1
    return answer