"""Two-pointer and sliding-window drills."""

from collections import Counter, deque
from typing import Iterable, Sequence

_BASES = "ACGT"


def count_consecutive_sums(n: int) -> int:
    """Count the ways to write ``n`` as a sum of consecutive positive integers."""
    if n < 1:
        raise ValueError("n must be positive")
    start = end = total = count = 1
    while end != n:
        if total == n:
            count += 1
            end += 1
            total += end
        elif total > n:
            total -= start
            start += 1
        else:
            end += 1
            total += end
    return count


def count_pairs_with_sum(values: Iterable[int], target: int) -> int:
    """Count disjoint pairs of items whose sum equals ``target``."""
    items = sorted(values)
    low, high = 0, len(items) - 1
    count = 0
    while low < high:
        pair = items[low] + items[high]
        if pair < target:
            low += 1
        elif pair > target:
            high -= 1
        else:
            count += 1
            low += 1
            high -= 1
    return count


def count_good_numbers(values: Iterable[int]) -> int:
    """Count items that equal the sum of two other items of the list."""
    items = sorted(values)
    count = 0
    for k, wanted in enumerate(items):
        low, high = 0, len(items) - 1
        while low < high:
            pair = items[low] + items[high]
            if pair == wanted:
                if low == k:
                    low += 1
                elif high == k:
                    high -= 1
                else:
                    count += 1
                    break
            elif pair < wanted:
                low += 1
            else:
                high -= 1
    return count


def count_valid_passwords(dna: str, window: int, required: Sequence[int]) -> int:
    """Count windows of ``dna`` holding at least ``required`` of each of A, C, G, T."""
    if len(required) != len(_BASES):
        raise ValueError("four minimum counts (A, C, G, T) are required")
    if not 1 <= window <= len(dna):
        raise ValueError("window must fit inside the string")
    need = dict(zip(_BASES, required))
    counts = Counter(dna[:window])

    def satisfied() -> bool:
        return all(counts[base] >= need[base] for base in _BASES)

    result = int(satisfied())
    for incoming, outgoing in zip(dna[window:], dna):
        counts[incoming] += 1
        counts[outgoing] -= 1
        result += satisfied()
    return result


def sliding_window_minimums(values: Iterable[int], window: int) -> list[int]:
    """Minimum of the last ``window`` items at every position."""
    if window < 1:
        raise ValueError("window must be positive")
    candidates: deque[tuple[int, int]] = deque()
    minimums = []
    for index, value in enumerate(values):
        while candidates and candidates[-1][0] > value:
            candidates.pop()
        candidates.append((value, index))
        if candidates[0][1] <= index - window:
            candidates.popleft()
        minimums.append(candidates[0][0])
    return minimums