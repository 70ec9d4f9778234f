"""Greedy drills."""

import heapq
from typing import Iterable, Sequence


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Coins used when paying ``amount`` greedily from the largest coin down.

    ``coins`` is in ascending order. A coin is only taken while the remaining
    amount is strictly larger than it.
    """
    count = 0
    for coin in reversed(coins):
        if amount > coin:
            count += amount // coin
            amount %= coin
    return count


def min_card_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging all card bundles, two at a time."""
    heap = list(sizes)
    if not heap:
        raise ValueError("at least one bundle is required")
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total


def _pair_products(ordered: list[int]) -> int:
    return sum(a * b for a, b in zip(ordered[::2], ordered[1::2]))


def max_grouped_sum(values: Iterable[int]) -> int:
    """Largest sum reachable when items may be paired up and multiplied."""
    items = list(values)
    positives = sorted((v for v in items if v > 1), reverse=True)
    negatives = sorted(v for v in items if v < 0)
    ones = items.count(1)
    zeros = items.count(0)

    total = _pair_products(positives)
    if len(positives) % 2:
        total += positives[-1]
    total += _pair_products(negatives)
    if len(negatives) % 2 and zeros == 0:
        total += negatives[-1]
    return total + ones


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Most ``(start, end)`` meetings that fit in one room without overlap."""
    count = 0
    finish = -1
    for start, end in sorted(meetings, key=lambda m: (m[1], m[0])):
        if start >= finish:
            finish = end
            count += 1
    return count


def min_expression_value(expression: str) -> int:
    """Smallest value of a ``+``/``-`` expression by placing parentheses."""
    head, *rest = expression.split("-")

    def group_sum(part: str) -> int:
        return sum(int(term) for term in part.split("+"))

    return group_sum(head) - sum(group_sum(part) for part in rest)