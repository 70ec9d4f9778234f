"""Stack, queue and priority-queue drills."""

import heapq
from collections import deque
from typing import Iterable, Sequence


def stack_sequence(sequence: Iterable[int]) -> list[str] | None:
    """Push/pop operations (``'+'``/``'-'``) producing ``sequence`` from 1, 2, 3, ...

    Returns ``None`` when the sequence cannot be produced with one stack.
    """
    stack: list[int] = []
    operations: list[str] = []
    upcoming = 1
    for value in sequence:
        if value >= upcoming:
            while value >= upcoming:
                stack.append(upcoming)
                upcoming += 1
                operations.append("+")
            stack.pop()
            operations.append("-")
        else:
            if not stack or stack.pop() > value:
                return None
            operations.append("-")
    return operations


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each item, the first later item that is larger, or -1."""
    answer = [-1] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and values[pending[-1]] < value:
            answer[pending.pop()] = value
        pending.append(index)
    return answer


def last_card(n: int) -> int:
    """Card left after repeatedly discarding the top and moving the next to the bottom."""
    if n < 1:
        raise ValueError("there must be at least one card")
    cards = deque(range(1, n + 1))
    while len(cards) > 1:
        cards.popleft()
        cards.append(cards.popleft())
    return cards[0]


def absolute_heap(requests: Iterable[int]) -> list[int]:
    """Process heap requests: non-zero pushes, zero pops the smallest absolute value.

    Ties in absolute value pop the smaller number first; popping an empty heap
    yields 0.
    """
    heap: list[tuple[int, int]] = []
    popped = []
    for request in requests:
        if request == 0:
            popped.append(heapq.heappop(heap)[1] if heap else 0)
        else:
            heapq.heappush(heap, (abs(request), request))
    return popped