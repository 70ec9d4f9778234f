"""Disjoint-set drills."""

from typing import Iterable, Sequence


class UnionFind:
    """Disjoint sets over the elements ``0..size-1`` with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))

    def find(self, a: int) -> int:
        """Representative of the set holding ``a``."""
        if not 0 <= a < len(self._parent):
            raise IndexError(f"element {a} outside 0..{len(self._parent) - 1}")
        root = a
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[a] != root:
            self._parent[a], a = root, self._parent[a]
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a != root_b:
            self._parent[root_b] = root_a

    def connected(self, a: int, b: int) -> bool:
        """Whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)


def process_set_queries(n: int, queries: Iterable[tuple[int, int, int]]) -> list[bool]:
    """Run ``(op, a, b)`` queries on ``0..n``: op 0 merges, anything else asks.

    Returns the answers to the asking queries, in order.
    """
    sets = UnionFind(n + 1)
    answers = []
    for operation, a, b in queries:
        if operation == 0:
            sets.union(a, b)
        else:
            answers.append(sets.connected(a, b))
    return answers


def can_travel(adjacency: Sequence[Sequence[int]], route: Iterable[int]) -> bool:
    """Whether every city of ``route`` (1-based) lies in one connected region.

    ``adjacency`` is a square matrix where 1 marks a link between two cities.
    """
    rows = [list(row) for row in adjacency]
    sets = UnionFind(len(rows) + 1)
    for city, row in enumerate(rows, start=1):
        for other, linked in enumerate(row, start=1):
            if linked == 1:
                sets.union(city, other)
    stops = list(route)
    if not stops:
        return True
    region = sets.find(stops[0])
    return all(sets.find(stop) == region for stop in stops[1:])


def count_lie_parties(
    n: int, truth_knowers: Iterable[int], parties: Iterable[Iterable[int]]
) -> int:
    """Parties where no guest can be linked, through shared parties, to a truth knower."""
    groups = [list(party) for party in parties]
    sets = UnionFind(n + 1)
    for group in groups:
        for guest in group[1:]:
            sets.union(group[0], guest)
    informed = {sets.find(person) for person in truth_knowers}
    return sum(1 for group in groups if not group or sets.find(group[0]) not in informed)