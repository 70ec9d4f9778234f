"""Minimum spanning tree drills."""

from typing import Iterable, Sequence

from codingdrills.union_find import UnionFind


def _kruskal(size: int, edges: Iterable[tuple[int, int, int]]) -> tuple[int, int]:
    """Total weight and edge count of a minimum spanning forest over ``0..size-1``."""
    sets = UnionFind(size)
    total = used = 0
    for start, end, weight in sorted(edges, key=lambda edge: edge[2]):
        if not sets.connected(start, end):
            sets.union(start, end)
            total += weight
            used += 1
    return total, used


def minimum_spanning_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Weight of a minimum spanning tree over vertices ``1..n``."""
    total, used = _kruskal(n + 1, edges)
    if used < n - 1:
        raise ValueError("the graph is not connected")
    return total


def _cable_length(symbol: str) -> int:
    if "a" <= symbol <= "z":
        return ord(symbol) - ord("a") + 1
    if "A" <= symbol <= "Z":
        return ord(symbol) - ord("A") + 27
    return 0


def donate_cables(grid: Sequence[str]) -> int | None:
    """Most cable length that can be given away while keeping all computers connected.

    ``grid[i][j]`` is the cable from computer ``i`` to ``j``: ``a``-``z`` are
    1-26, ``A``-``Z`` are 27-52 and ``0`` is no cable. Returns ``None`` when the
    computers cannot all be connected.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("the grid must be square")
    total = 0
    edges = []
    for i, row in enumerate(grid):
        for j, symbol in enumerate(row):
            length = _cable_length(symbol)
            total += length
            if i != j and length:
                edges.append((i, j, length))
    kept, used = _kruskal(n, edges)
    if used != n - 1:
        return None
    return total - kept