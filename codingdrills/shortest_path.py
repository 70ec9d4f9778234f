"""Shortest-path drills: Dijkstra, Bellman-Ford and Floyd-Warshall."""

import heapq
import math
from typing import Iterable, Sequence

_KEVIN_BACON_UNREACHED = 10000001


def _dijkstra(n: int, edges: Iterable[tuple[int, int, int]], start: int) -> list[float]:
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for source, target, weight in edges:
        graph[source].append((target, weight))
    dist: list[float] = [math.inf] * (n + 1)
    dist[start] = 0
    done = [False] * (n + 1)
    queue = [(0, start)]
    while queue:
        _, node = heapq.heappop(queue)
        if done[node]:
            continue
        done[node] = True
        for target, weight in graph[node]:
            if not done[target] and dist[node] + weight < dist[target]:
                dist[target] = dist[node] + weight
                heapq.heappush(queue, (dist[target], target))
    return dist


def dijkstra_distances(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], start: int
) -> list[int | None]:
    """Shortest distances from ``start`` to vertices ``1..vertex_count``; ``None`` if unreachable."""
    dist = _dijkstra(vertex_count, edges, start)
    return [None if d == math.inf else int(d) for d in dist[1:]]


def min_bus_cost(
    n: int, edges: Iterable[tuple[int, int, int]], start: int, end: int
) -> int | None:
    """Cheapest fare from ``start`` to ``end``, or ``None`` when ``end`` cannot be reached."""
    cost = _dijkstra(n, edges, start)[end]
    return None if cost == math.inf else int(cost)


def kth_shortest_paths(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> list[int]:
    """Length of the ``k``-th shortest walk from vertex 1 to each of ``1..n``, or -1.

    A later edge between the same two vertices replaces an earlier one, and a
    weight of zero means there is no edge.
    """
    if k < 1:
        raise ValueError("k must be positive")
    weights: list[dict[int, int]] = [{} for _ in range(n + 1)]
    for source, target, weight in edges:
        weights[source][target] = weight
    links = [
        [(target, weights[node][target]) for target in sorted(weights[node]) if weights[node][target]]
        for node in range(n + 1)
    ]

    found: list[list[int]] = [[] for _ in range(n + 1)]  # max-heaps of negated lengths
    found[1].append(0)
    queue = [(0, 1)]
    while queue:
        cost, node = heapq.heappop(queue)
        for target, weight in links[node]:
            total = cost + weight
            best = found[target]
            if len(best) < k:
                heapq.heappush(best, -total)
                heapq.heappush(queue, (total, target))
            elif -best[0] > total:
                heapq.heapreplace(best, -total)
                heapq.heappush(queue, (total, target))
    return [-best[0] if len(best) == k else -1 for best in found[1:]]


def time_machine(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int | None] | None:
    """Shortest times from city 1 to cities ``2..n`` with possibly negative edges.

    Unreachable cities give ``None``; a negative cycle reachable from city 1
    makes the whole answer ``None``.
    """
    routes = list(edges)
    dist: list[float] = [math.inf] * (n + 1)
    dist[1] = 0
    for _ in range(n - 1):
        for source, target, time in routes:
            if dist[source] != math.inf and dist[target] > dist[source] + time:
                dist[target] = dist[source] + time
    if any(
        dist[source] != math.inf and dist[target] > dist[source] + time
        for source, target, time in routes
    ):
        return None
    return [None if d == math.inf else int(d) for d in dist[2:]]


def salesman_profit(
    n: int,
    start: int,
    end: int,
    routes: Iterable[tuple[int, int, int]],
    earnings: Sequence[int],
) -> float | int | None:
    """Most money that can be held on arriving at ``end`` from ``start``.

    Cities are ``0..n-1``; a route costs its price and arriving in a city earns
    that city's amount. Returns ``None`` when ``end`` is unreachable and
    ``math.inf`` when the profit can grow without bound.
    """
    if len(earnings) != n:
        raise ValueError("one earning is required per city")
    paths = list(routes)
    best: list[float] = [-math.inf] * n
    best[start] = earnings[start]
    for round_number in range(n + 51):
        for source, target, price in paths:
            if best[source] == -math.inf:
                continue
            if best[source] == math.inf:
                best[target] = math.inf
            elif best[target] < best[source] + earnings[target] - price:
                best[target] = best[source] + earnings[target] - price
                if round_number >= n - 1:
                    best[target] = math.inf
    result = best[end]
    if result == -math.inf:
        return None
    if result == math.inf:
        return math.inf
    return int(result)


def _all_pairs(n: int, edges: Iterable[tuple[int, int, int]], unreached: float) -> list[list[float]]:
    dist = [[0 if i == j else unreached for j in range(n + 1)] for i in range(n + 1)]
    for source, target, weight in edges:
        if dist[source][target] > weight:
            dist[source][target] = weight
    for middle in range(1, n + 1):
        via = dist[middle]
        for i in range(1, n + 1):
            row = dist[i]
            to_middle = row[middle]
            for j in range(1, n + 1):
                if row[j] > to_middle + via[j]:
                    row[j] = to_middle + via[j]
    return dist


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """Matrix of shortest distances between vertices ``1..n``; 0 marks no path."""
    dist = _all_pairs(n, edges, math.inf)
    return [
        [0 if d == math.inf else int(d) for d in row[1:]]
        for row in dist[1:]
    ]


def reachability(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Transitive closure of a 0/1 adjacency matrix."""
    closure = [list(row) for row in matrix]
    size = len(closure)
    for middle in range(size):
        for row in closure:
            if row[middle] == 1:
                for j, linked in enumerate(closure[middle]):
                    if linked:
                        row[j] = 1
    return closure


def kevin_bacon(n: int, friendships: Iterable[tuple[int, int]]) -> int:
    """Person in ``1..n`` with the smallest total of friendship distances; ties go to the lowest."""
    if n < 1:
        raise ValueError("at least one person is required")
    edges = [(a, b, 1) for a, b in friendships]
    edges += [(b, a, 1) for a, b, _ in edges]
    dist = _all_pairs(n, edges, _KEVIN_BACON_UNREACHED)
    return min(range(1, n + 1), key=lambda person: sum(dist[person][1:]))