"""Drills on directed acyclic graphs: topological sort and longest paths."""

from collections import deque
from typing import Iterable, Sequence


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices ``1..n`` so every edge ``(s, e)`` puts ``s`` before ``e``.

    Vertices on a cycle, and everything only reachable through one, are left out.
    """
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for start, end in edges:
        graph[start].append(end)
        indegree[end] += 1

    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for following in graph[node]:
            indegree[following] -= 1
            if indegree[following] == 0:
                queue.append(following)
    return order


def build_times(
    durations: Sequence[int], prerequisites: Iterable[Iterable[int]]
) -> list[int]:
    """Earliest finishing time of every building.

    ``durations[i]`` is how long building ``i + 1`` takes on its own and
    ``prerequisites`` lists, per building, the 1-based buildings it waits for.
    """
    needs = [list(group) for group in prerequisites]
    if len(needs) != len(durations):
        raise ValueError("one prerequisite list is required per building")
    n = len(durations)
    own = [0, *durations]
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for building, group in enumerate(needs, start=1):
        for required in group:
            graph[required].append(building)
            indegree[building] += 1

    waiting = [0] * (n + 1)
    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    while queue:
        node = queue.popleft()
        for following in graph[node]:
            indegree[following] -= 1
            waiting[following] = max(waiting[following], waiting[node] + own[node])
            if indegree[following] == 0:
                queue.append(following)
    return [waiting[node] + own[node] for node in range(1, n + 1)]


def critical_path(
    n: int, roads: Iterable[tuple[int, int, int]], start: int, end: int
) -> tuple[int, int]:
    """Longest travel time from ``start`` to ``end`` and the number of roads on such paths.

    ``roads`` holds directed ``(from, to, time)`` triples over cities ``1..n``.
    """
    forward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    backward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for source, target, time in roads:
        forward[source].append((target, time))
        backward[target].append((source, time))
        indegree[target] += 1

    longest = [0] * (n + 1)
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for target, time in forward[node]:
            indegree[target] -= 1
            longest[target] = max(longest[target], longest[node] + time)
            if indegree[target] == 0:
                queue.append(target)

    critical_roads = 0
    seen = {end}
    queue = deque([end])
    while queue:
        node = queue.popleft()
        for source, time in backward[node]:
            if longest[source] + time == longest[node]:
                critical_roads += 1
                if source not in seen:
                    seen.add(source)
                    queue.append(source)
    return longest[end], critical_roads