"""Graph traversal drills built on depth-first and breadth-first search."""

from collections import deque
from math import isqrt
from typing import Iterable, Mapping, Sequence

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
# (sender, receiver) pairs for pouring water between three bottles.
_POURS = ((0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1))


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for start, end in edges:
        adjacency[start].append(end)
        adjacency[end].append(start)
    return adjacency


def _directed(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for start, end in edges:
        adjacency[start].append(end)
    return adjacency


def _is_prime(number: int) -> bool:
    return all(number % divisor for divisor in range(2, isqrt(number) + 1))


def count_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components among vertices ``1..n``."""
    adjacency = _undirected(n, edges)
    seen = [False] * (n + 1)
    count = 0
    for root in range(1, n + 1):
        if seen[root]:
            continue
        count += 1
        seen[root] = True
        stack = [root]
        while stack:
            for neighbour in adjacency[stack.pop()]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append(neighbour)
    return count


def amazing_primes(digits: int) -> list[int]:
    """Primes of ``digits`` digits whose every leading prefix is also prime, ascending."""
    if digits < 1:
        raise ValueError("digits must be positive")
    found: list[int] = []

    def extend(number: int, length: int) -> None:
        if length == digits:
            found.append(number)
            return
        for digit in (1, 3, 5, 7, 9):
            candidate = number * 10 + digit
            if _is_prime(candidate):
                extend(candidate, length + 1)

    for seed in (2, 3, 5, 7):
        extend(seed, 1)
    return found


def has_friend_chain(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether vertices ``0..n-1`` hold a simple path through five people."""
    adjacency = _undirected(n, edges)
    on_path = [False] * (n + 1)

    def walk(node: int, depth: int) -> bool:
        if depth == 5:
            return True
        on_path[node] = True
        found = any(
            not on_path[neighbour] and walk(neighbour, depth + 1)
            for neighbour in adjacency[node]
        )
        on_path[node] = False
        return found

    return any(walk(start, 1) for start in range(n))


def dfs_bfs_orders(
    n: int, edges: Iterable[tuple[int, int]], start: int
) -> tuple[list[int], list[int]]:
    """Visit orders of DFS and BFS from ``start``, smaller neighbours first."""
    adjacency = [sorted(neighbours) for neighbours in _undirected(n, edges)]

    seen = [False] * (n + 1)
    seen[start] = True
    depth_first = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if not seen[neighbour]:
                seen[neighbour] = True
                depth_first.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()

    seen = [False] * (n + 1)
    seen[start] = True
    breadth_first = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        breadth_first.append(node)
        for neighbour in adjacency[node]:
            if not seen[neighbour]:
                seen[neighbour] = True
                queue.append(neighbour)
    return depth_first, breadth_first


def maze_shortest_path(grid: Sequence[Sequence[int | str]]) -> int:
    """Cells passed (both ends included) on the shortest way from top-left to bottom-right.

    Open cells are 1 and walls 0; rows may be strings of digits.
    """
    cells = [[int(cell) for cell in row] for row in grid]
    if not cells or not cells[0]:
        raise ValueError("the maze must not be empty")
    rows, cols = len(cells), len(cells[0])
    if any(len(row) != cols for row in cells):
        raise ValueError("maze rows must all have the same length")

    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and cells[nx][ny] and (nx, ny) not in seen:
                seen.add((nx, ny))
                cells[nx][ny] = cells[x][y] + 1
                queue.append((nx, ny))
    return cells[-1][-1]


def tree_diameter(
    n: int,
    adjacency: Mapping[int, Iterable[tuple[int, int]]] | Iterable[tuple[int, Iterable[tuple[int, int]]]],
) -> int:
    """Longest weighted path in a tree on vertices ``1..n``.

    ``adjacency`` maps each vertex to its ``(neighbour, weight)`` pairs.
    """
    items = adjacency.items() if isinstance(adjacency, Mapping) else adjacency
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for node, links in items:
        graph[node].extend(links)

    def distances(source: int) -> list[int]:
        dist = [0] * (n + 1)
        seen = [False] * (n + 1)
        seen[source] = True
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour, weight in graph[node]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    dist[neighbour] = dist[node] + weight
                    queue.append(neighbour)
        return dist

    first = distances(1)
    farthest = max(range(1, n + 1), key=first.__getitem__)
    return max(distances(farthest))


def cities_at_distance(
    n: int, edges: Iterable[tuple[int, int]], k: int, start: int
) -> list[int]:
    """Cities whose shortest one-way road distance from ``start`` is exactly ``k``."""
    graph = _directed(n, edges)
    dist = [-1] * (n + 1)
    dist[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if dist[neighbour] == -1:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return [city for city in range(n + 1) if dist[city] == k]


def most_hackable(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Computers ``1..n`` reached from the most other computers along directed edges."""
    graph = _directed(n, edges)
    reached_from = [0] * (n + 1)
    for source in range(n + 1):
        seen = {source}
        queue = deque([source])
        while queue:
            for neighbour in graph[queue.popleft()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    reached_from[neighbour] += 1
                    queue.append(neighbour)
    best = max(reached_from[1:], default=0)
    return [node for node in range(1, n + 1) if reached_from[node] == best]


def is_bipartite(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the graph on ``1..vertex_count`` can be two-coloured."""
    graph = _undirected(vertex_count, edges)
    colour: list[int | None] = [None] * (vertex_count + 1)
    for root in range(1, vertex_count + 1):
        if colour[root] is not None:
            continue
        colour[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    stack.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def water_amounts(a: int, b: int, c: int) -> list[int]:
    """Amounts the third bottle can hold whenever the first is empty.

    The bottles hold at most ``a``, ``b`` and ``c``; only the third starts full.
    """
    capacity = (a, b, c)
    if min(capacity) < 0:
        raise ValueError("capacities must not be negative")
    seen = {(0, 0)}
    found = {c}
    queue = deque([(0, 0)])
    while queue:
        first, second = queue.popleft()
        for sender, receiver in _POURS:
            amounts = [first, second, c - first - second]
            amounts[receiver] += amounts[sender]
            amounts[sender] = 0
            if amounts[receiver] > capacity[receiver]:
                amounts[sender] = amounts[receiver] - capacity[receiver]
                amounts[receiver] = capacity[receiver]
            state = (amounts[0], amounts[1])
            if state not in seen:
                seen.add(state)
                queue.append(state)
                if amounts[0] == 0:
                    found.add(amounts[2])
    return sorted(found)