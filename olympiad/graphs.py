"""Shortest-path searches on weighted graphs and grids.

Graph edges are ``(u, v, w)`` triples.  Unless a function says
otherwise, nodes are numbered from 1 to ``n`` and edges are directed.
"""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence

__all__ = [
    "dijkstra",
    "round_trip_total",
    "relax_all",
    "has_negative_cycle",
    "cheapest_with_free_edges",
    "escape_steps",
]

Edge = tuple[int, int, int]
_Graph = dict[int, list[tuple[int, int]]]

FULL_HEALTH = 6
_WALL, _START, _EXIT, _REFILL = 0, 2, 3, 4
_MOVES = ((0, 1), (1, 0), (-1, 0), (0, -1))


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} outside {low}..{high}")


def _adjacency(n: int, edges: Iterable[Edge], reverse: bool = False) -> _Graph:
    graph: _Graph = defaultdict(list)
    for u, v, w in edges:
        _check_node(u, 1, n)
        _check_node(v, 1, n)
        if reverse:
            u, v = v, u
        graph[u].append((v, w))
    return graph


def _shortest(graph: _Graph, start: int) -> dict[int, int]:
    dist = {start: 0}
    heap = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if dist[u] < d:
            continue
        for v, w in graph.get(u, ()):
            nd = d + w
            if v not in dist or nd < dist[v]:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist


def dijkstra(n: int, edges: Iterable[Edge], start: int) -> dict[int, int]:
    """Distances from ``start`` to every reachable node, with non-negative weights."""
    _check_node(start, 1, n)
    return _shortest(_adjacency(n, edges), start)


def round_trip_total(n: int, edges: Iterable[Edge]) -> int:
    """Total time to go from node 1 to each other node and back again.

    Nodes that cannot be reached, or cannot return, are left out.
    """
    edges = list(edges)
    there = _shortest(_adjacency(n, edges), 1)
    back = _shortest(_adjacency(n, edges, reverse=True), 1)
    return sum(
        there[node] + back[node]
        for node in range(2, n + 1)
        if node in there and node in back
    )


def relax_all(n: int, edges: Iterable[Edge], source: int) -> list[int | None]:
    """Distances from ``source`` to nodes 1..n by queue-driven relaxation.

    Unreachable nodes are reported as None.
    """
    _check_node(source, 1, n)
    graph = _adjacency(n, edges)
    dist = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, w in graph.get(u, ()):
            nd = dist[u] + w
            if v not in dist or nd < dist[v]:
                dist[v] = nd
                queue.append(v)
    return [dist.get(node) for node in range(1, n + 1)]


def has_negative_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Whether a negative cycle can be reached from node 1."""
    graph = _adjacency(n, edges)
    dist = {1: 0}
    queue = deque([1])
    queued: set[int] = set()
    pushes: Counter[int] = Counter()
    while queue:
        u = queue.popleft()
        queued.discard(u)
        for v, w in graph.get(u, ()):
            nd = dist[u] + w
            if v not in dist or nd < dist[v]:
                dist[v] = nd
                if v not in queued:
                    queue.append(v)
                    queued.add(v)
                    pushes[v] += 1
                    if pushes[v] > n:
                        return True
    return False


def cheapest_with_free_edges(
    n: int, edges: Iterable[Edge], free: int, start: int, target: int
) -> int | None:
    """Cheapest cost from ``start`` to ``target`` when up to ``free`` edges cost nothing.

    Edges are undirected and nodes may be numbered from 0 to ``n``.
    Returns None when ``target`` cannot be reached.
    """
    graph: _Graph = defaultdict(list)
    for u, v, w in edges:
        _check_node(u, 0, n)
        _check_node(v, 0, n)
        graph[u].append((v, w))
        graph[v].append((u, w))

    dist = {(start, 0): 0}
    heap = [(0, start, 0)]
    while heap:
        d, node, used = heapq.heappop(heap)
        if d != dist[(node, used)]:
            continue
        for nxt, w in graph.get(node, ()):
            paid = (nxt, used)
            if paid not in dist or dist[paid] > d + w:
                dist[paid] = d + w
                heapq.heappush(heap, (d + w, nxt, used))
            if used + 1 <= free:
                skipped = (nxt, used + 1)
                if skipped not in dist or dist[skipped] > d:
                    dist[skipped] = d
                    heapq.heappush(heap, (d, nxt, used + 1))

    costs = [dist[(target, used)] for used in range(free + 1) if (target, used) in dist]
    return min(costs) if costs else None


def escape_steps(grid: Sequence[Sequence[int]]) -> int | None:
    """Fewest moves from the start cell (2) to the exit (3) on a health budget.

    Cells holding 0 are walls and cells holding 4 restore full health.
    Every move costs one point of health and no move may leave it at
    zero.  Returns None when the exit cannot be reached.
    """
    start = end = None
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == _START:
                start = (r, c)
            elif cell == _EXIT:
                end = (r, c)
    if start is None or end is None:
        raise ValueError("grid needs a start cell and an exit cell")

    best = {start: FULL_HEALTH}
    queue = deque([(start, 0, FULL_HEALTH)])
    while queue:
        (x, y), steps, health = queue.popleft()
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < len(grid) and 0 <= ny < len(grid[nx])):
                continue
            cell = grid[nx][ny]
            if cell == _WALL:
                continue
            remaining = health - 1
            if remaining <= 0:
                continue
            if cell == _REFILL:
                remaining = FULL_HEALTH
            if remaining > best.get((nx, ny), 0):
                best[(nx, ny)] = remaining
                queue.append(((nx, ny), steps + 1, remaining))
                if (nx, ny) == end:
                    return steps + 1
    return None