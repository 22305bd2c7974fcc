"""Graph puzzles: two-colouring, extreme cycles and wormhole shortcuts."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import Optional


def _check_node(node: int, limit: int) -> int:
    if not 0 <= node <= limit:
        raise ValueError(f"node {node} is outside 0..{limit}")
    return node


def is_bicolorable(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """Return whether the nodes ``0..n-1`` can be two-coloured along the given edges.

    Edges are followed in the direction given, from the first node to the second.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[_check_node(u, n - 1)].append(_check_node(v, n - 1))

    color: list[Optional[int]] = [None] * n
    for start in range(n):
        if color[start] is not None:
            continue
        color[start] = 0
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if color[nxt] is None:
                    color[nxt] = 1 - color[node]
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
                if color[nxt] == color[node]:
                    return False
            else:
                stack.pop()
    return True


def min_sum_cycle(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the nodes of the directed cycle with the smallest label sum, sorted.

    Nodes are labelled ``0..n``; the search starts from ``0..n-1``. An empty
    list is returned when no cycle is found.
    """
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacency[_check_node(u, n)].append(_check_node(v, n))

    visited = [False] * (n + 1)
    best_sum: Optional[int] = None
    best_cycle: list[int] = []

    for root in range(n):
        if visited[root]:
            continue
        path: list[int] = []
        position: dict[int, int] = {}

        def enter(node: int) -> None:
            visited[node] = True
            position[node] = len(path)
            path.append(node)
            stack.append((node, iter(adjacency[node])))

        stack: list = []
        enter(root)
        while stack:
            node, neighbours = stack[-1]
            descend = None
            for nxt in neighbours:
                if nxt in position:
                    cycle = path[position[nxt]:]
                    total = sum(cycle)
                    if best_sum is None or total < best_sum:
                        best_sum = total
                        best_cycle = cycle
                    break
                descend = nxt
                break
            if descend is not None:
                enter(descend)
                continue
            stack.pop()
            del position[node]
            path.pop()

    return sorted(best_cycle)


def largest_sum_cycle(n: int, edges: Iterable[Sequence[int]]) -> Optional[int]:
    """Return the largest total weight of a directed cycle found by depth-first search.

    Edges are ``(u, v, weight)`` over nodes ``0..n``; the search starts from
    ``1..n-1``. ``None`` is returned when no cycle is found.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        adjacency[_check_node(u, n)].append((_check_node(v, n), w))

    visited = [False] * (n + 1)
    depth_sum: dict[int, int] = {}
    best: Optional[int] = None

    for root in range(1, n):
        if visited[root]:
            continue
        visited[root] = True
        depth_sum[root] = 0
        stack = [[root, iter(adjacency[root]), 0]]
        while stack:
            frame = stack[-1]
            node, neighbours = frame[0], frame[1]
            for nxt, weight in neighbours:
                if not visited[nxt]:
                    frame[2] += weight
                    visited[nxt] = True
                    depth_sum[nxt] = frame[2]
                    stack.append([nxt, iter(adjacency[nxt]), frame[2]])
                    break
                if nxt in depth_sum:
                    total = frame[2] + weight - depth_sum[nxt]
                    best = total if best is None else max(best, total)
            else:
                stack.pop()
                del depth_sum[node]
    return best


def wormholes(
    source: Sequence[int],
    dest: Sequence[int],
    holes: Iterable[Sequence[int]],
) -> int:
    """Return the cheapest travel cost from ``source`` to ``dest``.

    Walking costs the Manhattan distance; each hole ``(ax, ay, bx, by, cost)``
    links its two ends in both directions for ``cost``.
    """
    start = (int(source[0]), int(source[1]))
    points = [start]
    index = {start: 0}
    links: dict[tuple[int, int], int] = {}

    def locate(point: tuple[int, int]) -> int:
        if point not in index:
            index[point] = len(points)
            points.append(point)
        return index[point]

    for ax, ay, bx, by, cost in holes:
        a = locate((int(ax), int(ay)))
        b = locate((int(bx), int(by)))
        for key in ((a, b), (b, a)):
            links[key] = min(links.get(key, cost), cost)

    points.append((int(dest[0]), int(dest[1])))
    count = len(points)

    def step(i: int, j: int) -> int:
        (ax, ay), (bx, by) = points[i], points[j]
        walk = abs(ax - bx) + abs(ay - by)
        return min(walk, links.get((i, j), walk))

    best = [float("inf")] * count
    best[0] = 0
    queue = [(0, 0)]
    while queue:
        cost, node = heapq.heappop(queue)
        if cost > best[node]:
            continue
        for other in range(count):
            candidate = cost + step(node, other)
            if candidate < best[other]:
                best[other] = candidate
                heapq.heappush(queue, (candidate, other))
    return int(best[-1])