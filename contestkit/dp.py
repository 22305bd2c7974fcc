"""Dynamic-programming solutions: bombing run, balloons, energy budget and tours."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

INFEASIBLE = 10**9
"""Time reported by :func:`physical_energy` when the distance cannot be covered."""

_LANES = 5
_START_LANE = 2
_BOMB_EXPIRED = 6
_EMPTY, _COIN, _ENEMY = 0, 1, 2


def aeroplane_bombing(grid: Sequence[Sequence[int]]) -> int:
    """Return the most coins the plane can collect flying up a five-lane grid.

    Rows are listed top to bottom; the plane starts below the last row in the
    middle lane and moves up one row per step, shifting at most one lane.
    Cells are 0 (empty), 1 (coin) or 2 (enemy). One bomb may be used, which
    lets the plane pass enemies for a few rows.
    """
    rows = [list(row) for row in grid]
    for row in rows:
        if len(row) != _LANES:
            raise ValueError(f"each row must have {_LANES} cells, got {len(row)}")
        if any(cell not in (_EMPTY, _COIN, _ENEMY) for cell in row):
            raise ValueError(f"cells must be 0, 1 or 2, got {row}")

    memo: dict[tuple[int, int, int], int] = {}

    def best(i: int, j: int, bomb: int) -> int:
        if i < 0:
            return 0
        cached = memo.get((i, j, bomb))
        if cached is not None:
            return cached
        if 1 <= bomb <= 5:
            bomb += 1
        result = -(10**9)
        for lane in (j - 1, j, j + 1):
            if not 0 <= lane < _LANES:
                continue
            cell = rows[i][lane]
            if cell == _EMPTY:
                points = best(i - 1, lane, bomb)
            elif cell == _COIN:
                points = 1 + best(i - 1, lane, bomb)
            elif bomb == 0:
                points = best(i - 1, lane, 1)
            elif bomb == _BOMB_EXPIRED:
                return 0
            else:
                points = best(i - 1, lane, bomb)
            result = max(result, points)
        memo[(i, j, bomb)] = result
        return result

    return best(len(rows) - 1, _START_LANE, 0)


def burst_balloons(balloons: Sequence[int]) -> int:
    """Return the best score for bursting all balloons.

    Bursting a balloon scores the product of its current neighbours, except
    the last one left, which scores its own value.
    """
    padded = [1, *balloons, 1]
    last = len(padded) - 2

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i > j:
            return 0
        whole = i == 1 and j == last
        return max(
            (padded[k] if whole else padded[i - 1] * padded[j + 1])
            + best(i, k - 1)
            + best(k + 1, j)
            for k in range(i, j + 1)
        )

    return best(1, last)


def physical_energy(options: Iterable[Sequence[int]], health: int, distance: int) -> int:
    """Return the least time to cover ``distance`` units without exhausting ``health``.

    Each option is a ``(time, cost)`` pair usable once per unit of distance.
    :data:`INFEASIBLE` is returned when no plan fits the health budget.
    """
    if distance < 0:
        raise ValueError("distance must not be negative")
    choices = tuple((int(time), int(cost)) for time, cost in options)

    @lru_cache(maxsize=None)
    def fastest(h: int, d: int) -> int:
        if h < 0:
            return INFEASIBLE
        if d == 0:
            return 0
        return min([INFEASIBLE, *(time + fastest(h - cost, d - 1) for time, cost in choices)])

    return fastest(health, distance)


def _tour_cost(dist: Sequence[Sequence[int]], home: int, skip: int) -> int:
    n = len(dist)
    full = ((1 << n) - 1) & ~skip

    @lru_cache(maxsize=None)
    def tour(mask: int, pos: int) -> int:
        if mask == full:
            return dist[pos][home]
        return min(
            dist[pos][city] + tour(mask | (1 << city), city)
            for city in range(n)
            if not (skip >> city) & 1 and not mask & (1 << city)
        )

    return tour(1, 0)


def travelling_salesman(dist: Sequence[Sequence[int]]) -> int:
    """Return the cheapest round trip from city 0 through every city and back."""
    n = len(dist)
    if n == 0:
        raise ValueError("at least one city is required")
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    return _tour_cost(dist, home=0, skip=0)


def refrigerator_route(points: Sequence[Sequence[int]]) -> int:
    """Return the shortest Manhattan route from the office through all customers to home.

    ``points`` holds the office, then home, then each customer as ``(x, y)``.
    """
    locations = [(int(x), int(y)) for x, y in points]
    if len(locations) < 2:
        raise ValueError("office and home locations are required")
    dist = [[abs(ax - bx) + abs(ay - by) for bx, by in locations] for ax, ay in locations]
    return _tour_cost(dist, home=1, skip=1 << 1)