"""Grid puzzles: pipe networks, meeting points and climbing reach."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Optional

_PIPES: dict[int, tuple[tuple[int, int], ...]] = {
    1: ((1, 0), (-1, 0), (0, 1), (0, -1)),
    2: ((1, 0), (-1, 0)),
    3: ((0, -1), (0, 1)),
    4: ((-1, 0), (0, 1)),
    5: ((1, 0), (0, 1)),
    6: ((0, -1), (1, 0)),
    7: ((0, -1), (-1, 0)),
}
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_GOAL = 3


def _rectangle(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    cells = [list(row) for row in grid]
    if not cells or not cells[0]:
        raise ValueError("grid must not be empty")
    width = len(cells[0])
    if any(len(row) != width for row in cells):
        raise ValueError("grid rows must all have the same length")
    return cells


def endoscope(grid: Iterable[Sequence[int]], x: int, y: int, length: int) -> int:
    """Return how many pipe cells an endoscope of ``length`` reaches from ``(x, y)``.

    Cells hold pipe types 1 to 7, or 0 for no pipe. Two cells connect only
    when each pipe opens towards the other.
    """
    cells = _rectangle(grid)
    rows, cols = len(cells), len(cells[0])
    if any(cell not in _PIPES and cell != 0 for row in cells for cell in row):
        raise ValueError("pipe types must be between 0 and 7")
    if not (0 <= x < rows and 0 <= y < cols):
        raise ValueError(f"start ({x}, {y}) is outside the grid")

    def connects(nx: int, ny: int, ox: int, oy: int) -> bool:
        if not (0 <= nx < rows and 0 <= ny < cols) or not cells[nx][ny]:
            return False
        return any(nx + dx == ox and ny + dy == oy for dx, dy in _PIPES[cells[nx][ny]])

    reached = 0
    queue = deque([(x, y, 1)])
    while queue:
        ox, oy, depth = queue.popleft()
        pipe = cells[ox][oy]
        if not pipe or depth > length:
            continue
        reached += 1
        for dx, dy in _PIPES[pipe]:
            nx, ny = ox + dx, oy + dy
            if connects(nx, ny, ox, oy):
                queue.append((nx, ny, depth + 1))
        cells[ox][oy] = 0
    return reached


def rare_element(
    matrix: Iterable[Sequence[int]],
    elements: Iterable[Sequence[int]],
) -> int:
    """Return the smallest longest distance from an open cell to the rare elements.

    ``matrix`` is square with non-zero cells open; ``elements`` are 1-based
    ``(row, column)`` positions.
    """
    cells = _rectangle(matrix)
    size = len(cells)
    if len(cells[0]) != size:
        raise ValueError("matrix must be square")
    starts = []
    for row, col in elements:
        if not (1 <= row <= size and 1 <= col <= size):
            raise ValueError(f"element ({row}, {col}) is outside the matrix")
        starts.append((row - 1, col - 1))

    for sx, sy in starts:
        seen = {(sx, sy)}
        queue = deque([(sx, sy, 1)])
        while queue:
            x, y, depth = queue.popleft()
            for dx, dy in _STEPS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < size and 0 <= ny < size and cells[nx][ny] and (nx, ny) not in seen:
                    cells[nx][ny] = max(cells[nx][ny], depth + 1)
                    seen.add((nx, ny))
                    queue.append((nx, ny, depth + 1))

    open_cells = [value for row in cells for value in row if value != 0]
    if not open_cells:
        raise ValueError("matrix has no open cells")
    return min(open_cells) - 1


def _reaches_goal(cells: list[list[int]], reach: int) -> bool:
    rows, cols = len(cells), len(cells[0])
    start = (rows - 1, 0)
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        if cells[x][y] == _GOAL:
            return True
        moves = [(x, y + 1), (x, y - 1)]
        moves += [(x + i, y) for i in range(1, reach + 1)]
        moves += [(x - i, y) for i in range(1, reach + 1)]
        for nx, ny in moves:
            if 0 <= nx < rows and 0 <= ny < cols and cells[nx][ny] and (nx, ny) not in seen:
                seen.add((nx, ny))
                stack.append((nx, ny))
    return False


def rock_climbing(grid: Iterable[Sequence[int]]) -> Optional[int]:
    """Return the smallest vertical reach that takes a climber to the cell marked 3.

    The climber starts at the bottom-left cell and walks sideways along
    non-zero cells. ``None`` is returned when no reach works.
    """
    cells = _rectangle(grid)
    for reach in range(len(cells) + 1):
        if _reaches_goal(cells, reach):
            return reach
    return None