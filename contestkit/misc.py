"""Smaller puzzles: stall spacing, pots, column flips and tree level sums."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

NO_MATCH = -(2**31)
"""Result of :func:`flip_columns` when no row can be made all ones."""

_LEXEME = re.compile(r"\d+|.", re.DOTALL)


def _cows_fit(stalls: Sequence[int], gap: int, cows: int) -> bool:
    placed, last = 1, stalls[0]
    for position in stalls[1:]:
        if position - last >= gap:
            placed += 1
            last = position
        if placed >= cows:
            return True
    return False


def aggressive_cows(stalls: Iterable[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` cows fit in the stalls."""
    positions = sorted(stalls)
    if not positions:
        raise ValueError("at least one stall is required")
    low, high = 1, positions[-1] - positions[0]
    while low <= high:
        mid = (low + high) // 2
        if _cows_fit(positions, mid, cows):
            low = mid + 1
        else:
            high = mid - 1
    return high


def crow_and_pots(pots: Iterable[int], k: int) -> int:
    """Return the fewest stones the crow must drop to be sure of filling ``k`` pots."""
    levels = sorted(pots)
    if not 0 <= k <= len(levels) or (levels and k == 0):
        raise ValueError(f"k must be between 1 and {len(levels)}, got {k}")
    front = sum(levels[:k]) + (len(levels) - k) * (levels[k - 1] if k else 0)
    back = sum(levels[len(levels) - k:])
    return min(front, back)


def flip_columns(rows: Iterable[Sequence[int]], k: int) -> int:
    """Return how many rows can be made all ones with exactly ``k`` column flips.

    :data:`NO_MATCH` is returned when no row qualifies.
    """
    counts: Counter[tuple[int, ...]] = Counter()
    best = NO_MATCH
    for row in rows:
        key = tuple(row)
        zeros = key.count(0)
        if zeros <= k and (k - zeros) % 2 == 0:
            counts[key] += 1
            best = max(best, counts[key])
    return best


def sum_kth_level(k: int, tree: str) -> int:
    """Return the sum of the node values at depth ``k`` of a bracketed tree.

    The tree is written as ``(value(left)(right))`` with empty subtrees as ``()``.
    """
    level = -1
    total = 0
    for match in _LEXEME.finditer(tree):
        piece = match.group()
        if piece == "(":
            level += 1
        elif piece == ")":
            level -= 1
        elif level == k:
            if not piece.isdigit():
                raise ValueError(f"unexpected character {piece!r} at position {match.start()}")
            total += int(piece)
    return total