"""Command-line front end: read contest-style input and print the answers."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Optional

from contestkit.dp import (
    aeroplane_bombing,
    burst_balloons,
    physical_energy,
    refrigerator_route,
    travelling_salesman,
)
from contestkit.graphs import is_bicolorable, largest_sum_cycle, min_sum_cycle, wormholes
from contestkit.grids import endoscope, rare_element, rock_climbing
from contestkit.misc import aggressive_cows, crow_and_pots, flip_columns, sum_kth_level

INT_MIN = -(2**31)
"""Printed by ``largest-sum-cycle`` when no cycle exists."""

_REFRIGERATOR_CASES = 10


class InputError(ValueError):
    """Raised when the input ends early or holds a malformed number."""


class _Tokens:
    """Whitespace-separated tokens consumed from the front."""

    def __init__(self, text: str) -> None:
        self._items = deque(text.split())

    def word(self) -> str:
        if not self._items:
            raise InputError("unexpected end of input")
        return self._items.popleft()

    def int(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise InputError(f"expected an integer, got {word!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def rows(self, count: int, width: int) -> list[list[int]]:
        return [self.ints(width) for _ in range(count)]

    @property
    def exhausted(self) -> bool:
        return not self._items


def _cases(tokens: _Tokens) -> range:
    return range(1, tokens.int() + 1)


def _aeroplane_bombing(tokens: _Tokens) -> Iterator[str]:
    for case in _cases(tokens):
        n = tokens.int()
        yield f"#{case} {aeroplane_bombing(tokens.rows(n, 5))}"


def _aggressive_cows(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n, cows = tokens.ints(2)
        yield str(aggressive_cows(tokens.ints(n), cows))


def _bi_coloring(tokens: _Tokens) -> Iterator[str]:
    while not tokens.exhausted:
        n = tokens.int()
        if n == 0:
            break
        m = tokens.int()
        edges = tokens.rows(m, 2)
        yield "BICOLORABLE." if is_bicolorable(n, edges) else "NOT BICOLORABLE."


def _burst_balloons(tokens: _Tokens) -> Iterator[str]:
    n = tokens.int()
    yield str(burst_balloons(tokens.ints(n)))


def _crow_and_pots(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n, k = tokens.ints(2)
        yield str(crow_and_pots(tokens.ints(n), k))


def _detect_cycle(tokens: _Tokens) -> Iterator[str]:
    n, m = tokens.ints(2)
    cycle = min_sum_cycle(n, tokens.rows(m, 2))
    yield "".join(f"{node} " for node in cycle)


def _endoscope(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n, m, x, y, length = tokens.ints(5)
        yield str(endoscope(tokens.rows(n, m), x, y, length))


def _flip_columns(tokens: _Tokens) -> Iterator[str]:
    n, m, k = tokens.ints(3)
    yield str(flip_columns(tokens.rows(n, m), k))


def _refrigerators(tokens: _Tokens) -> Iterator[str]:
    for case in range(1, _REFRIGERATOR_CASES + 1):
        if tokens.exhausted:
            break
        count = tokens.int() + 2
        yield f"# {case} {refrigerator_route(tokens.rows(count, 2))}"


def _largest_sum_cycle(tokens: _Tokens) -> Iterator[str]:
    n, e = tokens.ints(2)
    best = largest_sum_cycle(n, tokens.rows(e, 3))
    yield str(INT_MIN if best is None else best)


def _physical_energy(tokens: _Tokens) -> Iterator[str]:
    n, health, distance = tokens.ints(3)
    yield str(physical_energy(tokens.rows(n, 2), health, distance))


def _rare_element(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n, e = tokens.ints(2)
        elements = tokens.rows(e, 2)
        yield str(rare_element(tokens.rows(n, n), elements))


def _rock_climbing(tokens: _Tokens) -> Iterator[str]:
    rows, cols = tokens.ints(2)
    reach = rock_climbing(tokens.rows(rows, cols))
    if reach is not None:
        yield str(reach)


def _sum_kth_level(tokens: _Tokens) -> Iterator[str]:
    k = tokens.int()
    yield str(sum_kth_level(k, tokens.word()))


def _travelling_salesman(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n = tokens.int()
        yield str(travelling_salesman(tokens.rows(n, n)))


def _wormholes(tokens: _Tokens) -> Iterator[str]:
    for _ in _cases(tokens):
        n = tokens.int()
        sx, sy, dx, dy = tokens.ints(4)
        yield str(wormholes((sx, sy), (dx, dy), tokens.rows(n, 5)))


_Handler = Callable[[_Tokens], Iterator[str]]

PROBLEMS: dict[str, tuple[_Handler, str]] = {
    "aeroplane-bombing": (_aeroplane_bombing, "most coins on a five-lane bombing run"),
    "aggressive-cows": (_aggressive_cows, "largest minimum gap between cows"),
    "bi-coloring": (_bi_coloring, "whether graphs can be two-coloured"),
    "burst-balloons": (_burst_balloons, "best score for bursting balloons"),
    "crow-and-pots": (_crow_and_pots, "fewest stones to fill k pots"),
    "detect-cycle": (_detect_cycle, "cycle with the smallest node sum"),
    "endoscope": (_endoscope, "pipe cells reached by an endoscope"),
    "flip-columns": (_flip_columns, "rows made all ones by k column flips"),
    "kim-refrigerators": (_refrigerators, "shortest delivery route from office to home"),
    "largest-sum-cycle": (_largest_sum_cycle, "heaviest weighted cycle"),
    "physical-energy": (_physical_energy, "least time within a health budget"),
    "rare-element": (_rare_element, "best meeting point for rare elements"),
    "rock-climbing": (_rock_climbing, "smallest climbing reach to the goal"),
    "sum-kth-level": (_sum_kth_level, "sum of tree nodes at level k"),
    "travelling-salesman": (_travelling_salesman, "cheapest round trip"),
    "wormholes": (_wormholes, "cheapest trip using wormholes"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest puzzle from its standard input format."
    )
    commands = parser.add_subparsers(dest="problem", required=True, metavar="PROBLEM")
    for name, (handler, summary) in PROBLEMS.items():
        command = commands.add_parser(name, help=summary, description=summary)
        command.add_argument("input", nargs="?", help="input file (default: standard input)")
        command.set_defaults(handler=handler)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run one puzzle on its input and print the answers; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        text = Path(args.input).read_text() if args.input else sys.stdin.read()
    except OSError as exc:
        print(f"contestkit: error: {exc}", file=sys.stderr)
        return 1
    try:
        for line in args.handler(_Tokens(text)):
            print(line)
    except ValueError as exc:
        print(f"contestkit: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())