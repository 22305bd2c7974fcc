# contestkit

Solvers for a set of well-known coding-assessment problems. You can use them
as plain Python functions or run them from the command line. The package has
no dependencies outside the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Library

The solvers are grouped by technique. Each one takes the problem's data as
ordinary Python values (lists, tuples, strings and integers) and returns the
answer. Malformed input, such as ragged grids or out-of-range nodes, raises
`ValueError`.

### `contestkit.dp`

- `aeroplane_bombing(grid)`: the most coins collected flying up a five-lane
  grid whose cells are 0 (empty), 1 (coin) or 2 (enemy). One bomb may be used.
- `burst_balloons(balloons)`: the best score for bursting every balloon.
- `physical_energy(options, health, distance)`: the least time to cover the
  distance using `(time, cost)` options within the health budget. Returns
  `INFEASIBLE` (10**9) when no plan fits.
- `travelling_salesman(dist)`: the cheapest round trip from city 0 over a
  square distance matrix.
- `refrigerator_route(points)`: the shortest Manhattan route from the office
  (first point) through every customer to home (second point).

### `contestkit.misc`

- `aggressive_cows(stalls, cows)`: the largest minimum gap at which the cows
  fit into the stalls.
- `crow_and_pots(pots, k)`: the fewest stones needed to be sure of filling
  `k` pots.
- `flip_columns(rows, k)`: how many rows can be made all ones with exactly
  `k` column flips. Returns `NO_MATCH` (-2**31) when no row qualifies.
- `sum_kth_level(k, tree)`: the sum of node values at depth `k` of a tree
  written as `(value(left)(right))`.

### `contestkit.graphs`

- `is_bicolorable(n, edges)`: whether nodes `0..n-1` can be two-coloured
  along the given directed edges.
- `min_sum_cycle(n, edges)`: the sorted nodes of the directed cycle with the
  smallest label sum. Returns an empty list when no cycle is found.
- `largest_sum_cycle(n, edges)`: the largest total weight of a directed cycle
  over `(u, v, weight)` edges. Returns `None` when no cycle is found.
- `wormholes(source, dest, holes)`: the cheapest trip when walking costs the
  Manhattan distance and each hole `(ax, ay, bx, by, cost)` links its ends
  both ways.

### `contestkit.grids`

- `endoscope(grid, x, y, length)`: how many pipe cells (types 1 to 7) an
  endoscope of the given length reaches from `(x, y)`.
- `rare_element(matrix, elements)`: the smallest longest distance from an
  open cell to the rare elements, given as 1-based positions.
- `rock_climbing(grid)`: the smallest vertical reach that takes a climber
  from the bottom-left cell to the cell marked 3. Returns `None` when no
  reach works.

```python
from contestkit.misc import aggressive_cows
from contestkit.dp import travelling_salesman

aggressive_cows([1, 2, 8, 4, 9], 3)    # 3

travelling_salesman([
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
])                                     # 80
```

## Command line

    contestkit PROBLEM [INPUT]

The command reads whitespace-separated integers from `INPUT`, or from
standard input if no file is given, and prints one answer per line. If the
input is malformed or ends early, it prints an error to standard error and
exits with status 1. To list the problems, run:

    contestkit --help

The problems and their input formats are:

| Problem | Input |
| --- | --- |
| `aeroplane-bombing` | `T`; per case `n` and `n` rows of 5 cells. Prints `#case answer`. |
| `aggressive-cows` | `T`; per case `n c` and `n` stall positions. |
| `bi-coloring` | Repeated `n m` and `m` edges `u v`, ending at `n = 0`. Prints `BICOLORABLE.` or `NOT BICOLORABLE.` |
| `burst-balloons` | `n` and `n` values. |
| `crow-and-pots` | `T`; per case `n k` and `n` pot levels. |
| `detect-cycle` | `n m` and `m` edges `u v`. Prints the cycle's nodes, each followed by a space. |
| `endoscope` | `T`; per case `n m x y length` and an `n` by `m` grid. |
| `flip-columns` | `n m k` and an `n` by `m` grid of 0s and 1s. |
| `kim-refrigerators` | Up to 10 cases, each a customer count `N` and `N + 2` points (office, home, customers). Prints `# case answer`. |
| `largest-sum-cycle` | `n e` and `e` edges `u v w`. Prints `-2147483648` when there is no cycle. |
| `physical-energy` | `n h d` and `n` pairs `time cost`. |
| `rare-element` | `T`; per case `n e`, `e` positions, and an `n` by `n` matrix. |
| `rock-climbing` | `rows cols` and the grid. Prints nothing when the goal is unreachable. |
| `sum-kth-level` | `k` and the tree string, written without spaces. |
| `travelling-salesman` | `T`; per case `n` and an `n` by `n` matrix. |
| `wormholes` | `T`; per case `n`, `sx sy dx dy`, and `n` holes `ax ay bx by cost`. |