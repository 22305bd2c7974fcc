import copy

import pytest

from contestkit.grids import endoscope, rare_element, rock_climbing

PIPES = [
    [0, 0, 0, 0, 0],
    [0, 1, 3, 6, 0],
    [0, 2, 0, 2, 0],
    [0, 4, 3, 7, 0],
    [0, 0, 0, 0, 0],
]


def test_endoscope_start_without_pipe_reaches_nothing():
    assert endoscope(PIPES, 0, 0, 10) == 0


def test_endoscope_length_one_sees_only_start():
    assert endoscope(PIPES, 1, 1, 1) == 1


def test_endoscope_full_cross_grid_reaches_everything():
    grid = [[1] * 4 for _ in range(3)]
    assert endoscope(grid, 1, 1, 100) == len(grid) * len(grid[0])


def test_endoscope_closed_loop_reaches_all_pipes():
    pipe_count = sum(1 for row in PIPES for cell in row if cell)
    assert endoscope(PIPES, 1, 1, 100) == pipe_count


def test_endoscope_horizontal_row_stays_in_row():
    grid = [[2, 2, 2], [3, 3, 3], [2, 2, 2]]
    assert endoscope(grid, 1, 1, 100) == len(grid[1])


def test_endoscope_mismatched_pipes_do_not_connect():
    grid = [[3, 3, 3], [3, 2, 3], [3, 3, 3]]
    assert endoscope(grid, 1, 1, 100) == endoscope(grid, 1, 1, 1)


def test_endoscope_grows_with_length():
    counts = [endoscope(PIPES, 1, 1, length) for length in range(1, 9)]
    assert counts == sorted(counts)
    assert counts[-1] <= sum(1 for row in PIPES for cell in row if cell)


def test_endoscope_leaves_input_alone():
    grid = copy.deepcopy(PIPES)
    endoscope(grid, 1, 1, 100)
    assert grid == PIPES


def test_endoscope_rejects_bad_pipe_and_start():
    with pytest.raises(ValueError):
        endoscope([[8]], 0, 0, 1)
    with pytest.raises(ValueError):
        endoscope(PIPES, 9, 0, 1)


ROAD = [
    [1, 1, 1, 1, 1],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
]


def test_rare_element_meets_in_the_middle_of_a_road():
    assert rare_element(ROAD, [(1, 1), (1, 5)]) == 2


def test_rare_element_order_does_not_matter():
    grid = [[1, 1, 1, 0], [1, 0, 1, 1], [1, 1, 1, 0], [0, 1, 1, 1]]
    elements = [(1, 1), (4, 4), (3, 2)]
    assert rare_element(grid, elements) == rare_element(grid, elements[::-1])


def test_rare_element_leaves_input_alone():
    grid = copy.deepcopy(ROAD)
    rare_element(grid, [(1, 1), (1, 5)])
    assert grid == ROAD


def test_rare_element_errors():
    with pytest.raises(ValueError):
        rare_element([[0, 0], [0, 0]], [(1, 1)])
    with pytest.raises(ValueError):
        rare_element(ROAD, [(6, 1)])
    with pytest.raises(ValueError):
        rare_element([[1, 1, 1], [1, 1, 1]], [(1, 1)])


def test_rock_climbing_goal_on_bottom_row_needs_no_reach():
    assert rock_climbing([[0, 0, 0], [1, 1, 3]]) == 0


def test_rock_climbing_jump_over_gap_needs_full_height():
    grid = [[3, 0], [0, 0], [1, 0]]
    assert rock_climbing(grid) == len(grid) - 1


def test_rock_climbing_staircase():
    grid = [[0, 0, 3], [0, 1, 1], [1, 1, 0]]
    assert rock_climbing(grid) == 1


def test_rock_climbing_unreachable_goal():
    assert rock_climbing([[0, 3], [1, 0]]) is None


def test_rock_climbing_rejects_empty_grid():
    with pytest.raises(ValueError):
        rock_climbing([])