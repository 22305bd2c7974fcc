import pytest

from contestkit.graphs import (
    is_bicolorable,
    largest_sum_cycle,
    min_sum_cycle,
    wormholes,
)

SAMPLE_ONE = [
    (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (3, 7),
    (7, 5), (2, 8), (8, 9), (9, 10), (10, 8),
]
SAMPLE_TWO = [
    (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (7, 3),
    (5, 7), (2, 8), (8, 9), (9, 10), (10, 8),
]
WEIGHTED_SAMPLE = [
    (1, 2, 1), (2, 3, 2), (3, 4, 3), (4, 5, 4), (5, 6, 5), (6, 7, 1),
    (5, 7, 6), (7, 3, 7), (2, 8, 2), (8, 9, 8), (9, 10, 9), (10, 8, 10),
]


def _ring(nodes):
    return list(zip(nodes, nodes[1:] + nodes[:1]))


@pytest.mark.parametrize("size", [2, 4, 6, 8])
def test_even_ring_is_bicolorable(size):
    assert is_bicolorable(size, _ring(list(range(size))))


@pytest.mark.parametrize("size", [3, 5, 7])
def test_odd_ring_is_not_bicolorable(size):
    assert not is_bicolorable(size, _ring(list(range(size))))


def test_chain_and_empty_graph_are_bicolorable():
    assert is_bicolorable(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert is_bicolorable(3, [])


def test_self_loop_is_not_bicolorable():
    assert not is_bicolorable(2, [(0, 1), (1, 1)])


def test_bicoloring_rejects_unknown_node():
    with pytest.raises(ValueError):
        is_bicolorable(3, [(0, 3)])


def test_min_sum_cycle_without_cycle_is_empty():
    assert min_sum_cycle(4, [(0, 1), (1, 2), (2, 3)]) == []


def test_min_sum_cycle_single_ring():
    assert min_sum_cycle(3, [(1, 2), (2, 3), (3, 1)]) == [1, 2, 3]


def test_min_sum_cycle_first_sample():
    assert min_sum_cycle(10, SAMPLE_ONE) == [8, 9, 10]


def test_min_sum_cycle_second_sample_prefers_smaller_sum():
    assert min_sum_cycle(10, SAMPLE_TWO) == [3, 4, 5, 7]


def test_min_sum_cycle_result_is_closed_under_edges():
    cycle = set(min_sum_cycle(10, SAMPLE_TWO))
    for node in cycle:
        assert any(u == node and v in cycle for u, v in SAMPLE_TWO)


def test_min_sum_cycle_rejects_unknown_node():
    with pytest.raises(ValueError):
        min_sum_cycle(3, [(1, 9)])


def test_largest_sum_cycle_sample():
    assert largest_sum_cycle(10, WEIGHTED_SAMPLE) == 27


def test_largest_sum_cycle_single_ring_is_total_weight():
    edges = [(1, 2, 4), (2, 3, 5), (3, 1, 6)]
    assert largest_sum_cycle(3, edges) == sum(w for _, _, w in edges)


def test_largest_sum_cycle_picks_heavier_ring():
    light = [(1, 2, 1), (2, 1, 1)]
    heavy = [(3, 4, 5), (4, 3, 5)]
    expected = max(sum(w for *_, w in light), sum(w for *_, w in heavy))
    assert largest_sum_cycle(5, light + heavy) == expected


def test_largest_sum_cycle_none_without_cycle():
    assert largest_sum_cycle(4, [(1, 2, 3), (2, 3, 4), (3, 4, 5)]) is None


def test_largest_sum_cycle_rejects_unknown_node():
    with pytest.raises(ValueError):
        largest_sum_cycle(2, [(1, 5, 1)])


def test_wormholes_without_holes_is_walking_distance():
    assert wormholes((0, 0), (3, 4), []) == 3 + 4


def test_wormholes_free_hole_to_destination():
    assert wormholes((0, 0), (10, 10), [(0, 0, 10, 10, 0)]) == 0


def test_wormholes_ignores_expensive_hole():
    assert wormholes((0, 0), (10, 10), [(0, 0, 10, 10, 100)]) == 20


def test_wormholes_shortcut_is_cheaper_than_walking():
    result = wormholes((0, 0), (100, 100), [(1, 1, 99, 99, 1)])
    assert 1 <= result < 200


def test_wormholes_symmetric_and_bidirectional():
    holes = [(1, 1, 99, 99, 1), (5, 50, 60, 2, 7)]
    reversed_holes = [(bx, by, ax, ay, c) for ax, ay, bx, by, c in holes]
    forward = wormholes((0, 0), (100, 100), holes)
    assert wormholes((100, 100), (0, 0), holes) == forward
    assert wormholes((0, 0), (100, 100), reversed_holes) == forward