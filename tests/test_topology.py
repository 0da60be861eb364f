import numpy as np
import pytest

import torus_life.topology as topology
from torus_life.topology import (
    bottom, is_bottom_edge, is_left_edge, is_right_edge, is_top_edge,
    left, neighbors, right, top,
)


def test_edge_predicates_on_4x4():
    assert [i for i in range(16) if is_left_edge(i, 4)] == [0, 4, 8, 12]
    assert [i for i in range(16) if is_right_edge(i, 4)] == [3, 7, 11, 15]
    assert [i for i in range(16) if is_top_edge(i, 4)] == [0, 1, 2, 3]
    assert [i for i in range(16) if is_bottom_edge(i, 4)] == [12, 13, 14, 15]


def test_steps_inside_the_grid():
    # 5 is (1, 1) on a 4x4 grid
    assert left(5, 4) == 4
    assert right(5, 4) == 6
    assert top(5, 4) == 1
    assert bottom(5, 4) == 9


def test_steps_wrap_around_edges():
    assert left(4, 4) == 7
    assert right(7, 4) == 4
    assert top(2, 4) == 14
    assert bottom(14, 4) == 2


def test_corner_wraps_both_axes():
    assert top(left(0, 4), 4) == 15
    assert bottom(right(15, 4), 4) == 0


def test_center_of_3x3_sees_every_other_cell():
    assert neighbors(4, 3) == [0, 1, 2, 3, 5, 6, 7, 8]


def test_corner_of_3x3():
    assert neighbors(0, 3) == [8, 6, 7, 2, 1, 5, 3, 4]


@pytest.mark.parametrize("xbase", [3, 4, 5, 7])
def test_neighbors_are_eight_distinct_cells_in_range(xbase):
    for i in range(xbase * xbase):
        ns = neighbors(i, xbase)
        assert len(ns) == 8
        assert len(set(ns)) == 8
        assert i not in ns
        assert all(0 <= n < xbase * xbase for n in ns)


@pytest.mark.parametrize("xbase", [3, 6])
def test_neighbors_match_modular_coordinates(xbase):
    for i in range(xbase * xbase):
        r, c = divmod(i, xbase)
        expected = [
            ((r + dr) % xbase) * xbase + (c + dc) % xbase
            for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc
        ]
        assert neighbors(i, xbase) == expected


def test_degenerate_sizes():
    assert neighbors(0, 1) == [0] * 8
    assert neighbors(0, 2) == [3, 2, 3, 1, 1, 3, 2, 3]


def test_neighbors_rejects_bad_arguments():
    with pytest.raises(ValueError):
        neighbors(9, 3)
    with pytest.raises(ValueError):
        neighbors(-1, 3)
    with pytest.raises(ValueError):
        neighbors(0, 0)


def test_neighbors_rejects_non_integer_index():
    with pytest.raises(TypeError):
        neighbors(4.0, 3)
    with pytest.raises(TypeError):
        neighbors(4, 3.0)
    with pytest.raises(TypeError):
        neighbors(True, 3)


def test_numpy_integers_give_plain_ints():
    ns = neighbors(np.int64(4), np.int32(3))
    assert ns == [0, 1, 2, 3, 5, 6, 7, 8]
    assert all(type(n) is int for n in ns)


def test_no_neighbor_lists_are_kept():
    for name in dir(topology):
        assert not hasattr(getattr(topology, name), "cache_info"), name
    module_state = [v for k, v in vars(topology).items() if not k.startswith("__")]
    assert not any(isinstance(v, (list, dict, np.ndarray)) for v in module_state)
