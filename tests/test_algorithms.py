import math

import pytest

from plagcheck.algorithms import (
    MODULO,
    NNMaker,
    compress,
    matmul,
    num_ways_reach,
    shortest_path_wt,
    transform,
)

GRAPH = [
    [(1, 2), (2, 3)],
    [(2, 4)],
    [(1, 1), (3, 5)],
    [(0, 6)],
    [(2, 7), (4, 8)],
    [(0, 9), (3, 10)],
    [(1, 11), (5, 12)],
    [(2, 13), (6, 14)],
    [(3, 15), (7, 16)],
    [(4, 17), (8, 18)],
    [(5, 19), (9, 20)],
]

ROWS = [
    [1, 2, 3, 4, 5],
    [6, 7, 8, 9, 10],
    [11, 12, 13, 14, 15],
    [16, 17, 18, 19, 20],
]


@pytest.mark.parametrize("column", range(5))
def test_get_nearest_with_unit_vector_picks_column(column):
    unit = [1 if i == column else 0 for i in range(5)]
    assert NNMaker(ROWS).get_nearest(unit) == [row[column] for row in ROWS]


def test_get_nearest_is_linear():
    nn = NNMaker(ROWS)
    q1, q2 = [1, 4, 9, 16, 25], [2, 0, -1, 3, 5]
    combined = [a + b for a, b in zip(q1, q2)]
    expected = [a + b for a, b in zip(nn.get_nearest(q1), nn.get_nearest(q2))]
    assert nn.get_nearest(combined) == expected


def test_get_nearest_one_value_per_row():
    assert len(NNMaker(ROWS).get_nearest([1, 4, 9, 16, 25])) == len(ROWS)


def test_nnmaker_rejects_empty_and_ragged():
    with pytest.raises(ValueError):
        NNMaker([])
    with pytest.raises(ValueError):
        NNMaker([[1, 2], [3]])


def test_get_nearest_rejects_short_query():
    with pytest.raises(ValueError):
        NNMaker(ROWS).get_nearest([1, 2])


def test_shortest_path_reports_minus_one():
    assert shortest_path_wt(GRAPH) == -1


def test_shortest_path_rejects_empty_graph():
    with pytest.raises(ValueError):
        shortest_path_wt([])


def test_shortest_path_bad_edge():
    with pytest.raises(IndexError):
        shortest_path_wt([[(5, 1)]])


def test_num_ways_origin():
    assert num_ways_reach(0, 0, 0) == 1


def test_num_ways_unit_cube():
    assert num_ways_reach(1, 1, 1) == 6


@pytest.mark.parametrize("n", [0, 1, 7])
def test_num_ways_straight_line(n):
    assert num_ways_reach(n, 0, 0) == 1
    assert num_ways_reach(0, n, 0) == 1
    assert num_ways_reach(0, 0, n) == 1


@pytest.mark.parametrize("x,y", [(3, 4), (5, 5), (10, 2)])
def test_num_ways_plane_is_binomial(x, y):
    assert num_ways_reach(x, y, 0) == math.comb(x + y, x)


def test_num_ways_symmetric():
    value = num_ways_reach(2, 3, 4)
    assert num_ways_reach(4, 2, 3) == value
    assert num_ways_reach(3, 4, 2) == value


def test_num_ways_pascal_rule():
    x, y, z = 3, 2, 4
    total = (
        num_ways_reach(x - 1, y, z)
        + num_ways_reach(x, y - 1, z)
        + num_ways_reach(x, y, z - 1)
    ) % MODULO
    assert num_ways_reach(x, y, z) == total


def test_num_ways_reduced_modulo():
    assert 0 <= num_ways_reach(20, 20, 20) < MODULO


def test_num_ways_rejects_negative():
    with pytest.raises(ValueError):
        num_ways_reach(-1, -2, -3)


def test_transform_keeps_shape_and_applies():
    v = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    result = transform(v, str)
    assert [len(row) for row in result] == [3, 3, 3]
    assert compress(result) == [str(x) for x in compress(v)]


def test_transform_identity_is_copy():
    v = [[1, 2], [3, 4]]
    result = transform(v, lambda x: x)
    assert result == v
    assert result is not v


def test_compress_flattens_in_order():
    assert compress([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert compress([]) == []


def test_matmul_example():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[7, 8], [9, 10], [11, 12]]
    assert matmul(a, b) == [[58, 64], [139, 154]]


def test_matmul_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matmul(a, identity) == a


def test_matmul_empty():
    assert matmul([], [[1]]) == []


def test_matmul_shape_mismatch():
    with pytest.raises(ValueError):
        matmul([[1, 2]], [[1, 2]])