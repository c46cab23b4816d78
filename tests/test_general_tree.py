import pytest

from dsakit.general_tree import (
    distance_sums,
    greedy_matching,
    max_distances,
    subordinate_counts,
    tree_diameter,
)

EXAMPLE_EDGES = [(1, 2), (1, 3), (3, 4), (3, 5)]


def _path(n):
    return [(i, i + 1) for i in range(1, n)]


def _star(n):
    return [(1, i) for i in range(2, n + 1)]


def test_subordinates_example():
    assert subordinate_counts(5, [1, 1, 2, 3]) == [4, 1, 1, 0, 0]


def test_subordinates_chain():
    n = 6
    assert subordinate_counts(n, list(range(1, n))) == list(range(n - 1, -1, -1))


def test_subordinates_star():
    n = 7
    assert subordinate_counts(n, [1] * (n - 1)) == [n - 1] + [0] * (n - 1)


def test_subordinates_single_employee():
    assert subordinate_counts(1, []) == [0]


def test_subordinates_wrong_length():
    with pytest.raises(ValueError):
        subordinate_counts(4, [1, 1])


def test_diameter_example():
    assert tree_diameter(5, EXAMPLE_EDGES) == 3


@pytest.mark.parametrize("n", [2, 5, 10])
def test_diameter_path(n):
    assert tree_diameter(n, _path(n)) == n - 1


def test_diameter_single_node():
    assert tree_diameter(1, []) == 0


def test_diameter_bad_node():
    with pytest.raises(ValueError):
        tree_diameter(3, [(1, 2), (2, 9)])


def test_distance_sums_example():
    assert distance_sums(5, EXAMPLE_EDGES) == [6, 9, 5, 8, 8]


def test_distance_sums_path_is_symmetric():
    sums = distance_sums(7, _path(7))
    assert sums == sums[::-1]
    assert min(sums) == sums[3]


def test_distance_sums_star_center():
    n = 6
    sums = distance_sums(n, _star(n))
    assert sums[0] == n - 1
    assert len(set(sums[1:])) == 1


def test_distance_sums_single_node():
    assert distance_sums(1, []) == [0]


def test_max_distances_example():
    assert max_distances(5, EXAMPLE_EDGES) == [2, 3, 2, 3, 3]


@pytest.mark.parametrize("n", [2, 4, 9])
def test_max_distances_largest_is_diameter(n):
    assert max(max_distances(n, _path(n))) == tree_diameter(n, _path(n))


def test_max_distances_path_ends():
    n = 8
    result = max_distances(n, _path(n))
    assert result[0] == result[-1] == n - 1


def test_max_distances_single_node():
    assert max_distances(1, []) == [0]


def test_matching_path():
    assert greedy_matching(_path(4)) == 2


def test_matching_star():
    assert greedy_matching(_star(8)) == 1


def test_matching_never_exceeds_edges():
    edges = EXAMPLE_EDGES
    assert greedy_matching(edges) <= len(edges)
    assert greedy_matching([]) == 0