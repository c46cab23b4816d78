import pytest

from dsakit.paths import burn_time, lowest_common_ancestor, nodes_at_distance, path_to
from dsakit.tree import TreeNode, preorder


def _nine_tree():
    n = {i: TreeNode(i) for i in range(1, 10)}
    n[1].left, n[1].right = n[2], n[3]
    n[2].left, n[2].right = n[4], n[5]
    n[5].left, n[5].right = n[8], n[9]
    n[3].left, n[3].right = n[6], n[7]
    return n[1], n


def _distance_tree():
    vals = [3, 5, 1, 6, 2, 7, 4, 0, 8]
    n = {v: TreeNode(v) for v in vals}
    n[3].left, n[3].right = n[5], n[1]
    n[5].left, n[5].right = n[6], n[2]
    n[2].left, n[2].right = n[7], n[4]
    n[1].left, n[1].right = n[0], n[8]
    return n[3], n


def _find(root, value):
    if root is None:
        return None
    if root.val == value:
        return root
    return _find(root.left, value) or _find(root.right, value)


def test_path_to_worked_example():
    root, _ = _nine_tree()
    assert path_to(root, 8) == [1, 2, 5, 8]


@pytest.mark.parametrize("value", range(1, 10))
def test_path_follows_parent_child_links(value):
    root, _ = _nine_tree()
    path = path_to(root, value)
    assert path[0] == root.val
    assert path[-1] == value
    node = root
    for step in path[1:]:
        children = [c for c in (node.left, node.right) if c is not None]
        matching = [c for c in children if c.val == step]
        assert matching
        node = matching[0]


def test_path_to_missing_value_is_empty():
    root, _ = _nine_tree()
    assert path_to(root, 42) == []
    assert path_to(None, 1) == []


def test_lca_siblings_and_cousins():
    root, n = _nine_tree()
    assert lowest_common_ancestor(root, n[4], n[5]) is n[2]
    assert lowest_common_ancestor(root, n[8], n[7]) is root
    assert lowest_common_ancestor(root, n[9], n[4]) is n[2]


def test_lca_when_one_is_ancestor():
    root, n = _nine_tree()
    assert lowest_common_ancestor(root, n[2], n[9]) is n[2]
    assert lowest_common_ancestor(None, n[2], n[9]) is None


def test_nodes_at_distance_worked_example():
    root, n = _distance_tree()
    assert sorted(nodes_at_distance(root, n[5], 2)) == [1, 4, 7]


def test_nodes_at_distance_zero_is_target():
    root, n = _distance_tree()
    assert nodes_at_distance(root, n[2], 0) == [n[2].val]


def test_rings_partition_the_tree():
    root, n = _distance_tree()
    seen = []
    for k in range(20):
        seen.extend(nodes_at_distance(root, n[7], k))
    assert sorted(seen) == sorted(preorder(root))
    assert len(seen) == len(set(seen))


def test_negative_distance_rejected():
    root, n = _distance_tree()
    with pytest.raises(ValueError):
        nodes_at_distance(root, n[5], -1)


def test_burn_time_worked_example():
    n = {i: TreeNode(i) for i in range(1, 8)}
    n[1].left, n[1].right = n[2], n[3]
    n[2].left = n[4]
    n[4].right = n[7]
    n[3].left, n[3].right = n[5], n[6]
    assert burn_time(n[1], n[2]) == 3


@pytest.mark.parametrize("start", [3, 5, 6, 2, 7, 4, 1, 0, 8])
def test_burn_time_matches_farthest_ring(start):
    root, _ = _distance_tree()
    target = _find(root, start)
    t = burn_time(root, target)
    assert nodes_at_distance(root, target, t)
    assert nodes_at_distance(root, target, t + 1) == []


def test_burn_single_node_and_chain():
    lone = TreeNode(5)
    assert burn_time(lone, lone) == 0
    chain = TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4))))
    assert burn_time(chain, chain) == len(preorder(chain)) - 1