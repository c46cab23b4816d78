import pytest

from dsakit.bst import (
    balance_bst,
    bst_from_preorder,
    delete,
    find_ceil,
    find_floor,
    inorder_predecessor,
    inorder_successor,
    insert,
    is_valid_bst,
    lowest_common_ancestor_bst,
    search,
)
from dsakit.properties import is_balanced
from dsakit.tree import TreeNode, inorder, preorder

SAMPLE = [10, 5, 13, 3, 6, 11, 14, 2, 4]


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def test_insert_into_empty_tree_creates_root():
    root = insert(None, 7)
    assert (root.val, root.left, root.right) == (7, None, None)


def test_insert_keeps_inorder_sorted():
    root = build(SAMPLE)
    root = insert(root, 12)
    assert inorder(root) == sorted(SAMPLE + [12])
    assert is_valid_bst(root)


def test_insert_sends_equal_values_right():
    root = build([5])
    insert(root, 5)
    assert root.left is None
    assert root.right.val == 5


@pytest.mark.parametrize("value", SAMPLE)
def test_search_finds_every_value(value):
    node = search(build(SAMPLE), value)
    assert node.val == value


def test_search_missing_and_empty():
    assert search(build(SAMPLE), 7) is None
    assert search(None, 3) is None


@pytest.mark.parametrize("key", SAMPLE)
def test_delete_removes_key(key):
    root = delete(build(SAMPLE), key)
    expected = sorted(SAMPLE)
    expected.remove(key)
    assert inorder(root) == expected
    assert is_valid_bst(root)


def test_delete_root_with_two_children_promotes_left():
    root = delete(build(SAMPLE), 10)
    assert root.val == 5
    assert search(root, 10) is None


def test_delete_missing_key_leaves_tree_unchanged():
    root = build(SAMPLE)
    before = preorder(root)
    assert preorder(delete(root, 99)) == before
    assert delete(None, 1) is None


def test_ceil_values():
    root = build(SAMPLE)
    assert find_ceil(root, 4) == 4
    assert find_ceil(root, 7) == 10
    assert find_ceil(root, 12) == 13
    assert find_ceil(root, 15) == -1


def test_floor_values():
    root = build([10, 5, 15, 2, 8, 6, 13, 17])
    assert find_floor(root, 9) == 8
    assert find_floor(root, 13) == 13
    assert find_floor(root, 16) == 15
    assert find_floor(root, 1) == -1


def test_inorder_predecessor():
    root = build([5, 2, 7, 1, 4, 3, 6, 9, 8, 10])
    assert inorder_predecessor(root, 3).val == 2
    assert inorder_predecessor(root, 6).val == 5
    assert inorder_predecessor(root, 1) is None


def test_inorder_successor():
    root = build([5, 2, 7, 1, 4, 3, 6, 9, 8, 10])
    assert inorder_successor(root, 4).val == 5
    assert inorder_successor(root, 7).val == 8
    assert inorder_successor(root, 10) is None


def test_predecessor_and_successor_are_neighbours_in_inorder():
    root = build(SAMPLE)
    order = inorder(root)
    for before, after in zip(order, order[1:]):
        assert inorder_successor(root, before).val == after
        assert inorder_predecessor(root, after).val == before


def test_is_valid_bst_accepts_search_tree():
    root = TreeNode(13)
    root.left = TreeNode(10, TreeNode(7, None, TreeNode(9, TreeNode(8))), TreeNode(12))
    root.right = TreeNode(15, TreeNode(14), TreeNode(17, TreeNode(16)))
    assert is_valid_bst(root)
    assert is_valid_bst(None)


def test_is_valid_bst_rejects_deep_violation():
    root = TreeNode(5, TreeNode(3, None, TreeNode(6)), TreeNode(8))
    assert not is_valid_bst(root)


def test_is_valid_bst_rejects_duplicates():
    assert not is_valid_bst(TreeNode(5, None, TreeNode(5)))


def test_lowest_common_ancestor_bst():
    root = build([10, 4, 13, 3, 8, 1, 2, 6, 5, 7, 9, 11, 15])
    p = search(root, 2)
    q = search(root, 7)
    assert lowest_common_ancestor_bst(root, p, q) is search(root, 4)
    assert lowest_common_ancestor_bst(root, search(root, 11), search(root, 15)).val == 13
    assert lowest_common_ancestor_bst(root, p, search(root, 3)).val == 3


def test_bst_from_preorder_round_trip():
    values = [8, 5, 1, 7, 10, 12]
    root = bst_from_preorder(values)
    assert preorder(root) == values
    assert inorder(root) == sorted(values)
    assert root.left.val == 5
    assert root.right.val == 10


def test_bst_from_empty_preorder():
    assert bst_from_preorder([]) is None


def test_balance_bst_keeps_values_and_balances():
    root = build(range(1, 16))
    balanced = balance_bst(root)
    assert inorder(balanced) == list(range(1, 16))
    assert is_balanced(balanced)
    assert is_valid_bst(balanced)
    assert balanced.val == 8


def test_balance_empty_tree():
    assert balance_bst(None) is None