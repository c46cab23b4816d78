"""Binary search tree operations: lookup, insertion, deletion, bounds, validation and rebuilding."""

from __future__ import annotations

import math
from collections.abc import Sequence

from dsakit.tree import TreeNode, inorder


def search(root: TreeNode | None, value: int) -> TreeNode | None:
    """Return the node holding ``value``, or None if the tree has no such node."""
    node = root
    while node is not None and node.val != value:
        node = node.right if node.val < value else node.left
    return node


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value`` as a new leaf and return the root; equal values go to the right."""
    if root is None:
        return TreeNode(value)
    node = root
    while True:
        if node.val <= value:
            if node.right is None:
                node.right = TreeNode(value)
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = TreeNode(value)
                return root
            node = node.left


def _rightmost(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _detach(node: TreeNode) -> TreeNode | None:
    """Return the subtree that replaces ``node`` once it is removed."""
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    _rightmost(node.left).right = node.right
    return node.left


def delete(root: TreeNode | None, key: int) -> TreeNode | None:
    """Remove the first node holding ``key`` and return the new root.

    The right subtree of a removed node is hung below the largest node of its
    left subtree. A missing key leaves the tree unchanged.
    """
    if root is None:
        return None
    if root.val == key:
        return _detach(root)
    node: TreeNode | None = root
    while node is not None:
        if node.val > key:
            if node.left is not None and node.left.val == key:
                node.left = _detach(node.left)
                break
            node = node.left
        else:
            if node.right is not None and node.right.val == key:
                node.right = _detach(node.right)
                break
            node = node.right
    return root


def find_ceil(root: TreeNode | None, key: int) -> int:
    """Return the smallest value not below ``key``, or -1 if there is none."""
    ceil = -1
    node = root
    while node is not None:
        if node.val == key:
            return node.val
        if key > node.val:
            node = node.right
        else:
            ceil = node.val
            node = node.left
    return ceil


def find_floor(root: TreeNode | None, key: int) -> int:
    """Return the largest value not above ``key``, or -1 if there is none."""
    floor = -1
    node = root
    while node is not None:
        if node.val == key:
            return node.val
        if key > node.val:
            floor = node.val
            node = node.right
        else:
            node = node.left
    return floor


def inorder_predecessor(root: TreeNode | None, key: int) -> TreeNode | None:
    """Return the node with the largest value strictly below ``key``, or None."""
    found: TreeNode | None = None
    node = root
    while node is not None:
        if key <= node.val:
            node = node.left
        else:
            found = node
            node = node.right
    return found


def inorder_successor(root: TreeNode | None, key: int) -> TreeNode | None:
    """Return the node with the smallest value strictly above ``key``, or None."""
    found: TreeNode | None = None
    node = root
    while node is not None:
        if key >= node.val:
            node = node.right
        else:
            found = node
            node = node.left
    return found


def is_valid_bst(root: TreeNode | None) -> bool:
    """Return whether every value lies strictly between the bounds set by its ancestors."""

    def check(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        return (
            low < node.val < high
            and check(node.left, low, node.val)
            and check(node.right, node.val, high)
        )

    return check(root, -math.inf, math.inf)


def lowest_common_ancestor_bst(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the node where the search paths to ``p`` and ``q`` split."""
    node = root
    while node is not None:
        if node.val < p.val and node.val < q.val:
            node = node.right
        elif node.val > p.val and node.val > q.val:
            node = node.left
        else:
            return node
    return None


def bst_from_preorder(preorder: Sequence[int]) -> TreeNode | None:
    """Build the search tree whose preorder traversal is ``preorder``."""
    values = list(preorder)
    index = 0

    def build(bound: float) -> TreeNode | None:
        nonlocal index
        if index == len(values) or values[index] > bound:
            return None
        node = TreeNode(values[index])
        index += 1
        node.left = build(node.val)
        node.right = build(bound)
        return node

    return build(math.inf)


def balance_bst(root: TreeNode | None) -> TreeNode | None:
    """Return a new height-balanced search tree holding the same values."""
    values = inorder(root)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        mid = start + (end - start) // 2
        return TreeNode(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)