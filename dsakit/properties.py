"""Whole-tree measurements: depth, balance, diameter, symmetry, node count, path sum and width."""

from __future__ import annotations

import math
from collections import deque

from dsakit.tree import TreeNode


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balanced_height(node: TreeNode | None) -> int:
    """Return the height of ``node``, or -1 if some subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left == -1:
        return -1
    right = _balanced_height(node.right)
    if right == -1 or abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced(root: TreeNode | None) -> bool:
    """Return whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) != -1


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def is_same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        first.val == second.val
        and is_same_tree(first.left, second.left)
        and is_same_tree(first.right, second.right)
    )


def _mirrors(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Return whether the tree is a mirror image of itself around the root."""
    return root is None or _mirrors(root.left, root.right)


def _left_spine(node: TreeNode | None) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.left
    return height


def _right_spine(node: TreeNode | None) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.right
    return height


def count_complete_nodes(root: TreeNode | None) -> int:
    """Count the nodes of a complete binary tree in O(log^2 n) time."""
    if root is None:
        return 0
    left = _left_spine(root)
    if left == _right_spine(root):
        return (1 << left) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def max_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum along any path between two nodes; 0 for an empty tree."""
    if root is None:
        return 0
    best = -math.inf

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.val)
        return node.val + max(left, right)

    gain(root)
    return int(best)


def max_width(root: TreeNode | None) -> int:
    """Return the widest level, counting the gaps between its outermost nodes."""
    if root is None:
        return 0
    widest = 0
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        offset = queue[0][1]
        first = last = 0
        for pos in range(len(queue)):
            node, index = queue.popleft()
            index -= offset
            if pos == 0:
                first = index
            last = index
            if node.left is not None:
                queue.append((node.left, index * 2 + 1))
            if node.right is not None:
                queue.append((node.right, index * 2 + 2))
        widest = max(widest, last - first + 1)
    return widest