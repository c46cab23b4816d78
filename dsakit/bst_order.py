"""Order statistics and repairs on search trees: k-th values, largest valid subtree, recovery."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import islice

from dsakit.bst_iterator import BSTIterator
from dsakit.tree import TreeNode


def _check_k(k: int) -> None:
    if k < 1:
        raise ValueError("k must be at least 1")


def kth_smallest(root: TreeNode | None, k: int) -> int | None:
    """Return the k-th smallest value (1-based), or None if the tree has fewer than k nodes."""
    _check_k(k)
    return next(islice(BSTIterator(root), k - 1, None), None)


def kth_largest(root: TreeNode | None, k: int) -> int | None:
    """Return the k-th largest value (1-based), or None if the tree has fewer than k nodes."""
    _check_k(k)
    return next(islice(BSTIterator(root, reverse=True), k - 1, None), None)


def kth_smallest_morris(root: TreeNode | None, k: int) -> int | None:
    """Return the k-th smallest value using Morris threading; the tree is left unchanged."""
    _check_k(k)
    found: int | None = None
    count = 0
    current = root
    while current is not None:
        if current.left is None:
            count += 1
            if count == k:
                found = current.val
            current = current.right
            continue
        prev = current.left
        while prev.right is not None and prev.right is not current:
            prev = prev.right
        if prev.right is None:
            prev.right = current
            current = current.left
        else:
            prev.right = None
            count += 1
            if count == k:
                found = current.val
            current = current.right
    return found


@dataclass(frozen=True)
class _Summary:
    low: float
    high: float
    size: int


def largest_bst_size(root: TreeNode | None) -> int:
    """Return the node count of the largest subtree that is a valid search tree."""

    def summarise(node: TreeNode | None) -> _Summary:
        if node is None:
            return _Summary(math.inf, -math.inf, 0)
        left = summarise(node.left)
        right = summarise(node.right)
        if left.high < node.val < right.low:
            return _Summary(
                min(node.val, left.low),
                max(node.val, right.high),
                left.size + right.size + 1,
            )
        return _Summary(-math.inf, math.inf, max(left.size, right.size))

    return summarise(root).size


def recover_tree(root: TreeNode | None) -> None:
    """Swap back the values of the two nodes of a search tree that were exchanged."""
    first: TreeNode | None = None
    middle: TreeNode | None = None
    last: TreeNode | None = None
    prev: TreeNode | None = None

    def walk(node: TreeNode | None) -> None:
        nonlocal first, middle, last, prev
        if node is None:
            return
        walk(node.left)
        if prev is not None and node.val < prev.val:
            if first is None:
                first, middle = prev, node
            else:
                last = node
        prev = node
        walk(node.right)

    walk(root)
    if first is not None and last is not None:
        first.val, last.val = last.val, first.val
    elif first is not None and middle is not None:
        first.val, middle.val = middle.val, first.val