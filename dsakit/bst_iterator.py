"""Lazy in-order iteration over a binary search tree, forwards or backwards."""

from __future__ import annotations

from dsakit.tree import TreeNode


class BSTIterator:
    """Yield the values of a search tree in ascending order, or descending if ``reverse``.

    Only the nodes along one root-to-leaf path are held at any time.
    """

    def __init__(self, root: TreeNode | None, reverse: bool = False) -> None:
        self._reverse = reverse
        self._stack: list[TreeNode] = []
        self._push_edge(root)

    def _push_edge(self, node: TreeNode | None) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.right if self._reverse else node.left

    def has_next(self) -> bool:
        """Return whether another value remains."""
        return bool(self._stack)

    def __iter__(self) -> BSTIterator:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_edge(node.left if self._reverse else node.right)
        return node.val


def find_target(root: TreeNode | None, key: int) -> bool:
    """Return whether two different nodes of the search tree add up to ``key``."""
    if root is None:
        return False
    ascending = BSTIterator(root)
    descending = BSTIterator(root, reverse=True)
    low = next(ascending)
    high = next(descending)
    while low < high:
        total = low + high
        if total == key:
            return True
        if total < key:
            low = next(ascending)
        else:
            high = next(descending)
    return False