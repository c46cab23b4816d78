"""Paths and distances inside a binary tree: root paths, common ancestors, burning."""

from __future__ import annotations

from collections import deque

from dsakit.tree import TreeNode


def path_to(root: TreeNode | None, value: int) -> list[int]:
    """Return the values from the root down to the first node holding ``value``.

    The search goes depth first, left before right; an empty list means no such node.
    """
    path: list[int] = []

    def walk(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == value or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the deepest node that has both ``p`` and ``q`` (by identity) below or at it."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def _parents(root: TreeNode | None) -> dict[TreeNode, TreeNode]:
    """Map every node except the root to its parent."""
    parents: dict[TreeNode, TreeNode] = {}
    if root is None:
        return parents
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node
                queue.append(child)
    return parents


def _spread(root: TreeNode | None, target: TreeNode):
    """Yield each successive ring of nodes reached from ``target`` through children and parents."""
    parents = _parents(root)
    visited = {target}
    ring = [target]
    while ring:
        yield ring
        following: list[TreeNode] = []
        for node in ring:
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in visited:
                    visited.add(neighbour)
                    following.append(neighbour)
        ring = following


def nodes_at_distance(root: TreeNode | None, target: TreeNode, k: int) -> list[int]:
    """Return the values of the nodes exactly ``k`` edges away from ``target``."""
    if k < 0:
        raise ValueError("k must be non-negative")
    for distance, ring in enumerate(_spread(root, target)):
        if distance == k:
            return [node.val for node in ring]
    return []


def burn_time(root: TreeNode | None, target: TreeNode) -> int:
    """Return how many steps a fire started at ``target`` needs to reach every node."""
    steps = -1
    for _ in _spread(root, target):
        steps += 1
    return max(steps, 0)