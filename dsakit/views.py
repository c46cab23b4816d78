"""Views of a binary tree: from the sides, from above and below, and its boundary."""

from __future__ import annotations

from collections import deque

from dsakit.tree import TreeNode


def right_view(root: TreeNode | None) -> list[int]:
    """Return the last node of each level, found breadth first."""
    result: list[int] = []
    if root is None:
        return result
    queue = deque([root])
    while queue:
        last = 0
        for _ in range(len(queue)):
            node = queue.popleft()
            last = node.val
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        result.append(last)
    return result


def _side_view(root: TreeNode | None, right_first: bool) -> list[int]:
    result: list[int] = []

    def walk(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if len(result) == level:
            result.append(node.val)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        walk(first, level + 1)
        walk(second, level + 1)

    walk(root, 0)
    return result


def right_view_levels(root: TreeNode | None) -> list[int]:
    """Return the right side view, found depth first visiting right children first."""
    return _side_view(root, right_first=True)


def left_view(root: TreeNode | None) -> list[int]:
    """Return the first node of each level as seen from the left."""
    return _side_view(root, right_first=False)


def _column_view(root: TreeNode | None, keep_first: bool) -> list[int]:
    if root is None:
        return []
    columns: dict[int, int] = {}
    queue: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while queue:
        node, x = queue.popleft()
        if not keep_first or x not in columns:
            columns[x] = node.val
        if node.left is not None:
            queue.append((node.left, x - 1))
        if node.right is not None:
            queue.append((node.right, x + 1))
    return [columns[x] for x in sorted(columns)]


def top_view(root: TreeNode | None) -> list[int]:
    """Return the topmost node of each vertical column, left to right."""
    return _column_view(root, keep_first=True)


def bottom_view(root: TreeNode | None) -> list[int]:
    """Return the bottommost node of each column, later nodes winning ties."""
    return _column_view(root, keep_first=False)


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _left_boundary(node: TreeNode | None) -> list[int]:
    values: list[int] = []
    while node is not None:
        if not _is_leaf(node):
            values.append(node.val)
        node = node.left if node.left is not None else node.right
    return values


def _right_boundary(node: TreeNode | None) -> list[int]:
    values: list[int] = []
    while node is not None:
        if not _is_leaf(node):
            values.append(node.val)
        node = node.right if node.right is not None else node.left
    return values[::-1]


def _leaves(node: TreeNode) -> list[int]:
    if _is_leaf(node):
        return [node.val]
    values: list[int] = []
    if node.left is not None:
        values.extend(_leaves(node.left))
    if node.right is not None:
        values.extend(_leaves(node.right))
    return values


def boundary(root: TreeNode | None) -> list[int]:
    """Return the boundary anticlockwise: root, left edge, leaves, right edge upwards."""
    if root is None:
        return []
    result = [] if _is_leaf(root) else [root.val]
    result.extend(_left_boundary(root.left))
    result.extend(_leaves(root))
    result.extend(_right_boundary(root.right))
    return result