"""Binary tree nodes and the standard depth-first, breadth-first and Morris traversals."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def preorder(root: TreeNode | None) -> list[int]:
    """Return the values in root-left-right order."""
    if root is None:
        return []
    return [root.val, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values in left-root-right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.val, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list[int]:
    """Return the values in left-right-root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.val]


def iterative_preorder(root: TreeNode | None) -> list[int]:
    """Preorder traversal using an explicit stack."""
    result: list[int] = []
    if root is None:
        return result
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root: TreeNode | None) -> list[int]:
    """Inorder traversal using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while True:
        if node is not None:
            stack.append(node)
            node = node.left
        elif stack:
            node = stack.pop()
            result.append(node.val)
            node = node.right
        else:
            break
    return result


def iterative_postorder_two_stacks(root: TreeNode | None) -> list[int]:
    """Postorder traversal using two stacks."""
    if root is None:
        return []
    pending = [root]
    collected: list[TreeNode] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.val for node in reversed(collected)]


def iterative_postorder_one_stack(root: TreeNode | None) -> list[int]:
    """Postorder traversal using a single stack."""
    result: list[int] = []
    if root is None:
        return result
    stack: list[TreeNode] = []
    current: TreeNode | None = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        right = stack[-1].right
        if right is not None:
            current = right
            continue
        done = stack.pop()
        result.append(done.val)
        while stack and done is stack[-1].right:
            done = stack.pop()
            result.append(done.val)
    return result


def _rightmost_before(node: TreeNode, stop: TreeNode) -> TreeNode:
    prev = node
    while prev.right is not None and prev.right is not stop:
        prev = prev.right
    return prev


def morris_inorder(root: TreeNode | None) -> list[int]:
    """Inorder traversal with temporary threads and no stack; the tree is restored."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        prev = _rightmost_before(current.left, current)
        if prev.right is None:
            prev.right = current
            current = current.left
        else:
            prev.right = None
            result.append(current.val)
            current = current.right
    return result


def morris_preorder(root: TreeNode | None) -> list[int]:
    """Preorder traversal with temporary threads and no stack; the tree is restored."""
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        prev = _rightmost_before(current.left, current)
        if prev.right is None:
            prev.right = current
            result.append(current.val)
            current = current.left
        else:
            prev.right = None
            current = current.right
    return result


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values level by level, each level left to right."""
    levels: list[list[int]] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            level.append(node.val)
        levels.append(level)
    return levels


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the levels with every second level, starting at the second, reversed."""
    return [
        level[::-1] if depth % 2 else level
        for depth, level in enumerate(level_order(root))
    ]


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Return columns left to right; within a column by depth, ties sorted by value."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, x, y = queue.popleft()
        columns[x][y].append(node.val)
        if node.left is not None:
            queue.append((node.left, x - 1, y + 1))
        if node.right is not None:
            queue.append((node.right, x + 1, y + 1))
    return [
        [val for y in sorted(columns[x]) for val in sorted(columns[x][y])]
        for x in sorted(columns)
    ]