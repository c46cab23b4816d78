"""In-place rewrites of a binary tree: the children-sum property and flattening to a list."""

from __future__ import annotations

from dsakit.tree import TreeNode


def enforce_children_sum(root: TreeNode | None) -> None:
    """Raise values so that every inner node equals the sum of its children.

    Values are only ever increased; the tree is changed in place.
    """
    if root is None:
        return
    children = [child for child in (root.left, root.right) if child is not None]
    child_total = sum(child.val for child in children)
    if child_total >= root.val:
        root.val = child_total
    else:
        for child in children:
            child.val = root.val

    enforce_children_sum(root.left)
    enforce_children_sum(root.right)

    if children:
        root.val = sum(child.val for child in children)


def flatten_recursive(root: TreeNode | None) -> None:
    """Turn the tree into a right-linked chain in preorder, working from the back."""
    following: TreeNode | None = None

    def walk(node: TreeNode | None) -> None:
        nonlocal following
        if node is None:
            return
        walk(node.right)
        walk(node.left)
        node.right = following
        node.left = None
        following = node

    walk(root)


def flatten_with_stack(root: TreeNode | None) -> None:
    """Turn the tree into a right-linked chain in preorder using an explicit stack."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
        if stack:
            node.right = stack[-1]
        node.left = None


def flatten_in_place(root: TreeNode | None) -> None:
    """Turn the tree into a right-linked chain in preorder with constant extra space."""
    current = root
    while current is not None:
        if current.left is not None:
            prev = current.left
            while prev.right is not None:
                prev = prev.right
            prev.right = current.right
            current.right = current.left
            current.left = None
        current = current.right