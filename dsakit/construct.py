"""Building binary trees from traversals and a comma-separated level-order encoding."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from dsakit.tree import TreeNode

_NULL = "#"


def serialize(root: TreeNode | None) -> str:
    """Encode a tree level by level as comma-terminated tokens, ``#`` for missing children."""
    if root is None:
        return ""
    parts: list[str] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append(_NULL + ",")
            continue
        parts.append(f"{node.val},")
        queue.append(node.left)
        queue.append(node.right)
    return "".join(parts)


def deserialize(data: str) -> TreeNode | None:
    """Rebuild a tree from the output of :func:`serialize`.

    Raises ValueError if a token is not an integer or the data ends early.
    """
    if not data:
        return None
    tokens = iter(data.split(","))

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("serialized tree ended unexpectedly") from None

    def make(token: str) -> TreeNode | None:
        if token == _NULL:
            return None
        try:
            return TreeNode(int(token))
        except ValueError:
            raise ValueError(f"invalid node token {token!r}") from None

    root = make(take())
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        node.left = make(take())
        if node.left is not None:
            queue.append(node.left)
        node.right = make(take())
        if node.right is not None:
            queue.append(node.right)
    return root


def _inorder_positions(inorder: Sequence[int]) -> dict[int, int]:
    return {val: pos for pos, val in enumerate(inorder)}


def _position(positions: dict[int, int], val: int) -> int:
    try:
        return positions[val]
    except KeyError:
        raise ValueError(f"value {val!r} missing from inorder sequence") from None


def build_from_preorder_inorder(
    preorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Build the tree whose preorder and inorder traversals are given."""
    positions = _inorder_positions(inorder)

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if pre_start > pre_end or in_start > in_end:
            return None
        root = TreeNode(preorder[pre_start])
        in_root = _position(positions, root.val)
        left_count = in_root - in_start
        root.left = build(pre_start + 1, pre_start + left_count, in_start, in_root - 1)
        root.right = build(pre_start + left_count + 1, pre_end, in_root + 1, in_end)
        return root

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)


def build_from_postorder_inorder(
    postorder: Sequence[int], inorder: Sequence[int]
) -> TreeNode | None:
    """Build the tree whose postorder and inorder traversals are given.

    Returns None when the two sequences differ in length.
    """
    if len(postorder) != len(inorder):
        return None
    positions = _inorder_positions(inorder)

    def build(post_start: int, post_end: int, in_start: int, in_end: int) -> TreeNode | None:
        if post_start > post_end or in_start > in_end:
            return None
        root = TreeNode(postorder[post_end])
        in_root = _position(positions, root.val)
        left_count = in_root - in_start
        root.left = build(post_start, post_start + left_count - 1, in_start, in_root - 1)
        root.right = build(post_start + left_count, post_end - 1, in_root + 1, in_end)
        return root

    return build(0, len(postorder) - 1, 0, len(inorder) - 1)