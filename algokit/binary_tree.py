"""Binary trees built in level order and walked without recursion."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values given in level order.

    The first value is the root; after that each node, in the order it was
    created, takes a left and then a right child.  ``None`` marks a missing
    child, and children past the end of ``values`` are missing too.
    """
    source = iter(values)
    root_value = next(source, None)
    if root_value is None:
        return None
    root = TreeNode(root_value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(source, None)
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(source, None)
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def preorder(root: TreeNode | None) -> list[Any]:
    """Return node values in preorder, using an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result