"""Self-balancing AVL search tree of unique keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class _Node:
    key: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    return _rebalance(node)


def _delete(node: _Node | None, key: Any) -> _Node | None:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        replacement = node.left if node.left is not None else node.right
        if replacement is None:
            return None
        node = replacement
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """An AVL tree; duplicate inserts and deletes of absent keys are ignored."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, key: Any) -> None:
        self._root = _insert(self._root, key)

    def delete(self, key: Any) -> None:
        self._root = _delete(self._root, key)

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def preorder(self) -> list[Any]:
        """Return the keys in preorder."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def height(self) -> int:
        """Return the number of levels; 0 for an empty tree."""
        return _height(self._root)