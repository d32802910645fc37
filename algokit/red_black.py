"""Red-black search tree with a shared black sentinel for empty links."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Color(Enum):
    RED = "R"
    BLACK = "B"


@dataclass(eq=False, slots=True)
class _Node:
    key: Any
    color: Color
    left: _Node | None = None
    right: _Node | None = None
    parent: _Node | None = None


class RedBlackTree:
    """A red-black tree; equal keys are kept, to the right of their twins."""

    def __init__(self) -> None:
        self._nil = _Node(None, Color.BLACK)
        self._root = self._nil

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, y: _Node) -> None:
        x = y.left
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is self._nil:
            self._root = x
        elif y is y.parent.right:
            y.parent.right = x
        else:
            y.parent.left = x
        x.right = y
        y.parent = x

    def _insert_fixup(self, z: _Node) -> None:
        while z.parent.color is Color.RED:
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    def insert(self, key: Any) -> None:
        z = _Node(key, Color.RED, self._nil, self._nil, self._nil)
        parent = self._nil
        node = self._root
        while node is not self._nil:
            parent = node
            node = node.left if key < node.key else node.right
        z.parent = parent
        if parent is self._nil:
            self._root = z
        elif key < parent.key:
            parent.left = z
        else:
            parent.right = z
        self._insert_fixup(z)

    def _transplant(self, u: _Node, v: _Node) -> None:
        if u.parent is self._nil:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _minimum(self, node: _Node) -> _Node:
        while node.left is not self._nil:
            node = node.left
        return node

    def _delete_fixup(self, x: _Node) -> None:
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    def _find(self, key: Any) -> _Node:
        node = self._root
        while node is not self._nil and key != node.key:
            node = node.left if key < node.key else node.right
        return node

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; an absent key is ignored."""
        z = self._find(key)
        if z is self._nil:
            return
        y = z
        original_color = y.color
        if z.left is self._nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is self._nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            original_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if original_color is Color.BLACK:
            self._delete_fixup(x)

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        return self._find(key) is not self._nil

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def inorder(self) -> list[tuple[Any, Color]]:
        """Return ``(key, color)`` pairs in ascending key order."""
        result: list[tuple[Any, Color]] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not self._nil:
            while node is not self._nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append((node.key, node.color))
            node = node.right
        return result

    def clear(self) -> None:
        """Remove every key."""
        self._root = self._nil