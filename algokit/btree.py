"""B-tree with proactive splitting on the way down."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False, slots=True)
class _Node:
    leaf: bool
    keys: list[Any] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)


class BTree:
    """A B-tree of the given minimum degree; equal keys are all kept."""

    def __init__(self, min_degree: int = 3) -> None:
        if min_degree < 2:
            raise ValueError("minimum degree must be at least 2")
        self._t = min_degree
        self._root = _Node(leaf=True)

    @property
    def min_degree(self) -> int:
        return self._t

    def _is_full(self, node: _Node) -> bool:
        return len(node.keys) == 2 * self._t - 1

    def _split_child(self, parent: _Node, index: int) -> None:
        t = self._t
        child = parent.children[index]
        sibling = _Node(leaf=child.leaf, keys=child.keys[t:])
        if not child.leaf:
            sibling.children = child.children[t:]
            child.children = child.children[:t]
        median = child.keys[t - 1]
        child.keys = child.keys[: t - 1]
        parent.children.insert(index + 1, sibling)
        parent.keys.insert(index, median)

    def insert(self, key: Any) -> None:
        if self._is_full(self._root):
            new_root = _Node(leaf=False, children=[self._root])
            self._split_child(new_root, 0)
            self._root = new_root
        node = self._root
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if self._is_full(node.children[index]):
                self._split_child(node, index)
                if key > node.keys[index]:
                    index += 1
            node = node.children[index]
        node.keys.insert(bisect_right(node.keys, key), key)

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        node = self._root
        while True:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return True
            if node.leaf:
                return False
            node = node.children[index]

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def _walk(self, node: _Node, level: int) -> list[tuple[int, Any]]:
        entries: list[tuple[int, Any]] = []
        for index, key in enumerate(node.keys):
            if not node.leaf:
                entries.extend(self._walk(node.children[index], level + 1))
            entries.append((level, key))
        if not node.leaf:
            entries.extend(self._walk(node.children[len(node.keys)], level + 1))
        return entries

    def inorder(self) -> list[Any]:
        """Return all keys in ascending order."""
        return [key for _, key in self._walk(self._root, 0)]

    def render(self) -> str:
        """Return the keys in order, one per line, indented four spaces per level."""
        return "".join(
            f"{' ' * (4 * level)}{key}\n" for level, key in self._walk(self._root, 0)
        )