"""B+ tree whose keys live in a linked chain of leaves."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False, slots=True)
class _Node:
    leaf: bool
    keys: list[Any] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)
    next: _Node | None = None


class BPlusTree:
    """A B+ tree of the given order; every node holds at most ``order - 1`` keys.

    Equal keys are all kept.  Internal nodes only route: a key equal to a
    separator is found in the subtree to the separator's right.
    """

    def __init__(self, order: int = 3) -> None:
        if order < 3:
            raise ValueError("order must be at least 3")
        self._order = order
        self._root = _Node(leaf=True)

    @property
    def order(self) -> int:
        return self._order

    def _split_leaf(self, leaf: _Node) -> tuple[Any, _Node]:
        mid = len(leaf.keys) // 2
        sibling = _Node(leaf=True, keys=leaf.keys[mid:], next=leaf.next)
        leaf.keys = leaf.keys[:mid]
        leaf.next = sibling
        return sibling.keys[0], sibling

    def _split_internal(self, node: _Node) -> tuple[Any, _Node]:
        mid = len(node.keys) // 2
        promoted = node.keys[mid]
        sibling = _Node(
            leaf=False,
            keys=node.keys[mid + 1 :],
            children=node.children[mid + 1 :],
        )
        node.keys = node.keys[:mid]
        node.children = node.children[: mid + 1]
        return promoted, sibling

    def _insert(self, node: _Node, key: Any) -> tuple[Any, _Node] | None:
        """Insert below ``node``; return a separator and new right sibling on split."""
        if node.leaf:
            node.keys.insert(bisect_left(node.keys, key), key)
            if len(node.keys) < self._order:
                return None
            return self._split_leaf(node)
        index = bisect_right(node.keys, key)
        split = self._insert(node.children[index], key)
        if split is None:
            return None
        separator, sibling = split
        node.keys.insert(index, separator)
        node.children.insert(index + 1, sibling)
        if len(node.keys) < self._order:
            return None
        return self._split_internal(node)

    def insert(self, key: Any) -> None:
        split = self._insert(self._root, key)
        if split is not None:
            separator, sibling = split
            self._root = _Node(
                leaf=False, keys=[separator], children=[self._root, sibling]
            )

    def _leaf_for(self, key: Any) -> _Node:
        node = self._root
        while not node.leaf:
            node = node.children[bisect_right(node.keys, key)]
        return node

    def search(self, key: Any) -> bool:
        """Tell whether ``key`` is stored in the tree."""
        return key in self._leaf_for(key).keys

    def __contains__(self, key: Any) -> bool:
        return self.search(key)

    def leaves(self) -> list[Any]:
        """Return the keys of the leaf level, left to right along the chain."""
        node = self._root
        while not node.leaf:
            node = node.children[0]
        keys: list[Any] = []
        current: _Node | None = node
        while current is not None:
            keys.extend(current.keys)
            current = current.next
        return keys