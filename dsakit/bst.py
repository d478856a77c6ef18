"""Unbalanced binary search tree with parent links."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinarySearchTree"]


@dataclass(eq=False)
class _Node:
    key: Any
    parent: Optional[_Node] = None
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _leftmost(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: _Node) -> _Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """Binary search tree; equal keys go to the right subtree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        parent: Optional[_Node] = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if key < current.key else current.right
        node = _Node(key, parent=parent)
        if parent is None:
            self._root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def _find(self, key: Any) -> Optional[_Node]:
        current = self._root
        while current is not None and current.key != key:
            current = current.left if key < current.key else current.right
        return current

    def _require(self, key: Any) -> _Node:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node

    def _replace(self, node: _Node, child: Optional[_Node]) -> None:
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; return whether one was found."""
        node = self._find(key)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            heir = _leftmost(node.right)
            node.key = heir.key
            node = heir
        self._replace(node, node.left if node.left is not None else node.right)
        self._size -= 1
        return True

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.key
            current = current.right

    def __len__(self) -> int:
        return self._size

    def minimum(self) -> Any:
        """Smallest key; raise ``ValueError`` on an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _leftmost(self._root).key

    def maximum(self) -> Any:
        """Largest key; raise ``ValueError`` on an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        return _rightmost(self._root).key

    def successor(self, key: Any) -> Any:
        """Key that follows ``key`` in order, or ``None`` if it is the last."""
        node = self._require(key)
        if node.right is not None:
            return _leftmost(node.right).key
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return None if parent is None else parent.key

    def predecessor(self, key: Any) -> Any:
        """Key that precedes ``key`` in order, or ``None`` if it is the first."""
        node = self._require(key)
        if node.left is not None:
            return _rightmost(node.left).key
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return None if parent is None else parent.key