"""A self-balancing (AVL) binary search tree mapping ordered keys to values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    key: Any
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


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


class AVLTree:
    """An ordered mapping with unique keys kept in a height-balanced tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def insert(self, key: Any, value: Any) -> None:
        """Add ``key`` with ``value``; raise KeyError if the key is present."""
        self._root = self._insert(self._root, key, value)
        self._size += 1

    def _insert(self, node: Optional[_Node], key: Any, value: Any) -> _Node:
        if node is None:
            return _Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            raise KeyError(key)
        return _rebalance(node)

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        self._root, removed = self._remove(self._root, key)
        self._size -= 1
        return removed

    def _remove(self, node: Optional[_Node], key: Any) -> tuple[Optional[_Node], Any]:
        if node is None:
            raise KeyError(key)
        if key < node.key:
            node.left, removed = self._remove(node.left, key)
        elif key > node.key:
            node.right, removed = self._remove(node.right, key)
        else:
            removed = node.value
            if node.left is None:
                return node.right, removed
            if node.right is None:
                return node.left, removed
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right, _ = self._remove(node.right, successor.key)
        return _rebalance(node), removed

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        node = self._find(key)
        return node.value if node is not None else None

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def values_between(self, low: Any, high: Any) -> Iterator[Any]:
        """Yield values whose keys satisfy ``low <= key < high``, in key order."""

        def walk(node: Optional[_Node]) -> Iterator[Any]:
            if node is None:
                return
            if low < node.key:
                yield from walk(node.left)
            if low <= node.key < high:
                yield node.value
            if node.key < high:
                yield from walk(node.right)

        return walk(self._root)

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)