"""An unbalanced binary search tree keyed by a user-supplied key function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(slots=True)
class _Node:
    item: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree holding unique keys; duplicates are not inserted."""

    def __init__(
        self,
        key: Callable[[Any], Any] | None = None,
        on_delete: Callable[[Any], None] | None = None,
    ) -> None:
        self._key_func = key
        self._on_delete = on_delete
        self._root: _Node | None = None
        self._size = 0

    def _key(self, item: Any) -> Any:
        return item if self._key_func is None else self._key_func(item)

    def _search(self, key: Any) -> tuple[_Node | None, _Node | None]:
        node, parent = self._root, None
        while node is not None:
            node_key = self._key(node.item)
            if key == node_key:
                return node, parent
            parent = node
            node = node.left if key < node_key else node.right
        return None, None

    def add(self, item: Any) -> bool:
        """Insert ``item``; return False if its key is already present."""
        key = self._key(item)
        if self._root is None:
            self._root = _Node(item)
            self._size = 1
            return True
        node = self._root
        while True:
            node_key = self._key(node.item)
            if key == node_key:
                return False
            if key < node_key:
                if node.left is None:
                    node.left = _Node(item)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(item)
                    break
                node = node.right
        self._size += 1
        return True

    def get(self, key: Any) -> Any:
        """Return the item stored under ``key``, or None."""
        node, _ = self._search(key)
        return node.item if node is not None else None

    def find_with_parent(self, key: Any) -> tuple[Any, Any]:
        """Return ``(item, parent_item)``; either is None when absent."""
        node, parent = self._search(key)
        if node is None:
            return None, None
        return node.item, parent.item if parent is not None else None

    def remove(self, key: Any) -> bool:
        """Remove the item under ``key``; return False if there is none."""
        node, parent = self._search(key)
        if node is None:
            return False
        if node.left is None or node.right is None:
            replacement = node.left if node.left is not None else node.right
        else:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            if succ_parent.left is succ:
                succ_parent.left = succ.right
            else:
                succ_parent.right = succ.right
            succ.left = node.left
            succ.right = node.right
            replacement = succ

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        if self._on_delete is not None:
            self._on_delete(node.item)
        return True

    def clear(self) -> None:
        """Remove every item, calling ``on_delete`` in post-order."""
        if self._root is not None and self._on_delete is not None:
            stack, order = [self._root], []
            while stack:
                node = stack.pop()
                order.append(node.item)
                if node.left is not None:
                    stack.append(node.left)
                if node.right is not None:
                    stack.append(node.right)
            for item in reversed(order):
                self._on_delete(item)
        self._root = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._search(key)[0] is not None