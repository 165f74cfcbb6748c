"""Binary search tree ordered index.

Names are kept in an unbalanced binary search tree. Insertion descends
left or right by lexicographic comparison and ignores exact duplicates.
Removing a node with two children copies the in-order successor (the
minimum of the right subtree) into it and then deletes the successor.

Traversals are iterative: a tree built from already-sorted names
degenerates into a list, and recursion would hit the interpreter limit
long before such a tree becomes slow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class _Node:
    key: str
    left: Optional[_Node] = None
    right: Optional[_Node] = None


@dataclass
class BinarySearchTreeIndex:
    """OrderedIndexPort backed by a binary search tree."""

    _root: Optional[_Node] = field(default=None, repr=False)
    _size: int = field(default=0, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def insert(self, name: str) -> None:
        if self._root is None:
            self._root = _Node(name)
            self._size = 1
            return

        node = self._root
        while True:
            if name < node.key:
                if node.left is None:
                    node.left = _Node(name)
                    break
                node = node.left
            elif name > node.key:
                if node.right is None:
                    node.right = _Node(name)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def remove(self, name: str) -> bool:
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != name:
            parent = node
            node = node.left if name < node.key else node.right

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # Promote the in-order successor, then unlink the successor node
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.key = successor.key
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

        self._size -= 1
        self._logger.debug("Index entry removed", extra={"station": name})
        return True

    def in_order(self) -> List[str]:
        names: List[str] = []
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            names.append(node.key)
            node = node.right
        return names

    def height(self) -> int:
        """Return the number of levels in the tree (0 when empty)."""
        if self._root is None:
            return 0
        height = 0
        level = [self._root]
        while level:
            height += 1
            level = [
                child
                for n in level
                for child in (n.left, n.right)
                if child is not None
            ]
        return height

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        node = self._root
        while node is not None:
            if name == node.key:
                return True
            node = node.left if name < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size
