"""Plain (unbalanced) binary search tree.

The container follows the same recursive "consume the subtree, return its
replacement" pattern as the AVL tree but never rotates: the shape depends only
on insertion order, so sorted input degrades the tree into a chain.  Cached
heights are still refreshed on every rebuilt path which lets the validator and
the profiling helpers report the real height of the degenerate shape.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .contract import EmptyTreeError, OrderedSet
from .node import Key, Node, Subtree, delete_max, delete_min, height_of, update_height

logger = logging.getLogger(__name__)

__all__ = ["BinarySearchTree", "bst_delete", "bst_insert"]


def bst_insert(node: Subtree, key: Key) -> Tuple[Node, bool]:
    """Insert *key* below *node* returning ``(new_subtree, inserted)``."""

    if node is None:
        return Node(key), True
    if key < node.key:
        node.left, inserted = bst_insert(node.left, key)
    elif key > node.key:
        node.right, inserted = bst_insert(node.right, key)
    else:
        return node, False
    return update_height(node), inserted


def bst_delete(node: Subtree, key: Key) -> Tuple[Subtree, bool]:
    """Remove *key* from below *node* returning ``(new_subtree, removed)``."""

    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = bst_delete(node.left, key)
    elif key > node.key:
        node.right, removed = bst_delete(node.right, key)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        # Two children: the right subtree's minimum becomes this node's key.
        node.key, node.right = delete_min(node.right)
        removed = True
    return update_height(node), removed


class BinarySearchTree(OrderedSet):
    """Ordered set backed by an unbalanced binary search tree."""

    __slots__ = ()

    def insert(self, key: Key) -> None:
        self._root, inserted = bst_insert(self._root, key)
        if inserted:
            self._size += 1
        else:
            logger.debug("insert(%r) ignored: key already present", key)

    def delete(self, key: Key) -> None:
        self._root, removed = bst_delete(self._root, key)
        if removed:
            self._size -= 1
        else:
            logger.debug("delete(%r) ignored: key not present", key)

    def pop_min(self) -> Key:
        if self._root is None:
            raise EmptyTreeError("pop_min() called on an empty tree")
        key, self._root = delete_min(self._root)
        self._size -= 1
        return key

    def pop_max(self) -> Key:
        if self._root is None:
            raise EmptyTreeError("pop_max() called on an empty tree")
        key, self._root = delete_max(self._root)
        self._size -= 1
        return key

    def height(self) -> int:
        """Height of the whole tree; ``0`` when empty."""

        return height_of(self._root)
