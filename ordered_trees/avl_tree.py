"""Height-balanced (AVL) binary search tree.

The module exposes the building blocks of the AVL algorithm alongside the
:class:`AVLTree` container:

* ``rotate_left`` / ``rotate_right`` – constant-time single rotations that
  re-parent two adjacent nodes while keeping the search order intact.
* ``balance_factor`` – ``height(left) - height(right)`` of a subtree root.
* ``balance`` – applies the single or double rotation required to bring a
  subtree whose factor drifted to ``±2`` back within ``±1``.
* ``avl_insert`` / ``avl_delete`` – recursive mutations that rebuild the path
  from the changed position back to the root, refreshing the cached height and
  rebalancing at every level on the way up.

Deletion rebalances on its return path exactly like insertion does, including
the successor extraction performed by ``avl_delete_min`` in the two-children
case.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .contract import EmptyTreeError, OrderedSet
from .node import Key, Node, Subtree, height_of, update_height

logger = logging.getLogger(__name__)

MAX_BALANCE_FACTOR = 1

__all__ = [
    "AVLTree",
    "MAX_BALANCE_FACTOR",
    "RotationError",
    "avl_delete",
    "avl_delete_max",
    "avl_delete_min",
    "avl_insert",
    "balance",
    "balance_factor",
    "rotate_left",
    "rotate_right",
]


class RotationError(ValueError):
    """Raised when a rotation is applied to a subtree that cannot support it."""


# ----------------------------------------------------------------------
# Rotation primitives
# ----------------------------------------------------------------------
def rotate_left(node: Subtree) -> Node:
    """Promote the right child of *node* to subtree root.

    ::

          a                b
         / \\              / \\
        x   b     ->     a   z
           / \\          / \\
          y   z        x   y
    """

    if node is None or node.right is None:
        raise RotationError("rotate_left requires a node with a right child")
    new_root = node.right
    node.right = new_root.left
    new_root.left = node
    update_height(node)
    return update_height(new_root)


def rotate_right(node: Subtree) -> Node:
    """Promote the left child of *node* to subtree root (mirror of ``rotate_left``)."""

    if node is None or node.left is None:
        raise RotationError("rotate_right requires a node with a left child")
    new_root = node.left
    node.left = new_root.right
    new_root.right = node
    update_height(node)
    return update_height(new_root)


# ----------------------------------------------------------------------
# Balance evaluation
# ----------------------------------------------------------------------
def balance_factor(node: Subtree) -> int:
    """Return ``height(left) - height(right)``; ``0`` for an empty subtree."""

    if node is None:
        return 0
    return height_of(node.left) - height_of(node.right)


def balance(node: Subtree) -> Subtree:
    """Restore the AVL bound at *node* assuming its children are balanced.

    The cached height of *node* must be current.  A left-heavy subtree whose
    left child leans right (and the mirrored right-heavy case) needs a double
    rotation; otherwise a single rotation suffices.
    """

    factor = balance_factor(node)
    if factor > MAX_BALANCE_FACTOR:
        assert node is not None
        if balance_factor(node.left) < 0:
            logger.debug("left-right rotation at %r", node.key)
            node.left = rotate_left(node.left)
        else:
            logger.debug("right rotation at %r", node.key)
        return rotate_right(node)
    if factor < -MAX_BALANCE_FACTOR:
        assert node is not None
        if balance_factor(node.right) > 0:
            logger.debug("right-left rotation at %r", node.key)
            node.right = rotate_right(node.right)
        else:
            logger.debug("left rotation at %r", node.key)
        return rotate_left(node)
    return node


def _rebuild(node: Node) -> Node:
    rebalanced = balance(update_height(node))
    assert rebalanced is not None
    return rebalanced


# ----------------------------------------------------------------------
# Mutations
# ----------------------------------------------------------------------
def avl_insert(node: Subtree, key: Key) -> Tuple[Node, bool]:
    """Insert *key* below *node* returning ``(new_subtree, inserted)``.

    A key comparing equal to a stored key leaves the subtree untouched.
    """

    if node is None:
        return Node(key), True
    if key < node.key:
        node.left, inserted = avl_insert(node.left, key)
    elif key > node.key:
        node.right, inserted = avl_insert(node.right, key)
    else:
        return node, False
    if not inserted:
        return node, False
    return _rebuild(node), True


def avl_delete_min(node: Node) -> Tuple[Key, Subtree]:
    """Remove the smallest key below *node*, rebalancing the rebuilt path."""

    if node.left is None:
        return node.key, node.right
    key, node.left = avl_delete_min(node.left)
    return key, _rebuild(node)


def avl_delete_max(node: Node) -> Tuple[Key, Subtree]:
    """Remove the largest key below *node*, rebalancing the rebuilt path."""

    if node.right is None:
        return node.key, node.left
    key, node.right = avl_delete_max(node.right)
    return key, _rebuild(node)


def avl_delete(node: Subtree, key: Key) -> Tuple[Subtree, bool]:
    """Remove *key* from below *node* returning ``(new_subtree, removed)``."""

    if node is None:
        return None, False
    if key < node.key:
        node.left, removed = avl_delete(node.left, key)
    elif key > node.key:
        node.right, removed = avl_delete(node.right, key)
    else:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.key, node.right = avl_delete_min(node.right)
        removed = True
    if not removed:
        return node, False
    return _rebuild(node), True


class AVLTree(OrderedSet):
    """Ordered set backed by a height-balanced binary search tree.

    Every node satisfies ``|height(left) - height(right)| <= 1`` after each
    public operation, so lookups and mutations run in ``O(log n)``.
    """

    __slots__ = ()

    def insert(self, key: Key) -> None:
        self._root, inserted = avl_insert(self._root, key)
        if inserted:
            self._size += 1
        else:
            logger.debug("insert(%r) ignored: key already present", key)

    def delete(self, key: Key) -> None:
        self._root, removed = avl_delete(self._root, key)
        if removed:
            self._size -= 1
        else:
            logger.debug("delete(%r) ignored: key not present", key)

    def pop_min(self) -> Key:
        if self._root is None:
            raise EmptyTreeError("pop_min() called on an empty tree")
        key, self._root = avl_delete_min(self._root)
        self._size -= 1
        return key

    def pop_max(self) -> Key:
        if self._root is None:
            raise EmptyTreeError("pop_max() called on an empty tree")
        key, self._root = avl_delete_max(self._root)
        self._size -= 1
        return key

    def height(self) -> int:
        """Height of the whole tree; ``0`` when empty."""

        return height_of(self._root)

    def balance_factor(self) -> int:
        """Balance factor of the root node."""

        return balance_factor(self._root)
