"""Node representation shared by the plain and AVL search trees.

A tree is either ``None`` (empty) or a :class:`Node` that exclusively owns its
two children.  Every mutating helper consumes a subtree and returns its
replacement so that callers simply reassign the result::

    node.left = update(node.left)

Heights are cached on each node and an absent subtree has height ``0``.  The
traversal helpers return list snapshots instead of generators; the caller gets
an independent sequence that is unaffected by later mutations of the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

Key = Any


@dataclass(slots=True, repr=False)
class Node:
    """One occupied position of a search tree."""

    key: Key
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    height: int = 1

    def __repr__(self) -> str:
        return f"Node({self.key!r}, height={self.height})"


Subtree = Optional[Node]


def height_of(node: Subtree) -> int:
    """Return the cached height of *node* or ``0`` for an empty subtree."""

    if node is None:
        return 0
    return node.height


def update_height(node: Node) -> Node:
    """Recompute ``node.height`` from its children and return *node*."""

    node.height = 1 + max(height_of(node.left), height_of(node.right))
    return node


def find(node: Subtree, key: Key) -> bool:
    """Return ``True`` when *key* compares equal to a key stored under *node*."""

    while node is not None:
        if key < node.key:
            node = node.left
        elif key > node.key:
            node = node.right
        else:
            return True
    return False


def delete_min(node: Node) -> Tuple[Key, Subtree]:
    """Remove the smallest key below *node*.

    Returns the extracted key together with the reduced subtree.  Heights on
    the rebuilt path are refreshed but no rebalancing takes place.
    """

    if node.left is None:
        return node.key, node.right
    key, node.left = delete_min(node.left)
    return key, update_height(node)


def delete_max(node: Node) -> Tuple[Key, Subtree]:
    """Mirror image of :func:`delete_min`."""

    if node.right is None:
        return node.key, node.left
    key, node.right = delete_max(node.right)
    return key, update_height(node)


def leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def in_order_keys(node: Subtree) -> List[Key]:
    """Return the keys below *node* in ascending order (left, self, right)."""

    keys: List[Key] = []

    def _walk(current: Subtree) -> None:
        if current is None:
            return
        _walk(current.left)
        keys.append(current.key)
        _walk(current.right)

    _walk(node)
    return keys


def pre_order_keys(node: Subtree) -> List[Key]:
    """Return the keys below *node* in pre-order (self, left, right)."""

    keys: List[Key] = []

    def _walk(current: Subtree) -> None:
        if current is None:
            return
        keys.append(current.key)
        _walk(current.left)
        _walk(current.right)

    _walk(node)
    return keys


__all__ = [
    "Key",
    "Node",
    "Subtree",
    "delete_max",
    "delete_min",
    "find",
    "height_of",
    "in_order_keys",
    "leftmost",
    "pre_order_keys",
    "rightmost",
    "update_height",
]
