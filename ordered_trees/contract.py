"""Ordered-set contract implemented by every search tree container.

:class:`OrderedSet` fixes the public surface shared by
:class:`~ordered_trees.binary_tree.BinarySearchTree` and
:class:`~ordered_trees.avl_tree.AVLTree` so a single conformance suite can
exercise both.  Subclasses provide the structural mutations (``insert``,
``delete``, ``pop_min`` and ``pop_max``); read-only queries are identical for
every search-ordered tree and live here.

Containers store keys only.  Inserting a key that compares equal to a stored
key is a no-op and the stored key is kept, so the first inserted key wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Type, TypeVar, Union

from .node import Key, Node, find, in_order_keys, leftmost, pre_order_keys, rightmost

__all__ = ["EmptyTreeError", "OrderedSet", "root_of"]

SetT = TypeVar("SetT", bound="OrderedSet")


class EmptyTreeError(KeyError):
    """Raised when an extreme key is requested from an empty container."""


class OrderedSet(ABC):
    """Abstract ordered container of unique, totally ordered keys."""

    __slots__ = ("_root", "_size")

    def __init__(self) -> None:
        self._root: Optional[Node] = None
        self._size = 0

    @classmethod
    def from_key(cls: Type[SetT], key: Key) -> SetT:
        """Return a container holding the single *key*."""

        container = cls()
        container.insert(key)
        return container

    @classmethod
    def from_keys(cls: Type[SetT], keys: Iterable[Key]) -> SetT:
        """Return a container built by inserting *keys* in iteration order."""

        container = cls()
        for key in keys:
            container.insert(key)
        return container

    # ------------------------------------------------------------------
    # Structural mutations
    # ------------------------------------------------------------------
    @abstractmethod
    def insert(self, key: Key) -> None:
        """Insert *key* unless an equal key is already stored."""

    @abstractmethod
    def delete(self, key: Key) -> None:
        """Remove the key comparing equal to *key*; absent keys are ignored."""

    @abstractmethod
    def pop_min(self) -> Key:
        """Remove and return the smallest key.

        Raises :class:`EmptyTreeError` when the container is empty.
        """

    @abstractmethod
    def pop_max(self) -> Key:
        """Remove and return the largest key.

        Raises :class:`EmptyTreeError` when the container is empty.
        """

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def root(self) -> Optional[Node]:
        """Root node, exposed for structural inspection only."""

        return self._root

    def contains(self, key: Key) -> bool:
        return find(self._root, key)

    def in_order(self) -> List[Key]:
        """Snapshot of the stored keys in ascending order."""

        return in_order_keys(self._root)

    def pre_order(self) -> List[Key]:
        """Snapshot of the stored keys in pre-order, fingerprinting the shape."""

        return pre_order_keys(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def min(self) -> Key:
        if self._root is None:
            raise EmptyTreeError("min() called on an empty tree")
        return leftmost(self._root).key

    def max(self) -> Key:
        if self._root is None:
            raise EmptyTreeError("max() called on an empty tree")
        return rightmost(self._root).key

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()!r})"


def root_of(tree: Union[OrderedSet, Optional[Node]]) -> Optional[Node]:
    """Return the root node of a container, or *tree* itself when it is a subtree."""

    if isinstance(tree, OrderedSet):
        return tree.root
    return tree
