"""Structural validation and rendering helpers for search trees.

All checks share one recursive walk that measures the real height of every
subtree and raises ``InvariantViolation`` on the first broken rule:

* ``check_invariants`` – strict search order, the cached heights and
  (optionally) the AVL balance bound.
* ``is_balanced`` – the balance bound alone, measured from the shape so stale
  cached heights cannot hide an imbalance.
* ``is_search_ordered`` – strictly increasing in-order keys.
* ``render_tree`` – an outline of the tree, one node per line, labelled with
  the cached height and balance factor of each node.

Every helper accepts either a container or a bare root node.
"""

from __future__ import annotations

from typing import List, Union

from .avl_tree import MAX_BALANCE_FACTOR, balance_factor
from .contract import OrderedSet, root_of
from .node import Key, Node, Subtree, in_order_keys

PLACEHOLDER = "·"

TreeLike = Union[OrderedSet, Subtree]

__all__ = [
    "InvariantViolation",
    "PLACEHOLDER",
    "check_invariants",
    "is_balanced",
    "is_search_ordered",
    "node_label",
    "render_tree",
]

_UNBOUNDED = object()


class InvariantViolation(AssertionError):
    """Raised when a tree breaks one of the search tree invariants."""

    def __init__(self, key: Key, message: str) -> None:
        super().__init__(f"node {key!r}: {message}")
        self.key = key


def _measure(
    node: Subtree,
    low: object,
    high: object,
    *,
    ordered: bool,
    cached: bool,
    balanced: bool,
) -> int:
    """Return the real height of *node*, enforcing the selected invariants."""

    if node is None:
        return 0
    if ordered:
        if low is not _UNBOUNDED and not low < node.key:
            raise InvariantViolation(node.key, f"not greater than ancestor {low!r}")
        if high is not _UNBOUNDED and not node.key < high:
            raise InvariantViolation(node.key, f"not less than ancestor {high!r}")

    flags = {"ordered": ordered, "cached": cached, "balanced": balanced}
    left_height = _measure(node.left, low, node.key, **flags)
    right_height = _measure(node.right, node.key, high, **flags)
    actual = 1 + max(left_height, right_height)
    if cached and node.height != actual:
        raise InvariantViolation(
            node.key, f"cached height {node.height} but actual height {actual}"
        )
    if balanced and abs(left_height - right_height) > MAX_BALANCE_FACTOR:
        raise InvariantViolation(
            node.key,
            f"balance factor {left_height - right_height} outside "
            f"±{MAX_BALANCE_FACTOR}",
        )
    return actual


def check_invariants(tree: TreeLike, *, balanced: bool = False) -> int:
    """Validate *tree* and return its actual height.

    Every key must lie strictly between the bounds inherited from its
    ancestors and every cached height must equal ``1 + max(child heights)``.
    With ``balanced=True`` each node's balance factor must also stay within
    ``±MAX_BALANCE_FACTOR``.
    """

    return _measure(
        root_of(tree), _UNBOUNDED, _UNBOUNDED, ordered=True, cached=True, balanced=balanced
    )


def is_balanced(tree: TreeLike) -> bool:
    """Return ``True`` when *tree* is height-balanced, ignoring cached heights."""

    try:
        _measure(
            root_of(tree), _UNBOUNDED, _UNBOUNDED, ordered=False, cached=False, balanced=True
        )
    except InvariantViolation:
        return False
    return True


def is_search_ordered(tree: TreeLike) -> bool:
    """Return ``True`` when the in-order keys of *tree* strictly increase."""

    keys = in_order_keys(root_of(tree))
    return all(left < right for left, right in zip(keys, keys[1:]))


def node_label(node: Node) -> str:
    """Label *node* with its key, cached height and balance factor."""

    return f"{node.key} (h={node.height}, bf={balance_factor(node):+d})"


def render_tree(tree: TreeLike) -> str:
    """Render *tree* as an outline, left child listed before right child.

    ::

        2 (h=2, bf=+0)
        ├── L: 1 (h=1, bf=+0)
        └── R: 3 (h=1, bf=+0)

    A node with a single child shows the missing side as ``·``; leaves list
    no children.
    """

    root = root_of(tree)
    if root is None:
        return "<empty>"

    lines: List[str] = [node_label(root)]

    def _children(node: Node, prefix: str) -> None:
        if node.left is None and node.right is None:
            return
        for side, child, last in (("L", node.left, False), ("R", node.right, True)):
            branch = "└── " if last else "├── "
            if child is None:
                lines.append(f"{prefix}{branch}{side}: {PLACEHOLDER}")
                continue
            lines.append(f"{prefix}{branch}{side}: {node_label(child)}")
            _children(child, prefix + ("    " if last else "│   "))

    _children(root, "")
    return "\n".join(lines)
