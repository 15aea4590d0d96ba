"""Ordered-key containers backed by binary search trees.

Two containers share the :class:`OrderedSet` contract: the plain
:class:`BinarySearchTree` and the height-balanced :class:`AVLTree`.  The AVL
building blocks (rotations and the balance evaluator) and the structural
validators are exported for tests and diagnostics.
"""

from .avl_tree import (
    MAX_BALANCE_FACTOR,
    AVLTree,
    RotationError,
    avl_delete,
    avl_delete_max,
    avl_delete_min,
    avl_insert,
    balance,
    balance_factor,
    rotate_left,
    rotate_right,
)
from .binary_tree import BinarySearchTree, bst_delete, bst_insert
from .contract import EmptyTreeError, OrderedSet, root_of
from .node import Node, delete_max, delete_min, height_of, update_height
from .profiling import ContainerProfile, profile_containers
from .validation import (
    InvariantViolation,
    check_invariants,
    is_balanced,
    is_search_ordered,
    node_label,
    render_tree,
)
from .visualization import TreeVisualization, build_networkx_graph, tree_layout, visualize_tree

__version__ = "0.1.0"

__all__ = [
    "AVLTree",
    "BinarySearchTree",
    "ContainerProfile",
    "EmptyTreeError",
    "InvariantViolation",
    "MAX_BALANCE_FACTOR",
    "Node",
    "OrderedSet",
    "RotationError",
    "TreeVisualization",
    "avl_delete",
    "avl_delete_max",
    "avl_delete_min",
    "avl_insert",
    "balance",
    "balance_factor",
    "bst_delete",
    "bst_insert",
    "build_networkx_graph",
    "check_invariants",
    "delete_max",
    "delete_min",
    "height_of",
    "is_balanced",
    "is_search_ordered",
    "node_label",
    "profile_containers",
    "render_tree",
    "root_of",
    "rotate_left",
    "rotate_right",
    "tree_layout",
    "update_height",
    "visualize_tree",
]
