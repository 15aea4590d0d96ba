"""NetworkX export helpers for search tree shapes.

``build_networkx_graph`` converts a tree into an ``nx.DiGraph`` whose nodes
are the stored keys annotated with their cached ``height`` and
``balance_factor`` and whose edges point from parent to child with a
``side`` attribute of ``"left"`` or ``"right"``.  ``tree_layout`` returns
deterministic coordinates (in-order rank on the x axis, negated depth on the
y axis) that can be passed to ``networkx.draw`` as ``pos``.

NetworkX is imported lazily so the containers stay usable without it; calling
these helpers without NetworkX installed raises ``ModuleNotFoundError`` with
installation guidance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Tuple, TypeAlias, Union

from .avl_tree import balance_factor
from .contract import OrderedSet, root_of
from .node import Key, Subtree
from .validation import node_label

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxDiGraph: TypeAlias = nx.DiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxDiGraph: TypeAlias = Any

__all__ = ["TreeVisualization", "build_networkx_graph", "tree_layout", "visualize_tree"]


@dataclass(frozen=True)
class TreeVisualization:
    """Structured artefact for NetworkX drawing pipelines."""

    graph: NxDiGraph
    positions: Mapping[Key, Tuple[float, float]]
    labels: Mapping[Key, str]


def _import_networkx() -> Any:
    try:
        import networkx as nx  # type: ignore[import-not-found]
    except ImportError as exc:  # pragma: no cover - exercised when missing
        raise ModuleNotFoundError(
            "NetworkX is required for visualization support. Install it via 'pip install networkx'."
        ) from exc
    return nx


def build_networkx_graph(tree: Union[OrderedSet, Subtree]) -> NxDiGraph:
    """Convert *tree* to a NetworkX ``DiGraph`` of parent -> child edges."""

    nx = _import_networkx()
    graph = nx.DiGraph()

    def _add(node: Subtree) -> None:
        if node is None:
            return
        graph.add_node(
            node.key, height=node.height, balance_factor=balance_factor(node)
        )
        for side, child in (("left", node.left), ("right", node.right)):
            if child is not None:
                _add(child)
                graph.add_edge(node.key, child.key, side=side)

    _add(root_of(tree))
    return graph


def tree_layout(tree: Union[OrderedSet, Subtree]) -> Dict[Key, Tuple[float, float]]:
    """Return ``key -> (x, y)`` positions with in-order x and depth-based y."""

    positions: Dict[Key, Tuple[float, float]] = {}
    rank = 0

    def _walk(node: Subtree, depth: int) -> None:
        nonlocal rank
        if node is None:
            return
        _walk(node.left, depth + 1)
        positions[node.key] = (float(rank), float(-depth))
        rank += 1
        _walk(node.right, depth + 1)

    _walk(root_of(tree), 0)
    return positions


def visualize_tree(tree: Union[OrderedSet, Subtree]) -> TreeVisualization:
    """Prepare graph, positions and labels for drawing *tree*.

    Labels carry each key with its height and balance factor, e.g.
    ``"4 (h=3, bf=+0)"``.
    """

    graph = build_networkx_graph(tree)
    labels: Dict[Key, str] = {}

    def _label(node: Subtree) -> None:
        if node is None:
            return
        labels[node.key] = node_label(node)
        _label(node.left)
        _label(node.right)

    _label(root_of(tree))
    return TreeVisualization(graph=graph, positions=tree_layout(tree), labels=labels)
