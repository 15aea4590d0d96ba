"""Height and allocation profiling for the ordered-set containers.

``profile_containers`` feeds one key sequence into each container class under
``tracemalloc`` and records the resulting shape together with timing and
peak-memory figures.  Comparing the plain tree with the AVL tree on sorted
input makes the cost of a degenerate chain directly visible::

    >>> plain, avl = profile_containers(range(7))
    >>> plain.height, avl.height
    (7, 3)

Both runs must store identical key sequences; a divergence raises
``AssertionError`` because it means one container lost or duplicated keys.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
import time
import tracemalloc
from typing import Dict, Iterable, List, Sequence, Tuple, Type

from .avl_tree import AVLTree
from .binary_tree import BinarySearchTree
from .contract import OrderedSet
from .node import Key, height_of

logger = logging.getLogger(__name__)

DEFAULT_CONTAINERS: Tuple[Type[OrderedSet], ...] = (BinarySearchTree, AVLTree)

__all__ = ["ContainerProfile", "DEFAULT_CONTAINERS", "profile_containers"]


@dataclass(frozen=True)
class ContainerProfile:
    """Measurements captured after building one container."""

    name: str
    size: int
    height: int
    time_seconds: float
    peak_bytes: int

    def to_dict(self) -> Dict[str, object]:
        """Expose a JSON-serialisable mapping of the captured metrics."""

        return asdict(self)


def _run_with_peak(
    container_cls: Type[OrderedSet], keys: Sequence[Key]
) -> Tuple[OrderedSet, float, int]:
    tracemalloc.start()
    try:
        start = time.perf_counter()
        container = container_cls.from_keys(keys)
        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        logger.debug(
            "%s traced memory: current=%d peak=%d", container_cls.__name__, current, peak
        )
    finally:
        if tracemalloc.is_tracing():
            tracemalloc.stop()
    return container, elapsed, peak


def _describe_divergence(
    container_cls: Type[OrderedSet], contents: List[Key], expected: List[Key]
) -> str:
    name = container_cls.__name__
    for index, (actual, wanted) in enumerate(zip(contents, expected)):
        if actual != wanted:
            return (
                f"{name} diverged at position {index}: "
                f"stored {actual!r} where the first container stored {wanted!r}"
            )
    return (
        f"{name} stored {len(contents)} keys "
        f"but the first container stored {len(expected)}"
    )


def profile_containers(
    keys: Iterable[Key],
    *,
    containers: Sequence[Type[OrderedSet]] = DEFAULT_CONTAINERS,
) -> Tuple[ContainerProfile, ...]:
    """Build every class in *containers* from *keys* and profile the result.

    The iterable is consumed once up front so every container sees the same
    sequence.  Profiles are returned in the order of *containers*.
    """

    if not containers:
        raise ValueError("containers must name at least one OrderedSet class")
    key_list = list(keys)

    profiles: List[ContainerProfile] = []
    expected: List[Key] | None = None
    for container_cls in containers:
        container, elapsed, peak = _run_with_peak(container_cls, key_list)
        contents = container.in_order()
        if expected is None:
            expected = contents
        elif contents != expected:
            raise AssertionError(_describe_divergence(container_cls, contents, expected))
        profile = ContainerProfile(
            name=container_cls.__name__,
            size=len(container),
            height=height_of(container.root),
            time_seconds=elapsed,
            peak_bytes=peak,
        )
        logger.debug("Profile collected: %s", profile)
        profiles.append(profile)
    return tuple(profiles)
