from __future__ import annotations

import pytest

from ordered_trees import AVLTree, BinarySearchTree, ContainerProfile, profile_containers


def test_profile_containers_contrasts_heights() -> None:
    plain, avl = profile_containers(range(1, 8))

    assert isinstance(plain, ContainerProfile)
    assert (plain.name, plain.size, plain.height) == ("BinarySearchTree", 7, 7)
    assert (avl.name, avl.size, avl.height) == ("AVLTree", 7, 3)
    assert plain.peak_bytes >= 0
    assert avl.time_seconds >= 0


def test_profile_containers_collapses_duplicates() -> None:
    (profile,) = profile_containers([3, 1, 3, 2, 1], containers=(AVLTree,))
    assert profile.size == 3
    assert profile.height == 2


def test_profile_containers_consumes_generators_once() -> None:
    plain, avl = profile_containers(key for key in (5, 3, 8))
    assert plain.size == avl.size == 3


def test_profile_containers_requires_containers() -> None:
    with pytest.raises(ValueError):
        profile_containers([1], containers=())


def test_profile_containers_detects_divergent_contents() -> None:
    class LossyTree(AVLTree):
        def insert(self, key: int) -> None:
            if key != 2:
                super().insert(key)

    with pytest.raises(AssertionError, match="LossyTree"):
        profile_containers([1, 2, 3], containers=(BinarySearchTree, LossyTree))


def test_profile_to_dict() -> None:
    profile = ContainerProfile(
        name="AVLTree", size=1, height=1, time_seconds=0.5, peak_bytes=64
    )
    assert profile.to_dict() == {
        "name": "AVLTree",
        "size": 1,
        "height": 1,
        "time_seconds": 0.5,
        "peak_bytes": 64,
    }


def test_profile_containers_reports_first_differing_key() -> None:
    class ShiftedTree(AVLTree):
        def insert(self, key: int) -> None:
            super().insert(key + 100)

    with pytest.raises(
        AssertionError,
        match=r"ShiftedTree diverged at position 0: stored 101 where the first container stored 1",
    ):
        profile_containers([1, 2, 3], containers=(BinarySearchTree, ShiftedTree))


def test_profile_containers_reports_missing_tail() -> None:
    class TruncatedTree(AVLTree):
        def insert(self, key: int) -> None:
            if key < 3:
                super().insert(key)

    with pytest.raises(
        AssertionError,
        match="TruncatedTree stored 2 keys but the first container stored 3",
    ):
        profile_containers([1, 2, 3], containers=(BinarySearchTree, TruncatedTree))
