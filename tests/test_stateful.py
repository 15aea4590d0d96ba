"""Model-based test driving both containers against a Python ``set``."""

from __future__ import annotations

from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from ordered_trees import AVLTree, BinarySearchTree, check_invariants

keys = st.integers(min_value=-50, max_value=50)


class OrderedSetMachine(RuleBasedStateMachine):
    def __init__(self) -> None:
        super().__init__()
        self.model: set[int] = set()
        self.plain = BinarySearchTree()
        self.avl = AVLTree()

    @rule(key=keys)
    def insert(self, key: int) -> None:
        self.model.add(key)
        self.plain.insert(key)
        self.avl.insert(key)

    @rule(key=keys)
    def delete(self, key: int) -> None:
        self.model.discard(key)
        self.plain.delete(key)
        self.avl.delete(key)

    @rule(key=keys)
    def contains(self, key: int) -> None:
        expected = key in self.model
        assert self.plain.contains(key) is expected
        assert self.avl.contains(key) is expected

    @precondition(lambda self: self.model)
    @rule()
    def pop_min(self) -> None:
        smallest = min(self.model)
        self.model.remove(smallest)
        assert self.plain.pop_min() == smallest
        assert self.avl.pop_min() == smallest

    @precondition(lambda self: self.model)
    @rule()
    def pop_max(self) -> None:
        largest = max(self.model)
        self.model.remove(largest)
        assert self.plain.pop_max() == largest
        assert self.avl.pop_max() == largest

    @invariant()
    def contents_match_model(self) -> None:
        expected = sorted(self.model)
        assert self.plain.in_order() == expected
        assert self.avl.in_order() == expected
        assert len(self.plain) == len(self.avl) == len(expected)

    @invariant()
    def structure_is_valid(self) -> None:
        check_invariants(self.plain)
        check_invariants(self.avl, balanced=True)


TestOrderedSetMachine = OrderedSetMachine.TestCase
