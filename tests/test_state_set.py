"""Tests for the StateSet value type."""

import pytest

from fsacore import StateSet


class TestEquality:
    """Equality is set equality, independent of order and repetition."""

    CASES = [
        ((1, 2, 3), (3, 2, 1), True),
        ((1, 1, 2), (2, 1), True),
        ((), (), True),
        ((1, 2), (1, 2, 3), False),
        ((1, 2, 4), (1, 2, 3), False),
    ]

    @pytest.mark.parametrize("left,right,expected", CASES)
    def test_equals(self, left, right, expected):
        a = StateSet.from_iterable(left)
        b = StateSet.from_iterable(right)
        assert a.equals(b) is expected
        assert b.equals(a) is expected
        assert (a == b) is expected

    def test_equal_sets_hash_alike(self):
        catalog = {StateSet.of(3, 1, 2): "first"}
        assert catalog[StateSet.of(1, 2, 3, 3)] == "first"


class TestOperations:
    def test_contains(self):
        s = StateSet.of(2, 3, 6)
        assert s.contains(3)
        assert 6 in s
        assert not s.contains(4)

    def test_insert_returns_new_set(self):
        original = StateSet.of(1)
        grown = original.insert(2)
        assert grown == StateSet.of(1, 2)
        assert original == StateSet.of(1)

    def test_insert_existing_is_noop(self):
        original = StateSet.of(1, 2)
        assert original.insert(2) is original
        assert len(original.insert(2)) == 2

    def test_union(self):
        assert StateSet.of(1, 2).union(StateSet.of(2, 3)) == StateSet.of(1, 2, 3)
        assert StateSet.of(1) | StateSet() == StateSet.of(1)
        assert StateSet() | StateSet.of(4) == StateSet.of(4)

    def test_intersects(self):
        s = StateSet.of(1, 2)
        assert s.intersects({2, 9})
        assert s.intersects(StateSet.of(1))
        assert not s.intersects(frozenset({5}))
        assert not StateSet().intersects({1})

    def test_empty(self):
        assert StateSet().is_empty()
        assert not StateSet()
        assert not StateSet.of(0).is_empty()


class TestRendering:
    def test_iterates_in_sorted_order(self):
        assert list(StateSet.of(7, 2, 4, 1)) == [1, 2, 4, 7]

    def test_str(self):
        assert str(StateSet.of(6, 2, 3)) == "{2,3,6}"
        assert str(StateSet()) == "{}"

    def test_repr(self):
        assert repr(StateSet.of(1, 0)) == "StateSet({0,1})"


class TestConstructorNormalizes:
    """Any iterable passed to the constructor becomes a private frozenset."""

    def test_duplicates_collapse(self):
        s = StateSet([1, 1, 2])
        assert len(s) == 2
        assert s.equals(StateSet.of(1, 2))
        assert s == StateSet.of(2, 1)

    def test_caller_set_is_not_shared(self):
        backing = {1, 2}
        s = StateSet(backing)
        backing.add(3)
        assert s == StateSet.of(1, 2)
        assert 3 not in s

    def test_hashable_from_mutable_input(self):
        catalog = {StateSet({1, 2}): 0}
        assert catalog[StateSet.of(1, 2)] == 0
        assert isinstance(StateSet([4]).members, frozenset)
