"""Tests for SelectionSet."""

import pytest

from stateful_checkbox.core.selection_set import SelectionSet


class TestSelectionSetCreation:
    def test_empty_by_default(self):
        s = SelectionSet()
        assert len(s) == 0
        assert s.to_list() == []

    def test_from_ids_drops_repeats(self):
        s = SelectionSet.from_ids([3, 1, 3, 2, 1])
        assert s.to_list() == [3, 1, 2]

    def test_from_ids_none(self):
        assert SelectionSet.from_ids(None).to_list() == []

    def test_direct_duplicates_raise(self):
        with pytest.raises(ValueError, match="unique"):
            SelectionSet(ids=(1, 1))

    def test_membership(self):
        s = SelectionSet.from_ids(["a", "b"])
        assert "a" in s
        assert "z" not in s


class TestSelectionSetToggle:
    def test_toggle_adds_at_end(self):
        s = SelectionSet.from_ids([1, 2]).toggle(5)
        assert s.to_list() == [1, 2, 5]

    def test_toggle_removes(self):
        s = SelectionSet.from_ids([1, 5, 2]).toggle(5)
        assert s.to_list() == [1, 2]

    def test_toggle_twice_restores(self):
        original = SelectionSet.from_ids([4, 7])
        assert set(original.toggle(9).toggle(9)) == set(original)
        assert set(original.toggle(4).toggle(4)) == set(original)

    def test_immutable(self):
        s = SelectionSet.from_ids([1])
        s.toggle(2)
        assert s.to_list() == [1]


class TestSelectionSetBulk:
    def test_union_keeps_existing_order_and_appends(self):
        s = SelectionSet.from_ids([2, 9]).union([1, 2, 3])
        assert s.to_list() == [2, 9, 1, 3]

    def test_union_ignores_repeats_in_input(self):
        s = SelectionSet().union([1, 1, 2])
        assert s.to_list() == [1, 2]

    def test_union_noop_returns_same(self):
        s = SelectionSet.from_ids([1, 2])
        assert s.union([2, 1]) is s

    def test_difference_keeps_others(self):
        s = SelectionSet.from_ids([1, 2, 3, 99]).difference([1, 2, 3])
        assert s.to_list() == [99]

    def test_difference_absent_ids_noop(self):
        s = SelectionSet.from_ids([1])
        assert s.difference([5, 6]) is s

    def test_is_superset_of(self):
        s = SelectionSet.from_ids([1, 2, 3])
        assert s.is_superset_of([1, 3])
        assert not s.is_superset_of([1, 4])
        assert s.is_superset_of([])
