"""Tests for the remove_at_index function."""

import pytest

from arrayutils.functions.remove_at_index import remove_at_index


class TestRemoveAtIndex:
    """Tests for remove_at_index."""

    def test_removes_middle_element(self):
        """Tests the basic removal scenario."""
        assert remove_at_index(["a", "b", "c"], 1) == ["a", "c"]

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_result_is_concatenation_around_index(self, index):
        """Tests that the result equals the items before and after the index."""
        original = [10, 20, 30, 40]
        result = remove_at_index(original, index)

        assert len(result) == len(original) - 1
        assert result == original[:index] + original[index + 1 :]

    @pytest.mark.parametrize("index", [-1, 4, 42])
    def test_out_of_range_index_returns_equal_copy(self, index):
        """Tests that out-of-range indices leave the items as they are."""
        original = [10, 20, 30, 40]
        result = remove_at_index(original, index)

        assert result == original
        assert result is not original

    def test_does_not_mutate_input(self):
        """Tests that the input list keeps all of its items."""
        original = ["a", "b", "c"]
        remove_at_index(original, 0)
        assert original == ["a", "b", "c"]
