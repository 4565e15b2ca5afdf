"""Tests for the update_object_at_index function."""

import logging

import pytest

from arrayutils.functions.update_object_at_index import update_object_at_index


class TestUpdateObjectAtIndex:
    """Tests for update_object_at_index."""

    def test_replaces_only_the_given_index(self):
        """Tests that only the targeted position changes."""
        original = ["a", "b", "c"]
        result = update_object_at_index(original, 1, "z")

        assert result == ["a", "z", "c"]
        assert original == ["a", "b", "c"]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_index_returns_equal_copy(self, index):
        """Tests that out-of-range indices neither insert nor raise."""
        original = ["a", "b", "c"]
        result = update_object_at_index(original, index, "z")

        assert result == original
        assert result is not original

    def test_out_of_range_index_is_logged(self, caplog):
        """Tests that the no-op path emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="arrayutils"):
            update_object_at_index([1], 5, 2)

        assert "out of range" in caplog.text

    def test_empty_sequence(self):
        """Tests that an empty input gives an empty output."""
        assert update_object_at_index([], 0, "x") == []
