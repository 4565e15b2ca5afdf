"""Tests for the push function."""

from arrayutils.functions.push import push


class TestPush:
    """Tests for push."""

    def test_push_appends_element(self):
        """Tests the basic append scenario."""
        assert push([1, 2, 3], 4) == [1, 2, 3, 4]

    def test_push_keeps_prefix_and_length(self):
        """Tests that the original items form the prefix of the result."""
        original = ["a", "b"]
        result = push(original, "c")

        assert len(result) == len(original) + 1
        assert result[:-1] == original
        assert result[-1] == "c"

    def test_push_does_not_mutate_input(self):
        """Tests that the input list is left untouched and a new list is returned."""
        original = [1, 2, 3]
        result = push(original, 4)

        assert original == [1, 2, 3]
        assert result is not original

    def test_push_onto_empty_and_tuple(self):
        """Tests pushing onto an empty list and onto a tuple."""
        assert push([], None) == [None]
        assert push((1, 2), 3) == [1, 2, 3]
