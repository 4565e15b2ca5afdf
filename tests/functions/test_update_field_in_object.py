"""Tests for the update_field_in_object function."""

from dataclasses import dataclass

from arrayutils.functions.update_field_in_object import update_field_in_object


@dataclass(frozen=True)
class Item:
    id: int
    name: str


class TestUpdateFieldInObject:
    """Tests for update_field_in_object."""

    def test_updates_field_on_dict_record(self):
        """Tests the basic dict scenario."""
        original = [{"id": 1, "name": "x"}, {"id": 2, "name": "y"}]
        result = update_field_in_object(original, 1, "name", "z")

        assert result == [{"id": 1, "name": "x"}, {"id": 2, "name": "z"}]

    def test_original_record_is_not_mutated(self):
        """Tests that the updated record is a new object."""
        first = {"id": 1, "name": "x"}
        second = {"id": 2, "name": "y"}
        result = update_field_in_object([first, second], 1, "name", "z")

        assert second == {"id": 2, "name": "y"}
        assert result[1] is not second
        assert result[0] is first

    def test_out_of_range_index_returns_equal_copy(self):
        """Tests that no record changes when the index does not exist."""
        original = [{"id": 1}, {"id": 2}]
        result = update_field_in_object(original, 7, "id", 99)

        assert result == original
        assert all(a is b for a, b in zip(result, original))

    def test_updates_frozen_dataclass(self):
        """Tests that frozen dataclasses are copied rather than modified."""
        original = [Item(id=1, name="x"), Item(id=2, name="y")]
        result = update_field_in_object(original, 0, "name", "w")

        assert result == [Item(id=1, name="w"), Item(id=2, name="y")]
        assert original[0].name == "x"
