from __future__ import annotations

from typing import Any, Optional, TypeVar

from rsb.collections.readonly_collection import ReadonlyCollection

from arrayutils.functions.find_object_by_key import find_object_by_key
from arrayutils.functions.push import push
from arrayutils.functions.remove_at_index import remove_at_index
from arrayutils.functions.sort_by_key import sort_by_key
from arrayutils.functions.update_field_in_all_objects import (
    update_field_in_all_objects,
)
from arrayutils.functions.update_field_in_object import update_field_in_object
from arrayutils.functions.update_object_at_index import update_object_at_index

T = TypeVar("T")


class RecordSequence(ReadonlyCollection[T]):
    """
    Immutable sequence of records with chainable update operations.

    Every method returns a new RecordSequence and leaves the current one as it
    was, so intermediate states can be kept and compared freely.

    Example:
        >>> people = RecordSequence(elements=[{"id": 2}, {"id": 1}])
        >>> people.push({"id": 3}).sort_by_key("id").to_list()
        [{'id': 1}, {'id': 2}, {'id': 3}]
    """

    def push(self, element: T) -> RecordSequence[T]:
        return RecordSequence(elements=push(self.elements, element))

    def update_at(self, index: int, element: T) -> RecordSequence[T]:
        return RecordSequence(
            elements=update_object_at_index(self.elements, index, element)
        )

    def remove_at(self, index: int) -> RecordSequence[T]:
        return RecordSequence(elements=remove_at_index(self.elements, index))

    def update_field_at(self, index: int, field: str, value: Any) -> RecordSequence[T]:
        """Sets ``field`` on the record at ``index``.

        Returns:
            RecordSequence: The new sequence. Same records when ``index`` is
            out of range.
        """
        return RecordSequence(
            elements=update_field_in_object(self.elements, index, field, value)
        )

    def update_field_in_all(self, field: str, value: Any) -> RecordSequence[T]:
        return RecordSequence(
            elements=update_field_in_all_objects(self.elements, field, value)
        )

    def find_by_key(self, key: str, value: Any) -> Optional[T]:
        return find_object_by_key(self.elements, key, value)

    def sort_by_key(self, key: str, ascending: bool = True) -> RecordSequence[T]:
        return RecordSequence(
            elements=sort_by_key(self.elements, key, ascending=ascending)
        )

    def to_list(self) -> list[T]:
        return list(self.elements)
