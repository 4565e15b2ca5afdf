import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from arrayutils.records.with_field import with_field

logger = logging.getLogger(__name__)

T = TypeVar("T")


def update_field_in_object(
    sequence: Sequence[T], index: int, field: str, value: Any
) -> list[T]:
    """Sets one field on the record at ``index``.

    The record at ``index`` is replaced by a copy carrying the new value. Its
    other fields, and every other record, are kept as they are.

    Args:
        sequence: The records to copy. Left untouched.
        index: Zero-based position of the record to update.
        field: Name of the field to set.
        value: New value for the field.

    Example:
        before: [{id: 1, name: x}, {id: 2, name: y}], index 1, name = z
        after: [{id: 1, name: x}, {id: 2, name: z}]

    Returns:
        list[T]: A new list. Equal to ``sequence`` when ``index`` is out of range.
    """
    if not 0 <= index < len(sequence):
        logger.debug(
            "Index %s is out of range for %s records. Field %r left unchanged.",
            index,
            len(sequence),
            field,
        )

    return [
        with_field(record, field, value) if current_index == index else record
        for current_index, record in enumerate(sequence)
    ]
