from collections.abc import Sequence
from typing import Any, Optional, TypeVar

from arrayutils.errors.field_not_found_error import FieldNotFoundError
from arrayutils.records.get_field import get_field
from arrayutils.records.strictly_equal import strictly_equal

T = TypeVar("T")


def find_object_by_key(sequence: Sequence[T], key: str, value: Any) -> Optional[T]:
    """
    Finds the first record whose ``key`` field strictly equals ``value``.

    Primitives match by value. Any other value only matches the very same
    object, so a structurally equal copy is not a match. This also holds for
    immutable value types such as ``UUID``, ``Decimal``, ``datetime`` and
    tuples: an equal but distinct instance does not match. Records that lack
    ``key`` are skipped.

    Args:
        sequence: The records to search, in order.
        key: Name of the field to compare.
        value: The value to look for.

    Returns:
        The earliest matching record, or None if no record matches.
    """
    for record in sequence:
        try:
            candidate = get_field(record, key)
        except FieldNotFoundError:
            continue

        if strictly_equal(candidate, value):
            return record

    return None
