from collections.abc import Sequence
from typing import TypeVar

from arrayutils.records.get_field import get_field

T = TypeVar("T")


def sort_by_key(sequence: Sequence[T], key: str, ascending: bool = True) -> list[T]:
    """Orders records by the value of their ``key`` field.

    Args:
        sequence: The records to sort. Left untouched.
        key: Name of the field to order by.
        ascending: Smallest value first when True, largest first when False.

    Returns:
        list[T]: A new list holding the same records. The relative order of
        records with equal ``key`` values is not guaranteed.

    Raises:
        FieldNotFoundError: If a record has no ``key`` field.
        TypeError: If the ``key`` values cannot be ordered against each other.
    """
    return sorted(
        sequence,
        key=lambda record: get_field(record, key),
        reverse=not ascending,
    )
