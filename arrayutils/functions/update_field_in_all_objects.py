from collections.abc import Sequence
from typing import Any, TypeVar

from arrayutils.records.with_field import with_field

T = TypeVar("T")


def update_field_in_all_objects(
    sequence: Sequence[T], field: str, value: Any
) -> list[T]:
    """Returns copies of every record with ``field`` set to ``value``."""
    return [with_field(record, field, value) for record in sequence]
