"""
Pure, generic helpers for sequences of values and sequences of records.

The package bundles seven stateless operations: appending, replacing or
removing by index, setting one field on a single record or on every record,
looking a record up by a field value, and sorting by a field. Each one builds
a new list and never modifies its input. Out-of-range indices are a no-op and
a failed lookup returns None.

Records can be dicts or other mappings, pydantic models, dataclass instances,
named tuples or plain objects. ``RecordSequence`` exposes the same operations
as chainable methods on an immutable collection.
"""

from .collections import RecordSequence
from .errors import (
    ArrayUtilsError,
    FieldNotFoundError,
    ReadOnlyFieldError,
    UnsupportedRecordError,
)
from .functions import (
    find_object_by_key,
    push,
    remove_at_index,
    sort_by_key,
    update_field_in_all_objects,
    update_field_in_object,
    update_object_at_index,
)
from .records import get_field, strictly_equal, with_field

__all__: list[str] = [
    "push",
    "update_object_at_index",
    "remove_at_index",
    "update_field_in_object",
    "update_field_in_all_objects",
    "find_object_by_key",
    "sort_by_key",
    "RecordSequence",
    "get_field",
    "with_field",
    "strictly_equal",
    "ArrayUtilsError",
    "FieldNotFoundError",
    "ReadOnlyFieldError",
    "UnsupportedRecordError",
]
