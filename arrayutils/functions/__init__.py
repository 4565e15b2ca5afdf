"""
Pure helpers that build new lists out of existing sequences.

None of these functions modify their input. Index-based helpers treat an
out-of-range index as "nothing to do" and return an equal copy, and the lookup
helper returns None instead of raising when nothing matches.
"""

from .find_object_by_key import find_object_by_key
from .push import push
from .remove_at_index import remove_at_index
from .sort_by_key import sort_by_key
from .update_field_in_all_objects import update_field_in_all_objects
from .update_field_in_object import update_field_in_object
from .update_object_at_index import update_object_at_index

__all__: list[str] = [
    "push",
    "update_object_at_index",
    "remove_at_index",
    "update_field_in_object",
    "update_field_in_all_objects",
    "find_object_by_key",
    "sort_by_key",
]
