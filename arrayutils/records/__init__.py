"""
Uniform field access over the record kinds accepted by arrayutils.

Records may be mappings, pydantic models, dataclass instances, named tuples
or plain objects with attributes. Reads go through ``get_field`` and updates
go through ``with_field``, which always builds a new record.
"""

from .get_field import get_field
from .is_record import is_record
from .strictly_equal import strictly_equal
from .with_field import with_field

__all__: list[str] = ["get_field", "is_record", "strictly_equal", "with_field"]
