from typing import Any

from arrayutils.errors.array_utils_error import ArrayUtilsError


class FieldNotFoundError(ArrayUtilsError, LookupError):
    """Raised when a record has no field with the requested name."""

    def __init__(self, field: str, record: Any):
        super().__init__(f"{type(record).__name__} has no field {field!r}")
        self.field = field
        self.record = record
