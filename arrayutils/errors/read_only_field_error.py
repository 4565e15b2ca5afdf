from typing import Any

from arrayutils.errors.array_utils_error import ArrayUtilsError


class ReadOnlyFieldError(ArrayUtilsError, AttributeError):
    """Raised when a record field exists but cannot be assigned."""

    def __init__(self, field: str, record: Any):
        super().__init__(f"Field {field!r} of {type(record).__name__} is read-only")
        self.field = field
        self.record = record
