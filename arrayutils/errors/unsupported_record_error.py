from typing import Any

from arrayutils.errors.array_utils_error import ArrayUtilsError


class UnsupportedRecordError(ArrayUtilsError, TypeError):
    """Raised when a value has no named fields and cannot be treated as a record."""

    def __init__(self, record: Any):
        super().__init__(
            f"Values of type {type(record).__name__} have no named fields."
        )
        self.record = record
