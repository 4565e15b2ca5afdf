"""
Exceptions raised when a caller breaks the contract of a record operation.

Out-of-range indices and absent keys are never errors. These exceptions only
surface when a value is not a record, or a record lacks the requested field or
refuses to have it set.
"""

from .array_utils_error import ArrayUtilsError
from .field_not_found_error import FieldNotFoundError
from .read_only_field_error import ReadOnlyFieldError
from .unsupported_record_error import UnsupportedRecordError

__all__: list[str] = [
    "ArrayUtilsError",
    "FieldNotFoundError",
    "ReadOnlyFieldError",
    "UnsupportedRecordError",
]
