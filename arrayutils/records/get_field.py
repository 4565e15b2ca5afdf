from collections.abc import Mapping
from typing import Any

from arrayutils.errors.field_not_found_error import FieldNotFoundError
from arrayutils.errors.unsupported_record_error import UnsupportedRecordError
from arrayutils.records.is_record import is_record


def get_field(record: Any, field: str) -> Any:
    """Reads ``field`` from a mapping key or an attribute of ``record``.

    Raises:
        FieldNotFoundError: If the record has no such field.
        UnsupportedRecordError: If ``record`` has no named fields at all.
    """
    if not is_record(record):
        raise UnsupportedRecordError(record)

    if isinstance(record, Mapping):
        if field not in record:
            raise FieldNotFoundError(field, record)
        return record[field]

    try:
        return getattr(record, field)
    except AttributeError:
        raise FieldNotFoundError(field, record) from None
