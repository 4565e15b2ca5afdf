from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping, MutableMapping
from typing import Any, TypeVar

from pydantic import BaseModel

from arrayutils.errors.field_not_found_error import FieldNotFoundError
from arrayutils.errors.read_only_field_error import ReadOnlyFieldError
from arrayutils.errors.unsupported_record_error import UnsupportedRecordError
from arrayutils.records.is_record import is_named_tuple, is_record

T = TypeVar("T")


def with_field(record: T, field: str, value: Any) -> T:
    """Returns a shallow copy of ``record`` with ``field`` set to ``value``.

    The original record is never modified. Nested values are shared between
    the original and the copy.

    Args:
        record: A mapping, pydantic model, dataclass instance, named tuple or
            plain object.
        field: Name of the field to set.
        value: New value for the field.

    Example:
        before: {"id": 1, "name": "x"}
        after:  {"id": 1, "name": "z"}

    Returns:
        A new record of the same kind as ``record``. Mappings that are neither
        ``dict`` subclasses nor define ``__copy__`` come back as a plain ``dict``.

    Raises:
        FieldNotFoundError: If a pydantic model, dataclass or named tuple does
            not declare ``field``. Models configured with ``extra="allow"``
            accept any field.
        ReadOnlyFieldError: If a plain object refuses the assignment.
        UnsupportedRecordError: If ``record`` has no named fields.
    """
    if not is_record(record):
        raise UnsupportedRecordError(record)

    if isinstance(record, Mapping):
        return _mapping_with_field(record, field, value)  # type: ignore[return-value]

    if isinstance(record, BaseModel):
        model_type = type(record)
        if (
            field not in model_type.model_fields
            and model_type.model_config.get("extra") != "allow"
        ):
            raise FieldNotFoundError(field, record)
        return record.model_copy(update={field: value})

    if dataclasses.is_dataclass(record):
        declared = {f.name for f in dataclasses.fields(record) if f.init}
        if field not in declared:
            raise FieldNotFoundError(field, record)
        return dataclasses.replace(record, **{field: value})  # type: ignore[type-var]

    if is_named_tuple(record):
        if field not in record._fields:  # type: ignore[attr-defined]
            raise FieldNotFoundError(field, record)
        return record._replace(**{field: value})  # type: ignore[attr-defined]

    updated = copy.copy(record)
    try:
        setattr(updated, field, value)
    except AttributeError:
        raise ReadOnlyFieldError(field, record) from None
    return updated


def _mapping_with_field(
    record: Mapping[Any, Any], field: str, value: Any
) -> Mapping[Any, Any]:
    # copy.copy only duplicates the items for dict subclasses or mappings that
    # implement __copy__; other mappings may share their inner storage.
    if isinstance(record, MutableMapping) and (
        isinstance(record, dict) or hasattr(type(record), "__copy__")
    ):
        updated = copy.copy(record)
        updated[field] = value
        return updated

    return {**record, field: value}
