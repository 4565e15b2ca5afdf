from typing import Any

_SCALAR_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
)

_UNNAMED_CONTAINER_TYPES: tuple[type, ...] = (list, set, frozenset, range)


def is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, "_fields")


def is_record(value: Any) -> bool:
    """Tells whether ``value`` exposes named fields.

    Scalars, plain tuples and other positional containers do not. Mappings,
    models, dataclass instances, named tuples and ordinary objects do.
    """
    if isinstance(value, _SCALAR_TYPES + _UNNAMED_CONTAINER_TYPES):
        return False

    if isinstance(value, tuple):
        return is_named_tuple(value)

    return not isinstance(value, type)
