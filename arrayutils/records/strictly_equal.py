from typing import Any

_PRIMITIVE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
)


def strictly_equal(left: Any, right: Any) -> bool:
    """Compares primitives by value and everything else by identity.

    ``True`` never equals ``1`` and NaN never equals itself. Two structurally
    equal dicts, lists, models, UUIDs or datetimes are only equal when they
    are the same object.
    """
    if isinstance(left, _PRIMITIVE_TYPES) and isinstance(right, _PRIMITIVE_TYPES):
        if isinstance(left, bool) != isinstance(right, bool):
            return False
        return bool(left == right)

    return left is right
