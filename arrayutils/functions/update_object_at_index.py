import logging
from collections.abc import Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def update_object_at_index(sequence: Sequence[T], index: int, element: T) -> list[T]:
    """Replaces the item at ``index`` with ``element``.

    Args:
        sequence: The items to copy. Left untouched.
        index: Zero-based position to replace. Negative values do not count
            from the end.
        element: The replacement item.

    Example:
        before: [A, B, C], index 1, element D
        after: [A, D, C]

    Returns:
        list[T]: A new list. Equal to ``sequence`` when ``index`` is out of range.
    """
    if not 0 <= index < len(sequence):
        logger.debug(
            "Index %s is out of range for %s items. Nothing to update.",
            index,
            len(sequence),
        )

    return [
        element if current_index == index else item
        for current_index, item in enumerate(sequence)
    ]
