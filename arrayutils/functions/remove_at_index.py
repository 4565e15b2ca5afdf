import logging
from collections.abc import Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def remove_at_index(sequence: Sequence[T], index: int) -> list[T]:
    """Drops the item at ``index``, keeping the others in order.

    Example:
        before: [A, B, C], index 1
        after: [A, C]

    Returns:
        list[T]: A new list. Equal to ``sequence`` when ``index`` is out of range.
    """
    if not 0 <= index < len(sequence):
        logger.debug(
            "Index %s is out of range for %s items. Nothing to remove.",
            index,
            len(sequence),
        )

    return [
        item for current_index, item in enumerate(sequence) if current_index != index
    ]
