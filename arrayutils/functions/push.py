from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def push(sequence: Sequence[T], element: T) -> list[T]:
    """Returns a new list with ``element`` added after the last item."""
    return [*sequence, element]
