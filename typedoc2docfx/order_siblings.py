"""Ordering rule shared by page members and table-of-contents entries."""

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


def order_siblings(items: Sequence[T], name: Callable[[T], str], *, alphabetical: bool) -> list[T]:
    """Order one level of siblings.

    Alphabetical order is case-insensitive; ``sorted`` is stable, so ties keep
    their declaration order. Otherwise source order is kept as is.
    """
    if not alphabetical:
        return list(items)
    return sorted(items, key=lambda it: name(it).lower())
