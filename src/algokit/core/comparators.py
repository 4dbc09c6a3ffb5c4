"""Comparator helpers shared by the ordering algorithms.

A comparator is a plain function ``(a, b) -> int`` returning a negative number
when ``a`` orders first, zero when the two are equal and a positive number
otherwise. It must describe a consistent total order; nothing here checks that.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar


T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> int:
    """Compare two values using their own ``<`` and ``>`` operators."""

    return (a > b) - (a < b)


numeric_ascending = natural_order


def create_comparator(selector: Callable[[T], Any], order: str = "asc") -> Comparator[T]:
    """Build a comparator that orders items by a projected value.

    Args:
        selector: Projection applied to both items before comparing.
        order: ``"asc"`` or ``"desc"``.

    Returns:
        A comparator over the original items.
    """

    if order not in ("asc", "desc"):
        raise ValueError(f"order must be 'asc' or 'desc', got {order!r}")
    sign = 1 if order == "asc" else -1

    def compare(a: T, b: T) -> int:
        val_a = selector(a)
        val_b = selector(b)
        if val_a == val_b:
            return 0
        return -sign if val_a < val_b else sign

    return compare


def chain_comparators(*comparators: Comparator[T]) -> Comparator[T]:
    """Combine comparators; later ones only break ties left by earlier ones."""

    def compare(a: T, b: T) -> int:
        for comparator in comparators:
            result = comparator(a, b)
            if result != 0:
                return result
        return 0

    return compare


def reverse_comparator(comparator: Comparator[T]) -> Comparator[T]:
    """Return a comparator with the opposite ordering."""

    return lambda a, b: -comparator(a, b)
