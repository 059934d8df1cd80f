"""Set-algebra helpers over plain sequences.

Statically-typed counterparts of the `HashSet` operations for callers that
hold lists or other iterables rather than sets. Every helper returns a new
``list``, keeps the order in which elements first occur, and never mutates
its inputs. Membership is tracked with a `HashSet`, so each helper runs in
time linear in the total input size.

Note:
    ``difference`` is asymmetric (elements of ``first`` absent from
    ``second``), matching `HashSet.difference`. Use ``symmetric_difference``
    for the elements unique to either side.
"""

from collections.abc import Hashable, Iterable
from typing import TypeVar

from .hashset import HashSet

T = TypeVar("T", bound=Hashable)


def contains(items: Iterable[T], item: T) -> bool:
    """Return True if ``item`` occurs in ``items``."""
    return any(candidate == item for candidate in items)


def unique(items: Iterable[T]) -> list[T]:
    """Return ``items`` without duplicates, in first-occurrence order.

    Example:
        ```py
        unique([1, 2, 2, 3, 1])  # [1, 2, 3]
        ```
    """
    seen: HashSet[T] = HashSet()
    result: list[T] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def append_if_missing(items: Iterable[T], item: T) -> list[T]:
    """Return a copy of ``items`` with ``item`` appended when it is absent.

    Args:
        items: The source elements; left untouched.
        item: The element to append.

    Returns:
        A new list. Existing duplicates in ``items`` are kept as they are.
    """
    result = list(items)
    if item not in result:
        result.append(item)
    return result


def intersect(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the unique elements of ``first`` that also occur in ``second``."""
    members = HashSet(*second)
    return [item for item in unique(first) if item in members]


def difference(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the unique elements of ``first`` that do not occur in ``second``.

    Example:
        ```py
        difference([1, 2, 3, 4], [3, 4, 5, 6])  # [1, 2]
        ```
    """
    members = HashSet(*second)
    return [item for item in unique(first) if item not in members]


def symmetric_difference(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the unique elements occurring in exactly one of the inputs.

    Elements only in ``first`` come first, followed by elements only in
    ``second``; each group keeps first-occurrence order.

    Example:
        ```py
        symmetric_difference([1, 2, 3, 4], [3, 4, 5, 6])  # [1, 2, 5, 6]
        ```
    """
    first_items = unique(first)
    second_items = unique(second)
    first_members = HashSet(*first_items)
    second_members = HashSet(*second_items)
    return [item for item in first_items if item not in second_members] + [
        item for item in second_items if item not in first_members
    ]
