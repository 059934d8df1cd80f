"""Generic hash set container.

`HashSet` keeps a collection of unique, hashable elements and supports
membership queries, in-place mutation, and set algebra (union, intersection,
difference, symmetric difference). Algebra operations always build a new
instance; neither operand is modified and no storage is shared between the
result and the operands.

Absent elements, empty sets, and disjoint operands are ordinary states, so
no operation in this module raises for them.

Note:
    Instances are not synchronized. Callers sharing a set between threads
    must serialize access themselves.

Example:
    ```py
    a = HashSet(1, 2, 4)
    b = HashSet(2, 3)
    a.union(b)         # HashSet(1, 2, 4, 3)
    a.intersection(b)  # HashSet(2)
    a.difference(b)    # HashSet(1, 4)
    ```
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)

SEPARATOR = ","  # pragma: no mutate


class HashSet(Generic[T]):
    """An unordered collection of unique elements.

    The backing storage is a ``dict`` mapping each element to ``None``; keys
    are unique by construction, so duplicates cannot be represented.
    Iteration order is unspecified.
    """

    __slots__ = ("_items",)

    # mutable container, must not be used as a dict key or set member
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *elements: T) -> None:
        """Create a set holding the unique values of ``elements``.

        Args:
            *elements: Initial elements. Duplicates collapse to one entry.
        """
        self._items: dict[T, None] = dict.fromkeys(elements)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, element: T) -> None:
        """Add ``element``; adding a present element changes nothing."""
        self._items[element] = None

    def add_all(self, *elements: T) -> None:
        """Add every element of ``elements`` in the given order."""
        for element in elements:
            self.add(element)

    def remove(self, element: T) -> None:
        """Remove ``element`` if present; absent elements are ignored."""
        self._items.pop(element, None)

    def remove_all(self, *elements: T) -> None:
        """Remove every element of ``elements``, ignoring absent ones."""
        for element in elements:
            self.remove(element)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, element: T) -> bool:
        """Return True iff ``element`` is currently present."""
        return element in self._items

    def size(self) -> int:
        """Return the number of distinct elements."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True when the set holds no elements."""
        return self.size() == 0

    def to_list(self) -> list[T]:
        """Return a point-in-time list of the elements.

        The list is a copy: later mutation of the set does not affect it,
        and mutating the list does not affect the set.
        """
        return list(self._items)

    def copy(self) -> HashSet[T]:
        """Return a shallow copy backed by fresh storage."""
        clone: HashSet[T] = HashSet()
        clone._items = self._items.copy()  # pylint: disable=protected-access
        return clone

    # ------------------------------------------------------------------
    # Set algebra
    # ------------------------------------------------------------------

    def union(self, other: HashSet[T]) -> HashSet[T]:
        """Return a new set with every element present in either operand."""
        result = self.copy()
        result._items.update(other._items)  # pylint: disable=protected-access
        return result

    def intersection(self, other: HashSet[T]) -> HashSet[T]:
        """Return a new set with the elements present in both operands.

        The smaller operand is iterated and probed against the larger one,
        so the cost is proportional to the smaller size. Membership of the
        result does not depend on operand order.
        """
        # pylint: disable=protected-access
        if self.size() <= other.size():
            smaller, larger = self, other
        else:
            smaller, larger = other, self
        return HashSet(*(e for e in smaller._items if e in larger._items))

    def difference(self, other: HashSet[T]) -> HashSet[T]:
        """Return a new set with the elements of this set absent from ``other``."""
        return HashSet(*(e for e in self._items if e not in other._items))  # pylint: disable=protected-access

    def symmetric_difference(self, other: HashSet[T]) -> HashSet[T]:
        """Return a new set with the elements present in exactly one operand."""
        result = self.difference(other)
        result.add_all(*(e for e in other._items if e not in self._items))  # pylint: disable=protected-access
        return result

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        # iterate a snapshot so callers may mutate the set while looping
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self._items.keys() == other._items.keys()

    def __or__(self, other: object) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> HashSet[T]:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __str__(self) -> str:
        """Comma-joined elements in unspecified order, e.g. ``"a,b"``."""
        return SEPARATOR.join(str(e) for e in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(e) for e in self._items)})"
