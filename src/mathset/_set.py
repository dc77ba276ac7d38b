# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Set module"""

from __future__ import annotations

__all__ = ["Set", "new", "new_with_comparator"]

from collections.abc import Iterable, Iterator
from copy import deepcopy
from typing import Any, Self

from ._ordering import Comparator, sort_members, type_tag


class Set[_T]:
    """
    A (mathematical) set of values, supporting the set concepts of union,
    intersection and difference.

    Members are stored as keys of a dict, so they must be hashable. An optional
    comparator, a function telling whether its first argument orders before the
    second one, drives the order of as_sorted_list().

    This container is not thread-safe: it must be locked externally when shared
    between a writer and other threads.

    Example:
        >>> s = Set("ryu", "ken", "balrog", "cammy")
        >>> print(s)
        Set<string>{balrog, cammy, ken, ryu}
        >>> s.add("ken").count()
        4
    """

    __slots__ = ("__members", "__comparator", "__weakref__")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *members: _T, comparator: Comparator[_T] | None = None) -> None:
        if comparator is not None and not callable(comparator):
            raise TypeError(f"comparator must be callable, got {comparator!r}")
        self.__members: dict[_T, None] = dict.fromkeys(members)
        self.__comparator: Comparator[_T] | None = comparator

    @classmethod
    def from_iterable(cls, iterable: Iterable[_T], /, comparator: Comparator[_T] | None = None) -> Self:
        return cls(*iterable, comparator=comparator)

    def __derive(self, members: Iterable[_T]) -> Self:
        return type(self).from_iterable(members, comparator=self.__comparator)

    @property
    def comparator(self) -> Comparator[_T] | None:
        return self.__comparator

    ########################
    # Mutation
    ########################

    def add(self, *members: _T) -> Self:
        """
        Add each member to the set, ignoring the ones already present.

        The set is modified in place and returned, so calls can be chained.
        """
        for member in members:
            self.__members[member] = None
        return self

    def __ior__(self, other: Any) -> Self:
        if not isinstance(other, Set):
            return NotImplemented
        return self.add(*other.as_list())

    ########################
    # Queries
    ########################

    def contains(self, *values: Any) -> bool:
        """
        Returns True if all the given values are members of the set.

        Returns True if no value is given.
        """
        members = self.__members
        try:
            return all(value in members for value in values)
        except TypeError:  # Unhashable value, so it cannot be a member
            return False

    def __contains__(self, value: object, /) -> bool:
        return self.contains(value)

    def count(self) -> int:
        return len(self.__members)

    def __len__(self) -> int:
        return len(self.__members)

    def equals(self, other: Set[Any]) -> bool:
        """
        Returns True if 'other' holds the same members as this set.
        """
        if not isinstance(other, Set):
            return False
        if self.count() != other.count():
            return False
        return all(other.contains(member) for member in self.__members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.equals(other)

    def is_subset_of(self, other: Set[Any]) -> bool:
        if not isinstance(other, Set):
            return False
        return self.intersect(other).equals(self)

    def is_proper_subset_of(self, other: Set[Any]) -> bool:
        return self.is_subset_of(other) and not self.equals(other)

    def is_superset_of(self, other: Set[Any]) -> bool:
        if not isinstance(other, Set):
            return False
        return other.is_subset_of(self)

    def is_proper_superset_of(self, other: Set[Any]) -> bool:
        return self.is_superset_of(other) and not self.equals(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_subset_of(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_proper_subset_of(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_superset_of(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_proper_superset_of(other)

    ########################
    # Derived sets
    ########################

    def intersect(self, other: Set[_T]) -> Self:
        """
        Returns a new set with the members present in both sets.
        """
        return self.__derive(member for member in self.__members if other.contains(member))

    def minus(self, other: Set[_T]) -> Self:
        """
        Returns a new set with the members of this set which are not in 'other'.
        """
        return self.__derive(member for member in self.__members if not other.contains(member))

    def union(self, other: Set[_T]) -> Self:
        """
        Returns a new set with the members of both sets.
        """
        return self.clone().add(*other.as_list())

    def clone(self) -> Self:
        """
        Returns a copy of this set. Mutating one does not affect the other.
        """
        return self.__derive(self.__members)

    def __and__(self, other: Any) -> Self:
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: Any) -> Self:
        if not isinstance(other, Set):
            return NotImplemented
        return self.minus(other)

    def __or__(self, other: Any) -> Self:
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    __copy__ = clone  # Built-in module 'copy' compatibility

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        copy_self = type(self)(comparator=self.__comparator)
        memo[id(self)] = copy_self
        copy_self.add(*(deepcopy(member, memo) for member in self.__members))
        return copy_self

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self).from_iterable, (list(self.__members), self.__comparator)

    ########################
    # Enumeration
    ########################

    def as_list(self) -> list[_T]:
        """
        Returns the members as a new list. The order is unspecified.
        """
        return list(self.__members)

    def __iter__(self) -> Iterator[_T]:
        return iter(self.__members)

    def as_sorted_list(self) -> list[_T]:
        """
        Returns the members as a new list, sorted with a stable sort.

        If a comparator was given at construction, it is used as the "less-than"
        relation. Otherwise the natural order of the members is used, or a
        lexicographic order of their canonical text if they cannot be compared.
        """
        return sort_members(self.__members, self.__comparator)

    def __str__(self) -> str:
        members = self.as_sorted_list()
        return f"Set<{type_tag(members)}>{{{', '.join(map(str, members))}}}"

    def __repr__(self) -> str:
        members = self.as_sorted_list()
        if not members:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({', '.join(map(repr, members))})"


def new[_T](*members: _T) -> Set[_T]:
    """
    Returns a new set, optionally initialized with some members.
    """
    return Set(*members)


def new_with_comparator[_T](comparator: Comparator[_T], *members: _T) -> Set[_T]:
    """
    Returns a new set, optionally initialized with some members, whose sorted
    enumeration is ordered by 'comparator'.
    """
    return Set(*members, comparator=comparator)
