# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Ordering strategies used for deterministic enumeration of a Set"""

from __future__ import annotations

__all__ = [
    "Comparator",
    "canonical_text",
    "sort_members",
    "type_tag",
]

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping, Set as AbstractSet
from functools import cmp_to_key
from typing import Any, Final, TypeGuard

logger = logging.getLogger(__name__)

type Comparator[_T] = Callable[[_T, _T], bool]

_TYPE_TAGS: Final[Mapping[type[Any], str]] = {
    str: "string",
    int: "int",
    float: "float",
    bool: "bool",
    bytes: "bytes",
}

_ANY_TAG: Final[str] = "any"


def _is_namedtuple(o: object) -> TypeGuard[tuple[Any, ...]]:
    cls = type(o)
    return (
        isinstance(o, tuple)
        and cls is not tuple
        and all(callable(getattr(cls, callable_attr, None)) for callable_attr in ("_make", "_asdict", "_replace"))
        and isinstance(getattr(cls, "_fields", None), tuple)
    )


def canonical_text(value: object) -> str:
    """
    Returns a deterministic textual rendering of 'value'.

    Containers are rendered recursively; unordered containers (sets, mappings)
    have their content sorted so that hash randomization does not leak into the
    result. Any other object falls back to repr().
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = ", ".join(f"{f.name}={canonical_text(getattr(value, f.name))}" for f in dataclasses.fields(value))
        return f"{type(value).__qualname__}({fields})"
    if _is_namedtuple(value):
        fields = ", ".join(f"{name}={canonical_text(field)}" for name, field in zip(getattr(type(value), "_fields"), value))
        return f"{type(value).__qualname__}({fields})"
    match value:
        case AbstractSet():
            return "{" + ", ".join(sorted(map(canonical_text, value))) + "}"
        case Mapping():
            items = sorted(f"{canonical_text(k)}: {canonical_text(v)}" for k, v in value.items())
            return "{" + ", ".join(items) + "}"
        case tuple():
            return "(" + ", ".join(map(canonical_text, value)) + ("," if len(value) == 1 else "") + ")"
        case list():
            return "[" + ", ".join(map(canonical_text, value)) + "]"
        case _:
            return repr(value)


def _canonical_key(value: object) -> tuple[str, str]:
    return (canonical_text(value), type(value).__qualname__)


def _comparator_key[_T](comparator: Comparator[_T]) -> Callable[[_T], Any]:
    def compare(a: _T, b: _T, /) -> int:
        if comparator(a, b):
            return -1
        if comparator(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def _is_chain(items: list[Any]) -> bool:
    return all(x < y or x == y for x, y in zip(items, items[1:]))


def sort_members[_T](members: Iterable[_T], comparator: Comparator[_T] | None = None) -> list[_T]:
    """
    Returns 'members' as a new list sorted with a stable sort.

    With a comparator, it is used as the "less-than" relation. Otherwise the natural
    order is used, unless the members are not mutually orderable: in this case they
    are sorted by their canonical text.
    """
    items = list(members)
    if comparator is not None:
        items.sort(key=_comparator_key(comparator))
        return items
    # Sets only define a partial order (subset relation)
    if not any(isinstance(item, AbstractSet) for item in items):
        try:
            natural: list[_T] = sorted(items)  # type: ignore[type-var]
            # A partial order (nested sets, NaN) does not raise but gives an input-dependent result
            if _is_chain(natural):
                return natural
        except TypeError:
            pass
    logger.debug("No natural order for %d member(s), sorting by canonical text", len(items))
    items.sort(key=_canonical_key)
    return items


def type_tag(members: Iterable[object]) -> str:
    """
    Returns the element type name used in a Set's textual representation.

    'any' is returned for an empty or heterogeneous collection.
    """
    types = {type(member) for member in members}
    if len(types) != 1:
        return _ANY_TAG
    (cls,) = types
    return _TYPE_TAGS.get(cls, cls.__name__)
