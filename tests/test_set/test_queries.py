# -*- coding: Utf-8 -*-

from __future__ import annotations

from typing import Any

from mathset import Set, new

import pytest

########################
# Membership
########################


def test_contains_all_values() -> None:
    s = new("ryu", "ken", "guile")

    assert s.contains("ryu")
    assert s.contains("ryu", "guile")
    assert not s.contains("ryu", "balrog")
    assert not s.contains("balrog")


def test_contains_without_arguments() -> None:
    assert new(1).contains()
    assert new().contains()


def test_contains_unhashable_value() -> None:
    s: Set[Any] = new(1, 2)

    assert not s.contains([1])
    assert not s.contains(1, {})


def test_in_operator() -> None:
    s = new(1, 2)

    assert 1 in s
    assert 3 not in s
    assert [1] not in s


########################
# Equality
########################


def test_equals_same_members_in_any_order() -> None:
    assert new(1, 2, 3).equals(new(3, 1, 2))
    assert new(1, 2, 3) == new(3, 2, 1)


def test_equals_different_cardinality() -> None:
    assert not new(1, 2, 3).equals(new(1, 2))
    assert not new(1, 2).equals(new(1, 2, 3))


def test_equals_same_cardinality_different_members() -> None:
    assert not new(1, 2, 3).equals(new(1, 2, 4))
    assert new(1, 2, 3) != new(1, 2, 4)


def test_equals_empty_sets() -> None:
    assert new().equals(new())


def test_equals_ignores_comparator() -> None:
    assert new(1, 2) == Set(2, 1, comparator=lambda a, b: a > b)


@pytest.mark.parametrize("other", [{1, 2}, frozenset({1, 2}), [1, 2], (1, 2), None], ids=repr)
def test_equals_non_set_operand(other: Any) -> None:
    s = new(1, 2)

    assert not s.equals(other)
    assert s != other


########################
# Subset / Superset
########################


@pytest.mark.parametrize(
    ["a", "b", "expected"],
    [
        pytest.param(new(1, 2), new(1, 2, 3), True, id="strict subset"),
        pytest.param(new(1, 2, 3), new(1, 2, 3), True, id="same set"),
        pytest.param(new(), new(1), True, id="empty set"),
        pytest.param(new(), new(), True, id="both empty"),
        pytest.param(new(1, 4), new(1, 2, 3), False, id="partial overlap"),
        pytest.param(new(1, 2, 3), new(1, 2), False, id="superset"),
        pytest.param(new(1), new(), False, id="non-empty vs empty"),
    ],
)
def test_is_subset_of(a: Set[int], b: Set[int], expected: bool) -> None:
    assert a.is_subset_of(b) is expected
    assert (a <= b) is expected
    assert b.is_superset_of(a) is expected
    assert (b >= a) is expected


@pytest.mark.parametrize(
    ["a", "b", "expected"],
    [
        pytest.param(new(1, 2), new(1, 2, 3), True, id="strict subset"),
        pytest.param(new(), new(1), True, id="empty set"),
        pytest.param(new(1, 2, 3), new(1, 2, 3), False, id="same set"),
        pytest.param(new(), new(), False, id="both empty"),
        pytest.param(new(1, 4), new(1, 2, 3), False, id="partial overlap"),
    ],
)
def test_is_proper_subset_of(a: Set[int], b: Set[int], expected: bool) -> None:
    assert a.is_proper_subset_of(b) is expected
    assert (a < b) is expected
    assert b.is_proper_superset_of(a) is expected
    assert (b > a) is expected


@pytest.mark.parametrize(
    ["a", "b"],
    [
        pytest.param(new(1, 2), new(1, 2, 3), id="strict subset"),
        pytest.param(new(1, 2, 3), new(1, 2, 3), id="same set"),
        pytest.param(new(1, 4), new(1, 2, 3), id="partial overlap"),
        pytest.param(new(), new(5), id="empty set"),
        pytest.param(new(7), new(), id="non-empty vs empty"),
    ],
)
def test_subset_consistency(a: Set[int], b: Set[int]) -> None:
    assert a.is_subset_of(b) == a.intersect(b).equals(a)
    assert a.is_proper_subset_of(b) == (a.is_subset_of(b) and not a.equals(b))
    assert a.is_superset_of(b) == b.is_subset_of(a)
    assert a.is_proper_superset_of(b) == (a.is_superset_of(b) and not a.equals(b))


@pytest.mark.parametrize("other", [{1, 2, 3}, [1, 2, 3], None], ids=repr)
def test_subset_family_non_set_operand(other: Any) -> None:
    s = new(1, 2)

    assert not s.is_subset_of(other)
    assert not s.is_proper_subset_of(other)
    assert not s.is_superset_of(other)
    assert not s.is_proper_superset_of(other)


def test_comparison_operators_non_set_operand() -> None:
    s = new(1, 2)

    with pytest.raises(TypeError):
        _ = s <= [1, 2, 3]  # type: ignore[operator]
    with pytest.raises(TypeError):
        _ = s > None  # type: ignore[operator]
