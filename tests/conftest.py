# -*- coding: Utf-8 -*-

from __future__ import annotations

from typing import NamedTuple

import pytest


class Person(NamedTuple):
    name: str
    age: int


def by_person_age(a: Person, b: Person) -> bool:
    return a.age < b.age


################################## fixtures ##################################


@pytest.fixture
def people() -> list[Person]:
    return [
        Person("Jeff", 58),
        Person("Rick", 55),
        Person("Kim", 3),
        Person("Lara", 52),
        Person("Chris", 47),
        Person("Greg", 45),
    ]
