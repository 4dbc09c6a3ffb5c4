from __future__ import annotations

from dataclasses import dataclass

import pytest

from algokit.core.algorithms import mergesort
from algokit.core.comparators import (
    chain_comparators,
    create_comparator,
    natural_order,
    reverse_comparator,
)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    age: int


USERS = [User(1, "Alice", 30), User(2, "Bob", 25), User(3, "Alice", 20)]


def test_natural_order_signs() -> None:
    assert natural_order(1, 2) == -1
    assert natural_order(2, 2) == 0
    assert natural_order("b", "a") == 1


def test_create_comparator_ascending_and_descending() -> None:
    by_age = create_comparator(lambda u: u.age)
    assert [u.id for u in mergesort(USERS, by_age)] == [3, 2, 1]

    by_age_desc = create_comparator(lambda u: u.age, "desc")
    assert [u.id for u in mergesort(USERS, by_age_desc)] == [1, 2, 3]


def test_create_comparator_rejects_unknown_order() -> None:
    with pytest.raises(ValueError):
        create_comparator(lambda u: u.age, "sideways")


def test_chain_comparators() -> None:
    by_name_then_age = chain_comparators(
        create_comparator(lambda u: u.name),
        create_comparator(lambda u: u.age),
    )
    assert [u.id for u in mergesort(USERS, by_name_then_age)] == [3, 1, 2]
    assert by_name_then_age(USERS[0], USERS[0]) == 0
    assert chain_comparators()(USERS[0], USERS[1]) == 0


def test_reverse_comparator() -> None:
    by_age_desc = reverse_comparator(create_comparator(lambda u: u.age))
    assert [u.id for u in mergesort(USERS, by_age_desc)] == [1, 2, 3]
