"""Tests for searching, selection and deduplication."""

from __future__ import annotations

import random

import pytest

from algokit.core.algorithms import binary_search, k_smallest, quick_select, unique_by
from algokit.core.comparators import numeric_ascending
from algokit.core.errors import RankOutOfRangeError


def test_binary_search_finds_present_values() -> None:
    arr = [1, 3, 5, 7, 9]
    assert binary_search(arr, 5, numeric_ascending) == 2
    for idx, value in enumerate(arr):
        assert binary_search(arr, value) == idx


def test_binary_search_returns_minus_one_when_absent() -> None:
    arr = [1, 3, 5, 7, 9]
    assert binary_search(arr, 4, numeric_ascending) == -1
    assert binary_search(arr, 0) == -1
    assert binary_search(arr, 10) == -1
    assert binary_search([], 1) == -1


def test_binary_search_with_duplicates_returns_any_match() -> None:
    arr = [1, 2, 2, 2, 2, 3]
    idx = binary_search(arr, 2)
    assert arr[idx] == 2


def test_binary_search_random_sorted_inputs() -> None:
    rng = random.Random(5)
    for _ in range(50):
        arr = sorted(rng.randint(0, 30) for _ in range(rng.randint(0, 25)))
        target = rng.randint(0, 30)
        idx = binary_search(arr, target)
        if target in arr:
            assert arr[idx] == target
        else:
            assert idx == -1


def test_unique_by_keeps_first_seen() -> None:
    items = [
        {"id": 1, "value": "a"},
        {"id": 1, "value": "b"},
        {"id": 2, "value": "c"},
    ]
    assert unique_by(items, lambda item: item["id"]) == [
        {"id": 1, "value": "a"},
        {"id": 2, "value": "c"},
    ]
    assert unique_by(iter("abracadabra"), lambda ch: ch) == ["a", "b", "r", "c", "d"]


def test_quick_select_returns_rank() -> None:
    assert quick_select([9, 1, 5, 3], 1, numeric_ascending) == 3

    rng = random.Random(11)
    values = [rng.randint(0, 1000) for _ in range(101)]
    expected = sorted(values)
    for k in (0, 17, 50, 100):
        assert quick_select(list(values), k) == expected[k]


def test_quick_select_reorders_input_in_place() -> None:
    values = [9, 1, 5, 3, 7]
    assert quick_select(values, 2) == 5
    assert sorted(values) == [1, 3, 5, 7, 9]
    assert values[2] == 5


@pytest.mark.parametrize("k", [-1, 4, 10])
def test_quick_select_out_of_range(k: int) -> None:
    with pytest.raises(RankOutOfRangeError) as excinfo:
        quick_select([9, 1, 5, 3], k)
    assert isinstance(excinfo.value, IndexError)
    assert excinfo.value.k == k
    assert excinfo.value.length == 4


def test_k_smallest() -> None:
    values = [9, 1, 5, 2]
    assert k_smallest(values, 2, numeric_ascending) == [1, 2]
    assert k_smallest(values, 0, numeric_ascending) == []
    assert k_smallest(values, -3, numeric_ascending) == []
    assert k_smallest(values, 10, numeric_ascending) == [1, 2, 5, 9]
    assert values == [9, 1, 5, 2]


def test_k_smallest_matches_sorted_prefix() -> None:
    rng = random.Random(3)
    values = [rng.randint(-20, 20) for _ in range(60)]
    for k in (1, 5, 30, 59):
        assert k_smallest(values, k) == sorted(values)[:k]
