from __future__ import annotations

import random

from algokit.core.algorithms import bubble_sort, mergesort
from algokit.core.comparators import reverse_comparator


def test_mergesort_matches_builtin_sorted() -> None:
    rng = random.Random(123)
    values = [rng.uniform(-100, 100) for _ in range(500)]
    assert mergesort(values) == sorted(values)


def test_mergesort_stable_for_equal_keys() -> None:
    # (value, original_index) pairs, sort by value only.
    items = [(1, "a"), (1, "b"), (0, "c"), (1, "d"), (0, "e")]
    sorted_items = mergesort(items, key=lambda x: x[0])

    # Within each value bucket, relative order should be preserved.
    ones = [x[1] for x in sorted_items if x[0] == 1]
    zeros = [x[1] for x in sorted_items if x[0] == 0]
    assert zeros == ["c", "e"]
    assert ones == ["a", "b", "d"]


def test_mergesort_stable_with_comparator() -> None:
    rng = random.Random(7)
    items = [(rng.randint(0, 5), idx) for idx in range(200)]
    result = mergesort(items, lambda a, b: a[0] - b[0])

    assert result == sorted(items, key=lambda x: x[0])
    for prev, cur in zip(result, result[1:]):
        if prev[0] == cur[0]:
            assert prev[1] < cur[1]


def test_mergesort_does_not_mutate_input() -> None:
    values = [3, 1, 2]
    assert mergesort(values, lambda a, b: a - b) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_mergesort_descending_comparator() -> None:
    desc = reverse_comparator(lambda a, b: a - b)
    assert mergesort([2, 9, 4, 4, 1], desc) == [9, 4, 4, 2, 1]


def test_sorts_handle_empty_and_singleton() -> None:
    assert mergesort([]) == []
    assert mergesort([5]) == [5]
    assert bubble_sort([]) == []
    assert bubble_sort([1], lambda a, b: a - b) == [1]


def test_bubble_sort_matches_builtin_sorted() -> None:
    rng = random.Random(99)
    values = [rng.randint(-50, 50) for _ in range(120)]
    result = bubble_sort(values, lambda a, b: a - b)
    assert result == sorted(values)
    assert bubble_sort([3, 2, 1]) == [1, 2, 3]


def test_bubble_sort_exits_early_on_sorted_input() -> None:
    calls = 0

    def counting(a: int, b: int) -> int:
        nonlocal calls
        calls += 1
        return a - b

    values = list(range(50))
    assert bubble_sort(values, counting) == values
    # A single pass of n - 1 comparisons, then the no-swap exit.
    assert calls == len(values) - 1
