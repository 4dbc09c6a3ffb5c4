"""Standalone search, sorting and combinatorics algorithms.

Everything here is implemented "from scratch" over plain lists so the
procedures can be read and tested in isolation. Ordering functions take an
optional comparator (see :mod:`algokit.core.comparators`); when it is omitted
the items' natural ordering is used.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, MutableSequence, Sequence, TypeVar

from algokit.core.comparators import Comparator, natural_order, numeric_ascending
from algokit.core.errors import EmptyInputError, RankOutOfRangeError


T = TypeVar("T")


def _resolve(comparator: Comparator[T] | None) -> Comparator[T]:
    return natural_order if comparator is None else comparator


def binary_search(items: Sequence[T], target: T, comparator: Comparator[T] | None = None) -> int:
    """Return the index of an element equal to ``target``, or -1.

    ``items`` must already be sorted ascending under ``comparator``. When several
    elements compare equal to the target, whichever one the bisection lands on
    first is returned; it is not necessarily the leftmost.
    """

    compare = _resolve(comparator)
    left = 0
    right = len(items) - 1
    while left <= right:
        mid = (left + right) // 2
        result = compare(items[mid], target)
        if result == 0:
            return mid
        if result < 0:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def unique_by(items: Iterable[T], selector: Callable[[T], Hashable]) -> List[T]:
    """Drop items whose projected key was already seen, keeping first-seen order."""

    seen: set = set()
    result: List[T] = []
    for item in items:
        item_key = selector(item)
        if item_key not in seen:
            seen.add(item_key)
            result.append(item)
    return result


def quick_select(items: MutableSequence[T], k: int, comparator: Comparator[T] | None = None) -> T:
    """Return the element of 0-based rank ``k`` without fully sorting.

    Uses Lomuto partitioning around the middle element; average $O(n)$.

    Note:
        ``items`` is reordered in place. Pass a copy if the original order matters.

    Raises:
        RankOutOfRangeError: If ``k`` is not in ``[0, len(items))``.
    """

    if k < 0 or k >= len(items):
        raise RankOutOfRangeError(k, len(items))

    compare = _resolve(comparator)
    left = 0
    right = len(items) - 1
    while left <= right:
        pivot_index = _partition(items, left, right, (left + right) // 2, compare)
        if pivot_index == k:
            return items[pivot_index]
        if pivot_index < k:
            left = pivot_index + 1
        else:
            right = pivot_index - 1
    return items[k]


def _partition(items: MutableSequence[T], lo: int, hi: int, pivot_index: int, compare: Comparator[T]) -> int:
    pivot = items[pivot_index]
    items[pivot_index], items[hi] = items[hi], items[pivot_index]
    store = lo
    for i in range(lo, hi):
        if compare(items[i], pivot) < 0:
            items[store], items[i] = items[i], items[store]
            store += 1
    items[hi], items[store] = items[store], items[hi]
    return store


def k_smallest(items: Sequence[T], k: int, comparator: Comparator[T] | None = None) -> List[T]:
    """Return the ``k`` smallest items in ascending order.

    The caller's sequence is left untouched. One quickselect pass isolates the
    ``k``-prefix, and only that prefix is sorted.
    """

    if k <= 0:
        return []
    work = list(items)
    if k >= len(work):
        return mergesort(work, comparator)
    quick_select(work, k - 1, comparator)
    return mergesort(work[:k], comparator)


def mergesort(
    values: Sequence[T],
    comparator: Comparator[Any] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
) -> List[T]:
    """Return a new list containing the values sorted using mergesort.

    Mergesort is stable and runs in $O(n\\log n)$ time with a single scratch
    buffer of the input's size.

    Args:
        values: Input sequence.
        comparator: Optional comparator. When ``key`` is given it compares keys.
        key: Optional key function (like ``sorted(..., key=...)``).

    Returns:
        A new sorted list.
    """

    items = list(values)
    if len(items) <= 1:
        return items

    compare = _resolve(comparator)
    if key is not None:
        compare = _compare_keys(compare, key)

    buffer: List[T] = list(items)
    _split_merge(items, buffer, 0, len(items), compare)
    return items


def _compare_keys(compare: Comparator[Any], key: Callable[[T], Any]) -> Comparator[T]:
    def compare_by_key(a: T, b: T) -> int:
        return compare(key(a), key(b))

    return compare_by_key


def _split_merge(items: List[T], buffer: List[T], start: int, end: int, compare: Comparator[T]) -> None:
    if end - start <= 1:
        return

    mid = (start + end) // 2
    _split_merge(items, buffer, start, mid, compare)
    _split_merge(items, buffer, mid, end, compare)
    _merge(items, buffer, start, mid, end, compare)


def _merge(items: List[T], buffer: List[T], start: int, mid: int, end: int, compare: Comparator[T]) -> None:
    i = start
    j = mid
    k = start
    while i < mid and j < end:
        # Stable: prefer left when equal.
        if compare(items[i], items[j]) <= 0:
            buffer[k] = items[i]
            i += 1
        else:
            buffer[k] = items[j]
            j += 1
        k += 1

    while i < mid:
        buffer[k] = items[i]
        i += 1
        k += 1
    while j < end:
        buffer[k] = items[j]
        j += 1
        k += 1

    items[start:end] = buffer[start:end]


def bubble_sort(values: Sequence[T], comparator: Comparator[T] | None = None) -> List[T]:
    """Return a sorted copy using bubble sort.

    $O(n^2)$ in general, $O(n)$ on already sorted input thanks to the early exit.
    """

    compare = _resolve(comparator)
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if compare(items[j], items[j + 1]) > 0:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


@dataclass
class TreeNode(Generic[T]):
    """A value with an ordered list of child nodes."""

    value: T
    children: List["TreeNode[T]"] = field(default_factory=list)


def traverse_tree(root: TreeNode[T], visitor: Callable[[TreeNode[T]], None]) -> None:
    """Call ``visitor`` on every node in depth-first preorder.

    Iterative, so arbitrarily deep trees are fine. The tree must not contain
    cycles.
    """

    stack: List[TreeNode[T]] = [root]
    while stack:
        node = stack.pop()
        visitor(node)
        stack.extend(reversed(node.children or []))


@dataclass(frozen=True)
class Summary:
    min: float
    max: float
    mean: float
    median: float
    sum: float
    count: int

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def summarize(values: Iterable[float]) -> Summary:
    """Compute min/max/mean/median/sum/count of a numeric iterable.

    Raises:
        EmptyInputError: If ``values`` yields nothing.
    """

    items = list(values)
    if not items:
        raise EmptyInputError("summarize: no values provided")

    total = 0
    lowest = items[0]
    highest = items[0]
    for value in items:
        total += value
        if value < lowest:
            lowest = value
        if value > highest:
            highest = value

    ordered = mergesort(items, numeric_ascending)
    count = len(ordered)
    mid = count // 2
    if count % 2 == 0:
        median = (ordered[mid - 1] + ordered[mid]) / 2
    else:
        median = ordered[mid]

    return Summary(min=lowest, max=highest, mean=total / count, median=median, sum=total, count=count)


def combinations(items: Sequence[T], k: int) -> List[List[T]]:
    """Return every ``k``-combination of ``items`` in lexicographic index order."""

    n = len(items)
    if k <= 0:
        return [[]]
    if k > n:
        return []

    result: List[List[T]] = []
    indices = list(range(k))
    while True:
        result.append([items[index] for index in indices])

        # Rightmost index that can still move forward.
        i = k - 1
        while i >= 0 and indices[i] == n - k + i:
            i -= 1
        if i < 0:
            break

        indices[i] += 1
        for j in range(i + 1, k):
            indices[j] = indices[j - 1] + 1
    return result


def permutations(items: Sequence[T]) -> List[List[T]]:
    """Return all orderings of ``items`` using Heap's algorithm (identity first)."""

    arr = list(items)
    counters = [0] * len(arr)
    result: List[List[T]] = [arr[:]]
    i = 0
    while i < len(arr):
        if counters[i] < i:
            if i % 2 == 0:
                arr[0], arr[i] = arr[i], arr[0]
            else:
                arr[counters[i]], arr[i] = arr[i], arr[counters[i]]
            result.append(arr[:])
            counters[i] += 1
            i = 0
        else:
            counters[i] = 0
            i += 1
    return result
