"""Priority queue and disjoint-set structures."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from algokit.core.comparators import Comparator, natural_order


T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class PriorityQueue(Generic[T]):
    """Binary min-heap ordered by an injected comparator.

    Equal elements are all kept. Only the root can be removed; ``pop`` and
    ``peek`` return ``None`` on an empty queue instead of raising.

    Example:
        >>> pq = PriorityQueue[int]()
        >>> pq.push_all([5, 1, 3])
        >>> [pq.pop(), pq.pop(), pq.pop(), pq.pop()]
        [1, 3, 5, None]
    """

    def __init__(self, comparator: Comparator[T] | None = None) -> None:
        self._heap: List[T] = []
        self._compare: Comparator[T] = natural_order if comparator is None else comparator

    @property
    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, value: T) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def push_all(self, values: Iterable[T]) -> None:
        for value in values:
            self.push(value)

    def pop(self) -> Optional[T]:
        """Remove and return the smallest element, or ``None`` when empty."""

        if not self._heap:
            return None
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Optional[T]:
        return self._heap[0] if self._heap else None

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(heap[index], heap[parent]) >= 0:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        length = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < length and self._compare(heap[left], heap[smallest]) < 0:
                smallest = left
            if right < length and self._compare(heap[right], heap[smallest]) < 0:
                smallest = right
            if smallest == index:
                break
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest


class UnionFind(Generic[K]):
    """
    Union-Find with full path compression and union by rank.

    Elements are lazily registered as singleton sets the first time they are
    seen, so no universe has to be declared up front.

    Example:
        >>> uf = UnionFind[int]()
        >>> uf.union(1, 2)
        >>> uf.union(2, 3)
        >>> uf.connected(1, 3)
        True
        >>> uf.connected(1, 4)
        False
    """

    def __init__(self) -> None:
        self._parent: Dict[K, K] = {}
        self._rank: Dict[K, int] = {}

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, element: K) -> K:
        """
        Return the representative (root) of the set containing ``element``.

        Every node on the walked path is repointed directly at the root.
        """
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0
            return element

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        current = element
        while self._parent[current] != root:
            next_node = self._parent[current]
            self._parent[current] = root
            current = next_node

        return root

    def union(self, a: K, b: K) -> None:
        """
        Merge the sets containing ``a`` and ``b``.

        The lower-rank root goes under the higher-rank one. On a tie ``b``'s
        root is attached under ``a``'s root, whose rank grows by one.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return

        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] = rank_a + 1

    def connected(self, a: K, b: K) -> bool:
        return self.find(a) == self.find(b)

    def rank(self, element: K) -> int:
        """Rank of ``element``'s root, an upper bound on that tree's height."""
        return self._rank[self.find(element)]

    def groups(self) -> Dict[K, Set[K]]:
        """Mapping from each set's representative to its members."""
        sets: Dict[K, Set[K]] = {}
        for element in list(self._parent):
            sets.setdefault(self.find(element), set()).add(element)
        return sets
