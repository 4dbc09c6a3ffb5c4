"""Shortest-path distances over weighted adjacency mappings."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Mapping, Tuple, TypeVar

from algokit.core.structures import PriorityQueue


N = TypeVar("N", bound=Hashable)


def _by_distance(a: Tuple[N, float], b: Tuple[N, float]) -> int:
    return (a[1] > b[1]) - (a[1] < b[1])


def dijkstra(graph: Mapping[N, Iterable[Tuple[N, float]]], start: N) -> Dict[N, float]:
    """Return the shortest distance from ``start`` to every reachable node.

    Unreachable nodes are left out of the result rather than mapped to
    infinity. Edge weights must be non-negative; this is not checked.

    Instead of a decrease-key operation, an improved distance is pushed as a new
    queue entry and outdated entries are skipped when they surface.
    """

    distances: Dict[N, float] = {start: 0}
    pq: PriorityQueue[Tuple[N, float]] = PriorityQueue(_by_distance)
    pq.push((start, 0))

    while pq.size > 0:
        node, dist = pq.pop()
        if dist > distances.get(node, float("inf")):
            continue
        for nbr, weight in graph.get(node, ()):
            candidate = dist + weight
            if candidate < distances.get(nbr, float("inf")):
                distances[nbr] = candidate
                pq.push((nbr, candidate))

    return distances
