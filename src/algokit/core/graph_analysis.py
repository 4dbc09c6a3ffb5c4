"""Graph traversal and ordering over plain adjacency mappings.

Graphs are ``Mapping[node, Iterable[node]]``. A node that is not a key simply
has no outgoing edges. The traversals here are written "from scratch"; NetworkX
graphs can be converted with :func:`adjacency_from_networkx` and
:func:`weighted_adjacency_from_networkx`.

Features:
- Breadth-first and depth-first visitation order
- Topological ordering via Kahn's algorithm with cycle detection
- Adjacency extraction from NetworkX graphs
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Hashable, Iterable, Iterator, List, Mapping, Set, Tuple, TypeVar

import networkx as nx

from algokit.core.errors import CycleError


N = TypeVar("N", bound=Hashable)

Adjacency = Mapping[N, Iterable[N]]
WeightedAdjacency = Mapping[N, Iterable[Tuple[N, float]]]

_EXHAUSTED = object()


def bfs(graph: Adjacency, start: N) -> List[N]:
    """Return nodes reachable from ``start`` in breadth-first order."""

    visited: Set[N] = set()
    order: List[N] = []
    q: deque[N] = deque([start])

    while q:
        node = q.popleft()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for nbr in graph.get(node, ()):
            if nbr not in visited:
                q.append(nbr)

    return order


def dfs(graph: Adjacency, start: N) -> List[N]:
    """Return nodes reachable from ``start`` in depth-first preorder.

    Each neighbour is explored completely before its next sibling, exactly as a
    recursive DFS would, but the pending work lives on an explicit stack of
    neighbour iterators so deep graphs do not hit the recursion limit.
    """

    visited: Set[N] = {start}
    order: List[N] = [start]
    stack: List[Iterator[N]] = [iter(graph.get(start, ()))]

    while stack:
        nbr = next(stack[-1], _EXHAUSTED)
        if nbr is _EXHAUSTED:
            stack.pop()
            continue
        if nbr in visited:
            continue
        visited.add(nbr)
        order.append(nbr)
        stack.append(iter(graph.get(nbr, ())))

    return order


def topological_sort(nodes: Iterable[N], edges: Iterable[Tuple[N, N]]) -> List[N]:
    """Order nodes so every edge points forward, using Kahn's algorithm.

    Nodes mentioned only in ``edges`` are included. Repeated edges count once.
    Ready nodes are emitted first-in first-out, so the result is deterministic
    for a given insertion order.

    Raises:
        CycleError: If the graph contains a cycle.
    """

    successors: Dict[N, Dict[N, None]] = {}
    in_degree: Dict[N, int] = {}

    def register(node: N) -> None:
        if node not in successors:
            successors[node] = {}
            in_degree[node] = 0

    for node in nodes:
        register(node)
    for src, dst in edges:
        register(src)
        register(dst)
        if dst not in successors[src]:
            successors[src][dst] = None
            in_degree[dst] += 1

    q: deque[N] = deque(node for node, degree in in_degree.items() if degree == 0)
    order: List[N] = []

    while q:
        node = q.popleft()
        order.append(node)
        for nbr in successors[node]:
            in_degree[nbr] -= 1
            if in_degree[nbr] == 0:
                q.append(nbr)

    if len(order) != len(successors):
        emitted = set(order)
        raise CycleError([node for node in successors if node not in emitted])
    return order


def adjacency_from_networkx(graph: nx.Graph) -> Dict[N, List[N]]:
    """Return the adjacency lists of a NetworkX graph (successors if directed)."""

    return {node: list(graph.adj[node]) for node in graph.nodes}


def weighted_adjacency_from_networkx(
    graph: nx.Graph,
    *,
    weight: str = "weight",
    default: float = 1.0,
) -> Dict[N, List[Tuple[N, float]]]:
    """Return ``(neighbour, weight)`` lists read from an edge attribute.

    Args:
        graph: Any NetworkX graph.
        weight: Edge attribute holding the weight.
        default: Weight used for edges without the attribute.
    """

    return {
        node: [(nbr, float(data.get(weight, default))) for nbr, data in graph.adj[node].items()]
        for node in graph.nodes
    }
