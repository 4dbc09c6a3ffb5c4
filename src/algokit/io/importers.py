"""Graph document loading and validation utilities."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import networkx as nx

from algokit.core.errors import GraphFormatError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeSpec:
    """A weighted edge between two node ids."""

    source: str
    target: str
    weight: float = 1.0
    metadata: Dict[str, Any] | None = None


@dataclass
class GraphSpec:
    """Container for the nodes and edges read from a graph document."""

    nodes: List[str]
    edges: List[EdgeSpec]
    directed: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)

    def edge_pairs(self) -> List[Tuple[str, str]]:
        pairs = [(edge.source, edge.target) for edge in self.edges]
        if not self.directed:
            pairs.extend((edge.target, edge.source) for edge in self.edges)
        return pairs

    def adjacency(self) -> Dict[str, List[str]]:
        """Neighbour lists in edge order; undirected edges appear both ways."""

        adj: Dict[str, List[str]] = {node: [] for node in self.nodes}
        for source, target in self.edge_pairs():
            adj[source].append(target)
        return adj

    def weighted_adjacency(self) -> Dict[str, List[Tuple[str, float]]]:
        adj: Dict[str, List[Tuple[str, float]]] = {node: [] for node in self.nodes}
        for edge in self.edges:
            adj[edge.source].append((edge.target, edge.weight))
            if not self.directed:
                adj[edge.target].append((edge.source, edge.weight))
        return adj

    def to_networkx(self) -> nx.Graph:
        """Convert the document into a NetworkX graph with ``weight`` attributes."""

        graph = nx.DiGraph() if self.directed else nx.Graph()
        graph.add_nodes_from(self.nodes)
        for edge in self.edges:
            graph.add_edge(edge.source, edge.target, weight=edge.weight, metadata=edge.metadata or {})
        return graph


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file into a Python dictionary."""

    return json.loads(Path(path).read_text(encoding="utf-8"))


def load_graph(path: Path) -> GraphSpec:
    """Load a graph JSON file and return a validated GraphSpec.

    Expected shape::

        {"directed": true, "nodes": ["a", "b"], "edges": [{"from": "a", "to": "b", "weight": 2.0}]}
    """

    data = load_json(path)
    missing = {"nodes", "edges"}.difference(data)
    if missing:
        raise GraphFormatError(f"Graph file missing keys: {', '.join(sorted(missing))}")

    try:
        edges = [
            EdgeSpec(
                source=str(item["from"]),
                target=str(item["to"]),
                weight=float(item.get("weight", 1.0)),
                metadata={k: v for k, v in item.items() if k not in {"from", "to", "weight"}},
            )
            for item in data["edges"]
        ]
    except (KeyError, TypeError, ValueError) as exc:
        raise GraphFormatError(f"Malformed edge entry: {exc}") from exc

    spec = GraphSpec(
        nodes=[str(node) for node in data["nodes"]],
        edges=edges,
        directed=bool(data.get("directed", True)),
        metadata={k: v for k, v in data.items() if k not in {"nodes", "edges", "directed"}},
    )
    validate_graph(spec)
    logger.debug("Loaded graph %s: %d nodes, %d edges", path, len(spec.nodes), len(spec.edges))
    return spec


def validate_graph(spec: GraphSpec) -> None:
    """Validate the integrity of a graph document."""

    node_ids = set(spec.nodes)
    if not node_ids:
        raise GraphFormatError("Graph must contain at least one node")
    if len(node_ids) != len(spec.nodes):
        raise GraphFormatError("Duplicate node IDs detected in graph")

    for edge in spec.edges:
        if edge.source not in node_ids or edge.target not in node_ids:
            raise GraphFormatError(f"Edge {edge.source}->{edge.target} references unknown nodes")
        if not math.isfinite(edge.weight) or edge.weight < 0:
            raise GraphFormatError(
                f"Edge {edge.source}->{edge.target} must have a finite, non-negative weight"
            )
