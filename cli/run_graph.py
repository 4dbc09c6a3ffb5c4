"""Command-line entry point for headless graph analysis runs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence

# Allow running from a checkout without installing the package.
PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.append(str(PROJECT_SRC))

from algokit.core.algorithms import summarize
from algokit.core.errors import AlgorithmError
from algokit.core.graph_analysis import bfs, dfs, topological_sort
from algokit.core.routing import dijkstra
from algokit.io.exporters import export_csv
from algokit.io.importers import GraphSpec, load_graph


logger = logging.getLogger("algokit.cli")

ALGORITHMS = ("bfs", "dfs", "topo", "dijkstra", "summary")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a graph algorithm over a JSON graph file")
    parser.add_argument("graph", type=Path, help="Path to graph JSON")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default="bfs", help="Algorithm to run")
    parser.add_argument("--start", help="Start node (required for bfs, dfs and dijkstra)")
    parser.add_argument("--output", type=Path, help="Optional CSV file for the result rows")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def run(spec: GraphSpec, algorithm: str, start: str | None) -> tuple[Any, List[Dict[str, Any]]]:
    """Run ``algorithm`` and return ``(json_result, csv_rows)``."""

    if algorithm in ("bfs", "dfs", "dijkstra") and start is None:
        raise ValueError(f"--start is required for {algorithm}")

    if algorithm == "bfs" or algorithm == "dfs":
        traverse = bfs if algorithm == "bfs" else dfs
        order = traverse(spec.adjacency(), start)
        return order, [{"order": idx, "node": node} for idx, node in enumerate(order)]
    if algorithm == "topo":
        order = topological_sort(spec.nodes, spec.edge_pairs())
        return order, [{"order": idx, "node": node} for idx, node in enumerate(order)]
    if algorithm == "dijkstra":
        distances = dijkstra(spec.weighted_adjacency(), start)
        return distances, [{"node": node, "distance": dist} for node, dist in distances.items()]

    summary = summarize(edge.weight for edge in spec.edges).as_dict()
    return summary, [summary]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the algorithm and print the JSON result."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        spec = load_graph(args.graph)
        result, rows = run(spec, args.algorithm, args.start)
    except (AlgorithmError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        export_csv(args.output, rows)
        logger.info("Wrote %d rows to %s", len(rows), args.output)

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
