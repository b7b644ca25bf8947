from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml

from graph import Graph
from shortest_path import path_sum, shortest


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_graph_config(config: Dict) -> Tuple[List[str], List[Tuple[str, str, float]]]:
    """Validate the ``graph`` section and return its nodes and edge triples."""
    if not isinstance(config, dict) or "graph" not in config:
        raise ValueError("Instance is missing the 'graph' section.")
    graph_config = config["graph"]
    if not isinstance(graph_config, dict):
        raise ValueError("The 'graph' section must be a mapping with 'nodes' and 'edges'.")

    nodes = graph_config.get("nodes")
    if not nodes:
        raise ValueError("Instance graph declares no nodes.")
    if not isinstance(nodes, list):
        raise ValueError("Graph 'nodes' must be a list of names.")

    raw_edges = graph_config.get("edges") or []
    if not isinstance(raw_edges, list):
        raise ValueError("Graph 'edges' must be a list of [origin, target, cost] entries.")

    edges: List[Tuple[str, str, float]] = []
    for entry in raw_edges:
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise ValueError(f"Edge entry {entry} must be [origin, target, cost].")
        origin, target, cost = entry
        try:
            cost = float(cost)
        except (TypeError, ValueError):
            raise ValueError(f"Edge {origin}-{target} has non-numeric cost {cost!r}.") from None
        edges.append((str(origin), str(target), cost))

    return [str(node) for node in nodes], edges


def format_path(path: Sequence[str]) -> str:
    return " -> ".join(path)


def print_result(source: str, destination: str, path: List[str], cost: Optional[float]) -> None:
    print("=== Shortest Path ===")
    if not path:
        print(f"No path between {source} and {destination}.")
        return
    print(f"Route: {format_path(path)}")
    print(f"Total cost: {cost:.2f} ({len(path) - 1} edges)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the shortest path between two nodes of a weighted undirected graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("graph_instance.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument("--source", help="Start node (overrides query.source).")
    parser.add_argument("--destination", help="End node (overrides query.destination).")
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Draw the graph with the shortest path highlighted.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Save the visualisation to this file instead of showing it (implies --visualize).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        nodes, edges = load_graph_config(config)
        graph = Graph(nodes, edges)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Invalid instance {args.config}: {exc}", file=sys.stderr)
        return 2

    query = config.get("query") or {}
    if not isinstance(query, dict):
        print(f"Invalid instance {args.config}: 'query' must be a mapping.", file=sys.stderr)
        return 2
    source = args.source or query.get("source")
    destination = args.destination or query.get("destination")
    if source is None or destination is None:
        print("Both a source and a destination are required.", file=sys.stderr)
        return 2

    try:
        path = shortest(graph.node(str(source)), graph.node(str(destination)))
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return 2

    names = [node.name for node in path]
    cost = path_sum(path) if path else None
    print_result(str(source), str(destination), names, cost)

    if args.visualize or args.output is not None:
        from visualize import draw_static_figure

        draw_static_figure(graph, names, output=args.output, show=args.output is None)
        if args.output is not None:
            print(f"Visualisation stored at: {args.output}")

    return 0 if path else 1


if __name__ == "__main__":
    sys.exit(main())
