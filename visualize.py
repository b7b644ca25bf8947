from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import yaml

from graph import Graph
from main import load_config, load_graph_config


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.names)
    for edge in graph.edges:
        g.add_edge(edge.origin.name, edge.target.name, cost=edge.cost)
    return g


def compute_layout(graph: nx.Graph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def draw_static_figure(
    graph: Graph,
    path: Sequence[str],
    output: Path | None = None,
    show: bool = True,
) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    path_edges = route_edges(path)
    if path_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=path_edges,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_path = set(path)
    node_colors = [
        "#d62728" if node in on_path else "#9ecae1" for node in graph_nx.nodes
    ]
    nx.draw_networkx_nodes(
        graph_nx,
        layout,
        node_color=node_colors,
        node_size=600,
        ax=ax,
    )
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    edge_labels = {(u, v): f"{data['cost']:g}" for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    if path:
        summary_lines = [
            f"Route: {' -> '.join(path)}",
            f"Total cost: {graph.path_cost(path):g}",
            f"Edges: {len(path) - 1}",
        ]
    else:
        summary_lines = ["No path"]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Shortest Path Overview")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Visualise a graph instance and the shortest path through it."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("graph_instance.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and path.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        nodes, edges = load_graph_config(config)
        graph = Graph(nodes, edges)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Invalid instance {args.config}: {exc}", file=sys.stderr)
        return 2

    query = config.get("query") or {}
    if not isinstance(query, dict) or query.get("source") is None or query.get("destination") is None:
        print("The instance 'query' needs both a source and a destination.", file=sys.stderr)
        return 2

    try:
        _, path = graph.shortest_path(str(query["source"]), str(query["destination"]))
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return 2
    except ValueError:
        path = []

    draw_static_figure(graph, path, output=args.static_out, show=not args.no_show)
    return 0


if __name__ == "__main__":
    sys.exit(main())
