from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from shortest_path import path_sum, shortest


@dataclass(eq=False)
class Node:
    """A named vertex; equality and hashing follow object identity."""

    name: str
    exits: List[Edge] = field(default_factory=list, repr=False)

    def get_edge(self, other: Node) -> Edge:
        """Return the edge joining this node to ``other``."""
        for edge in self.exits:
            if edge.get_other(self) is other:
                return edge
        raise ValueError(f"Edge {self.name}-{other.name} not present in graph.")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Edge:
    origin: Node
    target: Node
    cost: float

    @property
    def length(self) -> float:
        return self.cost

    def get_other(self, node: Node) -> Node:
        if node is self.origin:
            return self.target
        if node is self.target:
            return self.origin
        raise ValueError(f"{node.name} is not an endpoint of {self}.")

    def __str__(self) -> str:
        return f"{self.origin.name}-{self.target.name} ({self.cost:g})"


class Graph:
    """Undirected weighted graph built from node names and (origin, target, cost) triples."""

    def __init__(self, nodes: Iterable[str], edges: Iterable[Tuple[str, str, float]]) -> None:
        self._nodes: Dict[str, Node] = {}
        self.edges: List[Edge] = []

        for name in nodes:
            if name in self._nodes:
                raise ValueError(f"Duplicate node {name}.")
            self._nodes[name] = Node(name)

        for origin, target, cost in edges:
            self._add_edge(origin, target, float(cost))

    def _add_edge(self, origin: str, target: str, cost: float) -> None:
        for name in (origin, target):
            if name not in self._nodes:
                raise ValueError(f"Edge {origin}-{target} references unknown node {name}.")
        if origin == target:
            raise ValueError(f"Self loop on {origin} is not allowed.")
        # The search assumes non-negative weights and does not check them itself.
        if cost < 0:
            raise ValueError(f"Edge {origin}-{target} has negative cost {cost}.")

        edge = Edge(self._nodes[origin], self._nodes[target], cost)
        edge.origin.exits.append(edge)
        edge.target.exits.append(edge)
        self.edges.append(edge)

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def names(self) -> List[str]:
        return list(self._nodes)

    def node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise KeyError(f"Unknown node {name}.") from None

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def neighbors(self, name: str) -> List[Tuple[str, float]]:
        node = self.node(name)
        return [(edge.get_other(node).name, edge.cost) for edge in node.exits]

    def shortest_path(self, source: str, target: str) -> Tuple[float, List[str]]:
        """Recover both length and explicit path between source and target."""
        path = shortest(self.node(source), self.node(target))
        if not path:
            raise ValueError(f"No path between {source} and {target}.")
        return path_sum(path), [node.name for node in path]

    def path_cost(self, path: Sequence[str]) -> float:
        """Return the total cost of walking along the given node sequence."""
        return path_sum([self.node(name) for name in path])
