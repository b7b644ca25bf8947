from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence

from frontier import Frontier

if TYPE_CHECKING:
    from graph import Node


@dataclass
class NodeInfo:
    """Distance of a node from the source and its backpointer on a shortest known path."""

    distance: float
    predecessor: Optional[Node] = None

    def __str__(self) -> str:
        predecessor = "-" if self.predecessor is None else self.predecessor.name
        return f"dist {self.distance:g}, bkptr {predecessor}"


class SharedPath(list):
    """A path list that other threads may mutate while holding ``lock``."""

    def __init__(self, nodes: Sequence[Node] = ()) -> None:
        super().__init__(nodes)
        self.lock = threading.RLock()


class PathSearch:
    """Label-setting (Dijkstra) search from ``source`` that stops once ``destination`` is settled.

    ``table`` holds a NodeInfo for every discovered node; a node still in the
    frontier is not settled yet. Each call to :meth:`step` settles exactly one
    node, which lets a caller interleave other work or stop early. After every
    step the following hold:

    * every settled node's distance is its true shortest distance from the source;
    * every frontier node's distance is the shortest over paths whose interior
      nodes are all settled;
    * every edge leaving the settled set ends in the frontier.

    So the frontier node with the smallest distance is always the next one to
    settle. Edge weights must be non-negative; this is not checked here.
    """

    def __init__(self, source: Node, destination: Node) -> None:
        self.source = source
        self.destination = destination
        self.frontier: Frontier[Node] = Frontier()
        self.table: Dict[Node, NodeInfo] = {source: NodeInfo(0.0)}
        self.frontier.add(source, 0.0)
        self.found = False

    @property
    def done(self) -> bool:
        return self.found or not self.frontier

    def is_settled(self, node: Node) -> bool:
        return node in self.table and node not in self.frontier

    def distance(self, node: Node) -> Optional[float]:
        info = self.table.get(node)
        return None if info is None else info.distance

    def step(self) -> Node:
        """Settle the closest frontier node, relax its edges and return it."""
        if self.found:
            raise RuntimeError("Search already reached its destination.")
        f = self.frontier.poll()
        if f is self.destination:
            self.found = True
            return f

        f_distance = self.table[f].distance
        for edge in f.exits:
            w = edge.get_other(f)
            dw = f_distance + edge.length
            info = self.table.get(w)
            if info is None:
                self.table[w] = NodeInfo(dw, f)
                self.frontier.add(w, dw)
            elif dw < info.distance:
                # A strictly shorter path can only reach a frontier node.
                info.distance = dw
                info.predecessor = f
                self.frontier.update_priority(w, dw)
        return f

    def __iter__(self) -> Iterator[Node]:
        while not self.done:
            yield self.step()

    def run(self) -> List[Node]:
        for _ in self:
            pass
        return self.path()

    def path(self) -> List[Node]:
        """Path to the destination, or [] if it has not been reached."""
        if not self.found:
            return []
        return get_path(self.table, self.destination)


def shortest(source: Node, destination: Node) -> List[Node]:
    """Return the shortest path from source to destination, or [] if none exists.

    The result is a new list, so ``[]`` always means unreachable and a
    non-empty result starts at ``source``.
    """
    return PathSearch(source, destination).run()


def get_path(table: Dict[Node, NodeInfo], end: Node) -> List[Node]:
    """Walk backpointers from ``end`` to the source; every node on the way must be in ``table``."""
    path: List[Node] = []
    node: Optional[Node] = end
    while node is not None:
        path.append(node)
        node = table[node].predecessor
    path.reverse()
    return path


def path_sum(path: Sequence[Node]) -> float:
    """Return the sum of the edge weights along ``path``.

    A single node is a path of length 0. Raises ValueError for an empty path
    or when two consecutive nodes are not joined by an edge.
    """
    lock = getattr(path, "lock", None)
    with lock if lock is not None else nullcontext():
        nodes = list(path)

    if not nodes:
        raise ValueError("Cannot sum an empty path.")

    total = 0.0
    for u, v in zip(nodes[:-1], nodes[1:]):
        total += u.get_edge(v).length
    return total
