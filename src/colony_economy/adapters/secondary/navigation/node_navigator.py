"""
Weighted node-graph navigator.

Nodes are territory regions hosting corps; edges connect adjacent
regions and carry a kind ("spatial", "economic", ...) and a weight
(walking distance). Shortest paths use Dijkstra over the edges of one
kind.
"""
import heapq
import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ....ports.outbound.graph_navigator import (
    ECONOMIC_EDGE,
    EDGE_DELIMITER,
    IGraphNavigator,
    UNREACHABLE,
    WeightedEdge,
    create_edge_key,
    parse_edge_key,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Shortest path between two nodes"""
    path: Tuple[str, ...] = field(default_factory=tuple)  # Start to end, inclusive
    distance: float = UNREACHABLE
    found: bool = False


class NodeNavigator(IGraphNavigator):
    """In-memory IGraphNavigator over kinded, weighted, undirected edges"""

    def __init__(self, node_ids: Iterable[str] = ()):
        self._nodes: Set[str] = set(node_ids)
        # kind -> edge key -> weight
        self._weights: Dict[str, Dict[str, float]] = defaultdict(dict)
        # kind -> node -> neighbors
        self._adjacency: Dict[str, Dict[str, Set[str]]] = defaultdict(lambda: defaultdict(set))

    def add_node(self, node_id: str) -> None:
        self._nodes.add(node_id)

    def add_edge(self, node_a: str, node_b: str, weight: float, kind: str = ECONOMIC_EDGE) -> None:
        """
        Add or replace an undirected edge.

        Raises:
            ValueError: If the weight is negative, the edge is a self-loop or
                a node ID contains the edge-key delimiter
        """
        for node_id in (node_a, node_b):
            if EDGE_DELIMITER in node_id:
                raise ValueError(f"Node ID {node_id!r} contains {EDGE_DELIMITER!r}")
        if weight < 0:
            raise ValueError(f"Edge {node_a}|{node_b} has negative weight {weight}")
        if node_a == node_b:
            raise ValueError(f"Self-loop on node {node_a}")

        self._nodes.update((node_a, node_b))
        self._weights[kind][create_edge_key(node_a, node_b)] = weight
        self._adjacency[kind][node_a].add(node_b)
        self._adjacency[kind][node_b].add(node_a)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    @property
    def node_ids(self) -> List[str]:
        return sorted(self._nodes)

    def get_edges(self, kind: str) -> List[WeightedEdge]:
        return [
            WeightedEdge(edge=edge_key, weight=weight)
            for edge_key, weight in self._weights.get(kind, {}).items()
        ]

    def get_edge_weight(self, node_a: str, node_b: str, kind: str = ECONOMIC_EDGE) -> float:
        return self._weights.get(kind, {}).get(create_edge_key(node_a, node_b), UNREACHABLE)

    def find_path(self, start: str, goal: str, kind: str = ECONOMIC_EDGE) -> PathResult:
        """Dijkstra shortest path over edges of one kind"""
        if start not in self._nodes or goal not in self._nodes:
            return PathResult()

        if start == goal:
            return PathResult(path=(start,), distance=0, found=True)

        adjacency = self._adjacency.get(kind, {})
        distances: Dict[str, float] = {start: 0}
        previous: Dict[str, str] = {}
        visited: Set[str] = set()
        queue: List[Tuple[float, str]] = [(0, start)]

        while queue:
            distance, node = heapq.heappop(queue)
            if node in visited:
                continue
            visited.add(node)

            if node == goal:
                break

            for neighbor in adjacency.get(node, ()):
                if neighbor in visited:
                    continue
                candidate = distance + self.get_edge_weight(node, neighbor, kind)
                if candidate < distances.get(neighbor, math.inf):
                    distances[neighbor] = candidate
                    previous[neighbor] = node
                    heapq.heappush(queue, (candidate, neighbor))

        if goal not in distances:
            return PathResult()

        path = [goal]
        while path[-1] != start:
            path.append(previous[path[-1]])
        path.reverse()

        return PathResult(path=tuple(path), distance=distances[goal], found=True)

    def get_distance(self, node_a: str, node_b: str, kind: str = ECONOMIC_EDGE) -> float:
        return self.find_path(node_a, node_b, kind).distance

    def get_nodes_within_distance(
        self,
        start: str,
        max_distance: float,
        kind: str = ECONOMIC_EDGE
    ) -> Dict[str, float]:
        """Nodes reachable from start within max_distance, with their distances"""
        if start not in self._nodes:
            return {}

        adjacency = self._adjacency.get(kind, {})
        result: Dict[str, float] = {}
        queue: List[Tuple[float, str]] = [(0, start)]

        while queue:
            distance, node = heapq.heappop(queue)
            if node in result:
                continue
            if distance > max_distance:
                break
            result[node] = distance

            for neighbor in adjacency.get(node, ()):
                if neighbor not in result:
                    heapq.heappush(queue, (distance + self.get_edge_weight(node, neighbor, kind), neighbor))

        return result

    def find_closest(
        self,
        start: str,
        candidates: Iterable[str],
        kind: str = ECONOMIC_EDGE
    ) -> Optional[Tuple[str, float]]:
        """Closest candidate node to start, or None when none is reachable"""
        candidate_set = set(candidates)
        if start not in self._nodes or not candidate_set:
            return None

        reachable = self.get_nodes_within_distance(start, math.inf, kind)
        in_reach = [(distance, node) for node, distance in reachable.items() if node in candidate_set]
        if not in_reach:
            return None

        distance, node = min(in_reach)
        return node, distance

    def is_connected(self, kind: str = ECONOMIC_EDGE) -> bool:
        """Whether every node is reachable from every other over one edge kind"""
        if not self._nodes:
            return True
        start = next(iter(sorted(self._nodes)))
        return len(self.get_nodes_within_distance(start, math.inf, kind)) == len(self._nodes)

    def subgraph(self, node_ids: Iterable[str]) -> "NodeNavigator":
        """Navigator restricted to the given nodes and the edges between them"""
        keep = set(node_ids) & self._nodes
        sub = NodeNavigator(keep)
        for kind, weights in self._weights.items():
            for edge_key, weight in weights.items():
                node_a, node_b = parse_edge_key(edge_key)
                if node_a in keep and node_b in keep:
                    sub.add_edge(node_a, node_b, weight, kind)
        return sub

    def __repr__(self) -> str:
        edge_count = sum(len(w) for w in self._weights.values())
        return f"NodeNavigator(nodes={len(self._nodes)}, edges={edge_count})"
