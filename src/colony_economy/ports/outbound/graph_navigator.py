import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

# Edge kinds
ECONOMIC_EDGE = "economic"
SPATIAL_EDGE = "spatial"

# Distance reported for disconnected or unknown nodes
UNREACHABLE = math.inf

EDGE_DELIMITER = "|"


@dataclass(frozen=True)
class WeightedEdge:
    """Edge key ("nodeA|nodeB") and its weight"""
    edge: str
    weight: float


def create_edge_key(node_id_1: str, node_id_2: str) -> str:
    """Canonical edge key; node IDs are sorted so both directions agree"""
    return EDGE_DELIMITER.join(sorted((node_id_1, node_id_2)))


def parse_edge_key(edge_key: str) -> Tuple[str, str]:
    first, _, second = edge_key.partition(EDGE_DELIMITER)
    return first, second


class IGraphNavigator(ABC):
    """Port for weighted node-graph queries"""

    @abstractmethod
    def get_edges(self, kind: str) -> List[WeightedEdge]:
        """
        All edges of a kind

        Args:
            kind: Edge kind (e.g. "economic")

        Returns:
            List of WeightedEdge with keys in "nodeA|nodeB" form
        """
        pass

    @abstractmethod
    def get_distance(self, node_a: str, node_b: str, kind: str) -> float:
        """
        Shortest weighted path cost between two nodes over edges of a kind

        Returns:
            Path cost, or UNREACHABLE when either node is unknown or the
            nodes are not connected
        """
        pass
