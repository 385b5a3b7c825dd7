"""
Distance strategies used to price and order candidate suppliers.

Two implementations, selected once when the planner is built:
- PositionDistance: Manhattan distance between offer and buyer positions;
  every corp counts as reachable.
- EconomicGraphDistance: weighted path cost over "economic" edges of a
  node graph; corps outside the economic component are unreachable.
"""
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from ...ports.outbound.graph_navigator import (
    ECONOMIC_EDGE,
    IGraphNavigator,
    parse_edge_key,
)
from ..market.offer import HAULING_COST_PER_TILE, Offer, effective_price
from ..shared.value_objects import Position
from .registry import ActorRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputRequirement:
    """A quantity of a resource needed by a buyer at a location"""
    resource: str
    quantity: float
    location: Position
    buyer_corp_id: Optional[str] = None


class DistanceStrategy(ABC):
    """Capability for reachability, effective pricing and candidate ordering"""

    def __init__(self, hauling_cost_per_tile: float = HAULING_COST_PER_TILE):
        self._hauling_cost_per_tile = hauling_cost_per_tile

    @property
    def hauling_cost_per_tile(self) -> float:
        return self._hauling_cost_per_tile

    @abstractmethod
    def is_connected(self, corp_id: str) -> bool:
        """Whether a corp can take part in economic chains at all"""
        pass

    @abstractmethod
    def effective_price(self, offer: Offer, requirement: InputRequirement) -> float:
        """Offer price including hauling to the buyer; math.inf if unreachable"""
        pass

    def order_candidates(self, offers: Iterable[Offer], requirement: InputRequirement) -> List[Offer]:
        """
        Connected sell offers, cheapest effective price first.

        The sort is stable, so equally priced offers keep collector order.
        """
        connected = [o for o in offers if self.is_connected(o.corp_id)]
        return sorted(connected, key=lambda o: self.effective_price(o, requirement))


class PositionDistance(DistanceStrategy):
    """Prices hauling by Manhattan distance; all corps are reachable"""

    def is_connected(self, corp_id: str) -> bool:
        return True

    def effective_price(self, offer: Offer, requirement: InputRequirement) -> float:
        return effective_price(offer, requirement.location, self._hauling_cost_per_tile)


class EconomicGraphDistance(DistanceStrategy):
    """
    Prices hauling by weighted path cost over economic edges.

    A corp is economically connected only when its node touches at least
    one economic edge. Corps with unknown nodes, or nodes with no economic
    path between them, are unreachable.
    """

    def __init__(
        self,
        navigator: IGraphNavigator,
        registry: ActorRegistry,
        hauling_cost_per_tile: float = HAULING_COST_PER_TILE
    ):
        super().__init__(hauling_cost_per_tile)
        self._navigator = navigator
        self._registry = registry
        self._economic_node_ids = self._collect_economic_node_ids(navigator)
        logger.debug(f"Economic graph covers {len(self._economic_node_ids)} nodes")

    @staticmethod
    def _collect_economic_node_ids(navigator: IGraphNavigator) -> FrozenSet[str]:
        node_ids = set()
        for weighted_edge in navigator.get_edges(ECONOMIC_EDGE):
            node_ids.update(parse_edge_key(weighted_edge.edge))
        return frozenset(node_ids)

    @property
    def economic_node_ids(self) -> FrozenSet[str]:
        return self._economic_node_ids

    def is_connected(self, corp_id: str) -> bool:
        node_id = self._registry.node_of(corp_id)
        if node_id is None:
            return False
        return node_id in self._economic_node_ids

    def distance(self, from_corp_id: str, to_corp_id: str) -> float:
        """Economic path cost between the nodes hosting two corps"""
        from_node = self._registry.node_of(from_corp_id)
        to_node = self._registry.node_of(to_corp_id)
        if from_node is None or to_node is None:
            return math.inf
        return self._navigator.get_distance(from_node, to_node, ECONOMIC_EDGE)

    def effective_price(self, offer: Offer, requirement: InputRequirement) -> float:
        # Without a buyer corp there is no node to measure from
        if requirement.buyer_corp_id is None:
            return effective_price(offer, requirement.location, self._hauling_cost_per_tile)

        distance = self.distance(offer.corp_id, requirement.buyer_corp_id)
        if distance == math.inf:
            return math.inf
        return offer.price + distance * self._hauling_cost_per_tile * offer.quantity


def create_distance_strategy(
    registry: ActorRegistry,
    navigator: Optional[IGraphNavigator] = None,
    hauling_cost_per_tile: float = HAULING_COST_PER_TILE
) -> DistanceStrategy:
    """Graph strategy when a navigator is available, position strategy otherwise"""
    if navigator is None:
        return PositionDistance(hauling_cost_per_tile)
    return EconomicGraphDistance(navigator, registry, hauling_cost_per_tile)
