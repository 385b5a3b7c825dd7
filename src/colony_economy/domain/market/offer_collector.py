"""Per-cycle offer aggregation keyed by resource"""
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List

from ..shared.value_objects import Position
from .offer import HAULING_COST_PER_TILE, Offer, sort_by_effective_price

if TYPE_CHECKING:
    from ...ports.outbound.economic_actor import IEconomicActor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceStat:
    """Offer counts and volumes for one resource"""
    sell_count: int
    buy_count: int
    sell_quantity: float
    buy_quantity: float


@dataclass(frozen=True)
class OfferStats:
    """Snapshot statistics over everything collected this cycle"""
    total_offers: int
    sell_offers: int
    buy_offers: int
    resource_count: int
    resources: Dict[str, ResourceStat] = field(default_factory=dict)


class OfferCollector:
    """
    Aggregates buy and sell offers for one planning cycle.

    Each cycle:
    1. Corps post their offers (sells() and buys())
    2. collect() indexes them by resource
    3. ChainPlanner queries the indices while tracing chains
    4. The next collect() discards everything from the previous cycle

    The indices are never mutated during a planning pass.
    """

    def __init__(self, hauling_cost_per_tile: float = HAULING_COST_PER_TILE):
        self._hauling_cost_per_tile = hauling_cost_per_tile
        self._sell_offers: Dict[str, List[Offer]] = defaultdict(list)
        self._buy_offers: Dict[str, List[Offer]] = defaultdict(list)
        self._all_offers: List[Offer] = []

    @property
    def hauling_cost_per_tile(self) -> float:
        return self._hauling_cost_per_tile

    def collect(self, offers: Iterable[Offer]) -> None:
        """Replace the current snapshot with the given offers"""
        self.clear()
        for offer in offers:
            self.add_offer(offer)
        self._log_summary()

    def collect_from_corps(self, corps: Iterable["IEconomicActor"]) -> None:
        """Replace the current snapshot with every offer posted by the corps"""
        self.clear()
        for corp in corps:
            for offer in corp.sells():
                self.add_offer(offer)
            for offer in corp.buys():
                self.add_offer(offer)
        self._log_summary()

    def add_offer(self, offer: Offer) -> None:
        self._all_offers.append(offer)
        if offer.is_sell:
            self._sell_offers[offer.resource].append(offer)
        else:
            self._buy_offers[offer.resource].append(offer)

    def get_sell_offers(self, resource: str) -> List[Offer]:
        return list(self._sell_offers.get(resource, ()))

    def get_buy_offers(self, resource: str) -> List[Offer]:
        return list(self._buy_offers.get(resource, ()))

    def get_cheapest_sell_offers(self, resource: str, buyer_location: Position) -> List[Offer]:
        """
        Sell offers for a resource, cheapest effective price first.

        Effective price adds hauling from the offer's location to the
        buyer: price + distance * hauling_cost_per_tile * quantity.
        """
        return sort_by_effective_price(
            self._sell_offers.get(resource, ()),
            buyer_location,
            self._hauling_cost_per_tile
        )

    def get_all_offers(self) -> List[Offer]:
        return list(self._all_offers)

    def get_available_resources(self) -> List[str]:
        """Resources with at least one sell offer"""
        return [r for r, offers in self._sell_offers.items() if offers]

    def get_requested_resources(self) -> List[str]:
        """Resources with at least one buy offer"""
        return [r for r, offers in self._buy_offers.items() if offers]

    def get_total_sell_quantity(self, resource: str) -> float:
        return sum(o.quantity for o in self._sell_offers.get(resource, ()))

    def get_total_buy_quantity(self, resource: str) -> float:
        return sum(o.quantity for o in self._buy_offers.get(resource, ()))

    def has_sell_offers(self, resource: str) -> bool:
        return bool(self._sell_offers.get(resource))

    def has_buy_offers(self, resource: str) -> bool:
        return bool(self._buy_offers.get(resource))

    def get_corp_offers(self, corp_id: str) -> List[Offer]:
        return [o for o in self._all_offers if o.corp_id == corp_id]

    def get_stats(self) -> OfferStats:
        resources = set(self.get_available_resources()) | set(self.get_requested_resources())

        resource_stats = {
            resource: ResourceStat(
                sell_count=len(self._sell_offers.get(resource, ())),
                buy_count=len(self._buy_offers.get(resource, ())),
                sell_quantity=self.get_total_sell_quantity(resource),
                buy_quantity=self.get_total_buy_quantity(resource)
            )
            for resource in sorted(resources)
        }

        return OfferStats(
            total_offers=len(self._all_offers),
            sell_offers=sum(len(offers) for offers in self._sell_offers.values()),
            buy_offers=sum(len(offers) for offers in self._buy_offers.values()),
            resource_count=len(resources),
            resources=resource_stats
        )

    def clear(self) -> None:
        self._sell_offers.clear()
        self._buy_offers.clear()
        self._all_offers = []

    def _log_summary(self) -> None:
        sell_count = sum(len(offers) for offers in self._sell_offers.values())
        logger.debug(
            f"Collected {len(self._all_offers)} offers "
            f"({sell_count} sell, {len(self._all_offers) - sell_count} buy)"
        )
