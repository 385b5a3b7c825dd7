"""
Test doubles for economic actors.

StubCorp is an in-memory IEconomicActor whose offers are built with
make_offer; every offer defaults to the corp's own position.
"""
from typing import List, Optional

from colony_economy.domain.market.offer import Offer, OfferType
from colony_economy.domain.shared.value_objects import CorpType, Position
from colony_economy.ports.outbound.economic_actor import IEconomicActor

HOME = Position(25, 25, "W1N1")


def make_offer(
    corp_id: str,
    offer_type: OfferType,
    resource: str,
    quantity: float = 100,
    price: float = 0,
    location: Optional[Position] = HOME,
    duration: int = 1
) -> Offer:
    return Offer(
        offer_id=f"{corp_id}-{resource}-{offer_type.value}",
        corp_id=corp_id,
        offer_type=offer_type,
        resource=resource,
        quantity=quantity,
        price=price,
        duration=duration,
        location=location
    )


class StubCorp(IEconomicActor):
    """In-memory corp for planner tests"""

    def __init__(
        self,
        corp_id: str,
        corp_type: CorpType = CorpType.MINING,
        margin: float = 0.1,
        position: Position = HOME
    ):
        self._corp_id = corp_id
        self._corp_type = corp_type
        self._margin = margin
        self._position = position
        self._sells: List[Offer] = []
        self._buys: List[Offer] = []

    @property
    def corp_id(self) -> str:
        return self._corp_id

    @property
    def corp_type(self) -> CorpType:
        return self._corp_type

    def sell(self, resource: str, quantity: float = 100, price: float = 0,
             location: Optional[Position] = None) -> "StubCorp":
        self._sells.append(make_offer(
            self._corp_id, OfferType.SELL, resource, quantity, price,
            location or self._position
        ))
        return self

    def buy(self, resource: str, quantity: float = 100, price: float = 0) -> "StubCorp":
        self._buys.append(make_offer(
            self._corp_id, OfferType.BUY, resource, quantity, price, self._position
        ))
        return self

    def sells(self) -> List[Offer]:
        return list(self._sells)

    def buys(self) -> List[Offer]:
        return list(self._buys)

    def get_position(self) -> Position:
        return self._position

    def get_margin(self) -> float:
        return self._margin


def build_planner(corps, mint_values=None, max_depth=10, navigator=None, registry=None):
    """Collector, registry and planner over a fixed set of corps"""
    from colony_economy.domain.colony.mint_values import DEFAULT_MINT_VALUES
    from colony_economy.domain.market.offer_collector import OfferCollector
    from colony_economy.domain.planning.chain_planner import ChainPlanner
    from colony_economy.domain.planning.registry import ActorRegistry

    collector = OfferCollector()
    collector.collect_from_corps(corps)
    return ChainPlanner(
        collector,
        mint_values or DEFAULT_MINT_VALUES,
        registry or ActorRegistry.from_corps(corps),
        max_depth=max_depth,
        navigator=navigator
    )
