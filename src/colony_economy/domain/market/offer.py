"""Offer value object and distance-aware pricing helpers"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from ..shared.exceptions import InvalidOfferError
from ..shared.value_objects import Position, manhattan_distance

# Credits charged per tile per unit hauled
HAULING_COST_PER_TILE = 0.01


class OfferType(Enum):
    """Side of an offer"""
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Offer:
    """
    Offer value object

    A corp's standing willingness to buy or sell a quantity of a resource
    for one planning cycle. Offers are regenerated every cycle.
    """
    offer_id: str
    corp_id: str
    offer_type: OfferType
    resource: str                      # e.g. "energy", "work-ticks", "rcl-progress"
    quantity: float
    price: float                       # For sells: cost + margin
    duration: int                      # Ticks the offer stays valid
    location: Optional[Position] = None

    def __post_init__(self):
        if self.quantity < 0:
            raise InvalidOfferError(f"Offer {self.offer_id} has negative quantity {self.quantity}")
        if self.price < 0:
            raise InvalidOfferError(f"Offer {self.offer_id} has negative price {self.price}")
        if self.duration < 0:
            raise InvalidOfferError(f"Offer {self.offer_id} has negative duration {self.duration}")

    @property
    def is_sell(self) -> bool:
        return self.offer_type is OfferType.SELL

    @property
    def is_buy(self) -> bool:
        return self.offer_type is OfferType.BUY


def per_tick(offer: Offer) -> float:
    """Quantity delivered per tick over the offer's duration"""
    if offer.duration <= 0:
        return 0
    return offer.quantity / offer.duration


def unit_price(offer: Offer) -> float:
    """Price per unit of the offered quantity"""
    if offer.quantity <= 0:
        return 0
    return offer.price / offer.quantity


def effective_price(
    offer: Offer,
    buyer_location: Position,
    hauling_cost_per_tile: float = HAULING_COST_PER_TILE
) -> float:
    """
    Offer price plus the cost of hauling it to the buyer.

    effective = price + distance * hauling_cost_per_tile * quantity

    Offers without a location are priced as-is. Unreachable locations
    (unparseable rooms) yield math.inf.
    """
    if offer.location is None:
        return offer.price

    distance = manhattan_distance(offer.location, buyer_location)
    if distance == math.inf:
        return math.inf

    return offer.price + distance * hauling_cost_per_tile * offer.quantity


def can_match(buy_offer: Offer, sell_offer: Offer) -> bool:
    """True when the offers are opposite sides of the same resource"""
    return (
        buy_offer.is_buy
        and sell_offer.is_sell
        and buy_offer.resource == sell_offer.resource
    )


def create_offer_id(corp_id: str, resource: str, tick: int) -> str:
    return f"{corp_id}-{resource}-{tick}"


def sort_by_effective_price(
    offers: Iterable[Offer],
    buyer_location: Position,
    hauling_cost_per_tile: float = HAULING_COST_PER_TILE
) -> List[Offer]:
    """Cheapest-first copy of the offers; ties keep their original order"""
    return sorted(
        offers,
        key=lambda o: effective_price(o, buyer_location, hauling_cost_per_tile)
    )
