"""Market domain - offers, offer aggregation and cost-plus pricing"""

from .offer import (
    Offer,
    OfferType,
    HAULING_COST_PER_TILE,
    per_tick,
    unit_price,
    effective_price,
    can_match,
    create_offer_id,
    sort_by_effective_price,
)
from .offer_collector import OfferCollector, OfferStats, ResourceStat
from .pricing import calculate_margin, calculate_price, calculate_roi

__all__ = [
    'Offer',
    'OfferType',
    'HAULING_COST_PER_TILE',
    'per_tick',
    'unit_price',
    'effective_price',
    'can_match',
    'create_offer_id',
    'sort_by_effective_price',
    'OfferCollector',
    'OfferStats',
    'ResourceStat',
    'calculate_margin',
    'calculate_price',
    'calculate_roi',
]
