"""Unit tests for the Offer value object and pricing helpers"""
import math

import pytest

from colony_economy.domain.market.offer import (
    Offer,
    OfferType,
    can_match,
    effective_price,
    per_tick,
    sort_by_effective_price,
    unit_price,
)
from colony_economy.domain.shared.exceptions import InvalidOfferError
from colony_economy.domain.shared.value_objects import Position
from tests.fixtures.corp_fixtures import HOME, make_offer


class TestOfferValidation:

    @pytest.mark.parametrize("field, value", [
        ("quantity", -1),
        ("price", -0.5),
        ("duration", -3),
    ])
    def test_negative_values_are_rejected(self, field, value):
        kwargs = dict(
            offer_id="o-1", corp_id="miner", offer_type=OfferType.SELL,
            resource="energy", quantity=10, price=5, duration=1
        )
        kwargs[field] = value

        with pytest.raises(InvalidOfferError):
            Offer(**kwargs)

    def test_offer_is_immutable(self):
        offer = make_offer("miner", OfferType.SELL, "energy")
        with pytest.raises(AttributeError):
            offer.price = 99

    def test_sides(self):
        sell = make_offer("miner", OfferType.SELL, "energy")
        buy = make_offer("upgrader", OfferType.BUY, "energy")

        assert sell.is_sell and not sell.is_buy
        assert buy.is_buy and not buy.is_sell
        assert can_match(buy, sell)
        assert not can_match(sell, buy)
        assert not can_match(make_offer("upgrader", OfferType.BUY, "minerals"), sell)


class TestOfferRates:

    def test_per_tick(self):
        assert per_tick(make_offer("miner", OfferType.SELL, "energy", quantity=300, duration=100)) == 3

    def test_per_tick_without_duration(self):
        assert per_tick(make_offer("miner", OfferType.SELL, "energy", duration=0)) == 0

    def test_unit_price(self):
        assert unit_price(make_offer("miner", OfferType.SELL, "energy", quantity=50, price=100)) == 2

    def test_unit_price_of_empty_offer(self):
        assert unit_price(make_offer("miner", OfferType.SELL, "energy", quantity=0, price=100)) == 0


class TestEffectivePrice:

    def test_adds_hauling_per_tile_and_unit(self):
        offer = make_offer("miner", OfferType.SELL, "energy", quantity=100, price=50,
                           location=Position(15, 25, "W1N1"))

        # 10 tiles * 0.01 per tile * 100 units
        assert effective_price(offer, HOME) == pytest.approx(60)

    def test_custom_hauling_rate(self):
        offer = make_offer("miner", OfferType.SELL, "energy", quantity=10, price=0,
                           location=Position(20, 25, "W1N1"))
        assert effective_price(offer, HOME, hauling_cost_per_tile=1) == pytest.approx(50)

    def test_offer_without_location_is_priced_as_is(self):
        offer = make_offer("miner", OfferType.SELL, "energy", price=42, location=None)
        assert effective_price(offer, HOME) == 42

    def test_unreachable_location(self):
        offer = make_offer("miner", OfferType.SELL, "energy", location=Position(0, 0, "sim"))
        assert effective_price(offer, HOME) == math.inf

    def test_sort_is_stable_for_equal_prices(self):
        first = make_offer("first", OfferType.SELL, "energy", price=10)
        second = make_offer("second", OfferType.SELL, "energy", price=10)
        cheap = make_offer("cheap", OfferType.SELL, "energy", price=5)

        ordered = sort_by_effective_price([first, second, cheap], HOME)

        assert [o.corp_id for o in ordered] == ["cheap", "first", "second"]
