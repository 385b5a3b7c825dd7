"""
Unit tests for ChainPlanner behavior not covered by the feature files:
graph-mode reachability, depth limits, per-path cycle tracking, goal
discovery and feasibility helpers.
"""
import pytest

from colony_economy.adapters.secondary.navigation.node_navigator import NodeNavigator
from colony_economy.domain.colony.mint_values import create_mint_values
from colony_economy.domain.market.offer_collector import OfferCollector
from colony_economy.domain.planning.chain import get_corp_ids
from colony_economy.domain.planning.chain_planner import ChainGoal, can_build_chain
from colony_economy.domain.planning.distance import EconomicGraphDistance, InputRequirement
from colony_economy.domain.planning.registry import ActorRegistry
from colony_economy.domain.shared.value_objects import CorpType
from colony_economy.ports.outbound.graph_navigator import SPATIAL_EDGE
from tests.fixtures.corp_fixtures import HOME, StubCorp, build_planner


def _goal_corp(corp_id="upgrader", margin=0.0, quantity=1):
    return StubCorp(corp_id, CorpType.UPGRADING, margin).sell("rcl-progress", quantity)


class TestGraphModePlanning:
    """Planner given a navigator prices and filters by economic edges"""

    @pytest.fixture
    def corps(self):
        upgrader = _goal_corp().buy("energy", 100)
        miner = StubCorp("miner", margin=0).sell("energy", 100, price=10)
        remote = StubCorp("remote-miner", margin=0).sell("energy", 100, price=1)
        return {"core": [upgrader], "sources": [miner], "remote": [remote]}

    @pytest.fixture
    def navigator(self):
        navigator = NodeNavigator()
        navigator.add_edge("core", "sources", 5)
        # Reachable on foot but not part of the economy
        navigator.add_edge("core", "remote", 1, kind=SPATIAL_EDGE)
        return navigator

    def _planner(self, corps, navigator):
        all_corps = [corp for node_corps in corps.values() for corp in node_corps]
        return build_planner(all_corps, navigator=navigator, registry=ActorRegistry.from_nodes(corps))

    def test_uses_graph_strategy(self, corps, navigator):
        planner = self._planner(corps, navigator)
        assert isinstance(planner.distance_strategy, EconomicGraphDistance)

    def test_economically_disconnected_supplier_is_ignored(self, corps, navigator):
        """
        GIVEN: A cheaper miner reachable only by spatial edges
        WHEN: Viable chains are planned
        THEN: The economically connected miner supplies the chain
        """
        # Act
        chains = self._planner(corps, navigator).find_viable_chains(tick=7)

        # Assert
        assert len(chains) == 1
        assert get_corp_ids(chains[0]) == ["miner", "upgrader"]
        # 10 asking price + 5 path cost * 0.01 * 100 units
        assert chains[0].total_cost == pytest.approx(15)

    def test_disconnected_goal_corp_is_not_a_goal(self, corps, navigator):
        corps["island"] = [_goal_corp("hermit").buy("energy", 100)]

        goals = self._planner(corps, navigator).find_goals()

        assert [goal.corp_id for goal in goals] == ["upgrader"]

    def test_supplier_on_separate_economic_component_is_skipped(self, corps, navigator):
        """
        GIVEN: A cheaper miner on an economic island with no path to the buyer
        WHEN: Viable chains are planned
        THEN: The miner reachable over economic edges supplies the chain
        """
        # Arrange
        corps["isl-a"] = [StubCorp("islander", margin=0).sell("energy", 100, price=0.5)]
        navigator.add_edge("isl-a", "isl-b", 1)
        planner = self._planner(corps, navigator)

        # Act
        chains = planner.find_viable_chains(tick=3)

        # Assert
        assert planner.distance_strategy.is_connected("islander")
        assert len(chains) == 1
        assert get_corp_ids(chains[0]) == ["miner", "upgrader"]
        assert chains[0].total_cost == pytest.approx(15)

    def test_only_unreachable_supplier_yields_no_chain(self, navigator):
        """
        GIVEN: The only energy seller sits on an economic island
        WHEN: Viable chains are planned
        THEN: Its infinite hauling price rules it out and no chain is built
        """
        # Arrange
        navigator.add_edge("isl-a", "isl-b", 1)
        corps = {
            "core": [_goal_corp().buy("energy", 100)],
            "sources": [],
            "isl-a": [StubCorp("islander", margin=0).sell("energy", 100, price=0.5)],
        }
        planner = self._planner(corps, navigator)

        # Act
        candidates = planner.get_candidate_offers(
            InputRequirement("energy", 100, HOME, buyer_corp_id="upgrader")
        )
        chains = planner.find_viable_chains(tick=3)

        # Assert
        assert [offer.corp_id for offer in candidates] == ["islander"]
        assert chains == []

    def test_no_economic_edges_means_no_chains(self, corps):
        navigator = NodeNavigator(["core", "sources", "remote"])
        assert self._planner(corps, navigator).find_viable_chains(tick=1) == []


class TestSearchLimits:

    @pytest.fixture
    def deep_chain(self):
        """goal <- refiner <- smelter <- miner"""
        return [
            _goal_corp().buy("alloy", 10),
            StubCorp("refiner", CorpType.BUILDING, 0).buy("ingots", 10).sell("alloy", 10),
            StubCorp("smelter", CorpType.BUILDING, 0).buy("ore", 10).sell("ingots", 10),
            StubCorp("miner", margin=0).sell("ore", 10, price=3),
        ]

    def test_depth_limit_drops_deep_chains(self, deep_chain):
        assert build_planner(deep_chain, max_depth=2).find_viable_chains(tick=1) == []

    def test_chain_within_depth_limit(self, deep_chain):
        chains = build_planner(deep_chain, max_depth=3).find_viable_chains(tick=1)
        assert get_corp_ids(chains[0]) == ["miner", "smelter", "refiner", "upgrader"]

    def test_zero_depth_fails_immediately(self, deep_chain):
        planner = build_planner(deep_chain, max_depth=0)
        assert planner.trace_input(InputRequirement("ore", 10, HOME)) is None

    def test_sibling_branches_do_not_share_visited_corps(self):
        """
        GIVEN: A goal buying two resources from the same transformer
        WHEN: The chain is built
        THEN: Both inputs resolve through that transformer
        """
        # Arrange
        corps = [
            _goal_corp().buy("frames", 10).buy("panels", 10),
            StubCorp("workshop", CorpType.BUILDING, 0).buy("ore", 10)
                .sell("frames", 10).sell("panels", 10),
            StubCorp("miner", margin=0).sell("ore", 100, price=2),
        ]

        # Act
        chains = build_planner(corps).find_viable_chains(tick=1)

        # Assert
        assert get_corp_ids(chains[0]) == ["miner", "workshop", "miner", "workshop", "upgrader"]
        assert chains[0].total_cost == pytest.approx(4)

    def test_unregistered_supplier_is_skipped(self):
        upgrader = _goal_corp().buy("energy", 10)
        ghost = StubCorp("ghost", margin=0).sell("energy", 10, price=0)
        miner = StubCorp("miner", margin=0).sell("energy", 10, price=5)

        planner = build_planner([upgrader, ghost, miner], registry=ActorRegistry.from_corps([upgrader, miner]))

        chains = planner.find_viable_chains(tick=1)

        assert get_corp_ids(chains[0]) == ["miner", "upgrader"]


class TestGoalsAndEstimates:

    def test_goal_carries_mint_value_per_unit(self):
        mint_values = create_mint_values({"rcl_upgrade": 250})
        planner = build_planner([_goal_corp(quantity=4)], mint_values=mint_values)

        goals = planner.find_goals()

        assert len(goals) == 1
        assert goals[0].mint_value_per_unit == 250
        assert goals[0].quantity == 4
        assert goals[0].position == HOME

    def test_estimate_profit_without_bids(self):
        planner = build_planner([_goal_corp()])
        goal = ChainGoal("rcl-progress", "upgrader", "rcl-progress", 2, HOME, 1000)

        assert planner.estimate_profit(goal) == 2000

    def test_estimate_profit_subtracts_average_bid(self):
        bidders = [
            StubCorp("bidder-1").buy("rcl-progress", 1, price=100),
            StubCorp("bidder-2").buy("rcl-progress", 1, price=300),
        ]
        planner = build_planner([_goal_corp()] + bidders)
        goal = ChainGoal("rcl-progress", "upgrader", "rcl-progress", 1, HOME, 1000)

        assert planner.estimate_profit(goal) == 800

    def test_chain_ids_are_deterministic_per_tick(self):
        corps = [_goal_corp().buy("energy", 1), StubCorp("miner").sell("energy", 1)]

        first = build_planner(corps).find_viable_chains(tick=12)
        second = build_planner(corps).find_viable_chains(tick=12)

        assert [c.chain_id for c in first] == [c.chain_id for c in second] == ["chain-upgrader-12"]


class TestCanBuildChain:

    def test_goal_with_sellers(self):
        collector = OfferCollector()
        collector.collect_from_corps([_goal_corp()])
        assert can_build_chain("rcl-progress", collector)

    def test_goal_without_sellers(self):
        assert not can_build_chain("rcl-progress", OfferCollector())
