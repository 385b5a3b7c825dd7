"""
Backward-chaining search for production chains.

The algorithm:
1. Find goal corps (sell offers for goal resources such as
   "rcl-progress") that mint credits
2. For each goal, trace the goal corp's buy offers backwards through the
   sell offers of other corps
3. At each level try suppliers cheapest effective price first,
   backtracking to the next supplier when one cannot be fully supplied
4. Accumulate cost with each corp's margin (cost-plus pricing)
5. Keep chains whose mint value exceeds their total cost, then pick a
   non-overlapping set that fits the budget

The search is greedy and depth-first: chains are price-greedy, not
globally optimal, and nothing is memoized between branches.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple

from ...ports.outbound.graph_navigator import IGraphNavigator
from ..colony.mint_values import MintValues, get_mint_value
from ..market.offer import Offer
from ..market.offer_collector import OfferCollector
from ..shared.value_objects import Position
from .chain import (
    Chain,
    ChainSegment,
    build_segment,
    create_chain,
    create_chain_id,
    filter_viable,
    select_non_overlapping,
    select_within_budget,
    sort_by_profit,
)
from .distance import DistanceStrategy, InputRequirement, create_distance_strategy
from .registry import ActorRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 10

# Goal resource -> mint-value achievement it is credited as
DEFAULT_GOAL_RESOURCES: Mapping[str, str] = {
    "rcl-progress": "rcl_upgrade",
}


@dataclass(frozen=True)
class ChainGoal:
    """An achievable objective that mints credits"""
    goal_type: str
    corp_id: str
    resource: str
    quantity: float
    position: Position
    mint_value_per_unit: float


@dataclass(frozen=True)
class TraceResult:
    """
    Segments supplying one requirement, leaf first.

    cost is what the buyer pays: the raw producer's asking price for a
    leaf supplier, or the supplier's cost-plus output price for a
    transformer, plus hauling to the buyer in both cases.
    """
    segments: Tuple[ChainSegment, ...]
    cost: float


class ChainPlanner:
    """
    Finds viable production chains by matching offers.

    One planner serves one planning cycle: the collector and registry
    are snapshots that are only read during the search.

    When a navigator is given, pricing uses economic edges:
    - Only corps in economically connected nodes are considered
    - Economic edge weights replace positional distance
    """

    def __init__(
        self,
        collector: OfferCollector,
        mint_values: MintValues,
        registry: ActorRegistry,
        max_depth: int = DEFAULT_MAX_DEPTH,
        navigator: Optional[IGraphNavigator] = None,
        goal_resources: Optional[Mapping[str, str]] = None,
        distance_strategy: Optional[DistanceStrategy] = None
    ):
        self._collector = collector
        self._mint_values = mint_values
        self._registry = registry
        self._max_depth = max_depth
        self._goal_resources: Dict[str, str] = dict(goal_resources or DEFAULT_GOAL_RESOURCES)
        self._distance = distance_strategy or create_distance_strategy(
            registry,
            navigator,
            collector.hauling_cost_per_tile
        )

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def distance_strategy(self) -> DistanceStrategy:
        return self._distance

    def find_viable_chains(self, tick: int) -> List[Chain]:
        """Chains with positive profit, highest profit first"""
        chains = []
        for goal in self.find_goals():
            chain = self.build_chain_for_goal(goal, tick)
            if chain is not None:
                chains.append(chain)

        viable = filter_viable(sort_by_profit(chains))
        logger.info(f"Tick {tick}: {len(viable)} viable of {len(chains)} built chains")
        return viable

    def find_best_chains(self, tick: int, budget: float) -> List[Chain]:
        """
        Non-overlapping viable chains whose summed cost fits the budget.

        Overlaps are removed by profit rank before the budget is applied,
        so a chain that loses a shared corp to a pricier chain stays out
        even if that pricier chain is later dropped for cost.
        """
        viable = self.find_viable_chains(tick)
        non_overlapping = select_non_overlapping(viable)
        affordable = select_within_budget(non_overlapping, budget)

        logger.info(
            f"Tick {tick}: selected {len(affordable)} chains "
            f"(cost {sum(c.total_cost for c in affordable):.2f} of budget {budget:.2f})"
        )
        return affordable

    def find_goals(self) -> List[ChainGoal]:
        """Goal offers from registered, economically connected corps"""
        goals = []

        for resource, achievement in self._goal_resources.items():
            for offer in self._collector.get_sell_offers(resource):
                corp = self._registry.get(offer.corp_id)
                if corp is None:
                    logger.debug(f"Goal offer {offer.offer_id} from unregistered corp {offer.corp_id}")
                    continue

                if not self._distance.is_connected(offer.corp_id):
                    logger.debug(f"Goal corp {offer.corp_id} is not economically connected")
                    continue

                goals.append(ChainGoal(
                    goal_type=resource,
                    corp_id=offer.corp_id,
                    resource=resource,
                    quantity=offer.quantity,
                    position=corp.get_position(),
                    mint_value_per_unit=get_mint_value(self._mint_values, achievement)
                ))

        return goals

    def build_chain_for_goal(self, goal: ChainGoal, tick: int) -> Optional[Chain]:
        """
        Build the complete chain for a goal, or None.

        Every input the goal corp buys must be resolved; one unresolved
        input drops the whole chain.
        """
        goal_corp = self._registry.get(goal.corp_id)
        if goal_corp is None:
            return None

        buy_offers = goal_corp.buys()
        if not buy_offers:
            logger.debug(f"Goal corp {goal.corp_id} declares no inputs")
            return None

        resolved = self._resolve_inputs(
            buy_offers,
            goal.position,
            goal.corp_id,
            depth=0,
            visited=frozenset({goal.corp_id})
        )
        if resolved is None:
            logger.debug(f"No supply chain for goal {goal.goal_type} at {goal.corp_id}")
            return None

        segments, total_input_cost = resolved
        goal_segment = build_segment(
            goal.corp_id,
            goal_corp.corp_type,
            goal.resource,
            goal.quantity,
            total_input_cost,
            goal_corp.get_margin()
        )

        mint_value = goal.mint_value_per_unit * goal.quantity
        return create_chain(
            create_chain_id(goal.corp_id, tick),
            segments + (goal_segment,),
            mint_value
        )

    def get_candidate_offers(self, requirement: InputRequirement) -> List[Offer]:
        """Sell offers for a requirement in the order the search tries them"""
        offers = self._collector.get_cheapest_sell_offers(
            requirement.resource,
            requirement.location
        )
        return self._distance.order_candidates(offers, requirement)

    def trace_input(
        self,
        requirement: InputRequirement,
        depth: int = 0,
        visited: FrozenSet[str] = frozenset()
    ) -> Optional[TraceResult]:
        """
        Trace one requirement back to raw producers.

        Args:
            requirement: Resource, quantity and buyer to supply
            depth: Current recursion depth
            visited: Corp IDs already on this path; never shared between
                sibling branches

        Returns:
            TraceResult, or None when no reachable, sufficiently stocked,
            cycle-free supplier exists within max_depth
        """
        if depth >= self._max_depth:
            return None

        for sell_offer in self.get_candidate_offers(requirement):
            if sell_offer.corp_id in visited:
                continue

            if sell_offer.quantity < requirement.quantity:
                continue

            seller = self._registry.get(sell_offer.corp_id)
            if seller is None:
                continue

            price = self._distance.effective_price(sell_offer, requirement)
            if price == math.inf:
                continue
            hauling_cost = price - sell_offer.price

            seller_buy_offers = seller.buys()

            if not seller_buy_offers:
                # Leaf producer: raw extraction has no input cost
                segment = build_segment(
                    sell_offer.corp_id,
                    seller.corp_type,
                    requirement.resource,
                    requirement.quantity,
                    0,
                    seller.get_margin()
                )
                # Buyer pays the raw producer's asking price plus hauling
                return TraceResult(segments=(segment,), cost=price)

            resolved = self._resolve_inputs(
                seller_buy_offers,
                seller.get_position(),
                sell_offer.corp_id,
                depth=depth + 1,
                visited=visited | {sell_offer.corp_id}
            )
            if resolved is None:
                continue

            child_segments, input_cost = resolved
            segment = build_segment(
                sell_offer.corp_id,
                seller.corp_type,
                requirement.resource,
                requirement.quantity,
                input_cost,
                seller.get_margin()
            )
            return TraceResult(
                segments=child_segments + (segment,),
                cost=segment.output_price + hauling_cost
            )

        return None

    def _resolve_inputs(
        self,
        buy_offers: List[Offer],
        location: Position,
        buyer_corp_id: str,
        depth: int,
        visited: FrozenSet[str]
    ) -> Optional[Tuple[Tuple[ChainSegment, ...], float]]:
        """Resolve every input of one buyer; None as soon as one fails"""
        segments: Tuple[ChainSegment, ...] = ()
        total_cost = 0.0

        for buy_offer in buy_offers:
            result = self.trace_input(
                InputRequirement(
                    resource=buy_offer.resource,
                    quantity=buy_offer.quantity,
                    location=location,
                    buyer_corp_id=buyer_corp_id
                ),
                depth,
                visited
            )
            if result is None:
                return None

            segments += result.segments
            total_cost += result.cost

        return segments, total_cost

    def estimate_profit(self, goal: ChainGoal) -> float:
        """Rough profit: mint value less the average bid for the goal resource"""
        mint_value = goal.mint_value_per_unit * goal.quantity

        buy_offers = self._collector.get_buy_offers(goal.resource)
        if not buy_offers:
            return mint_value

        average_price = sum(o.price for o in buy_offers) / len(buy_offers)
        return mint_value - average_price


def can_build_chain(
    goal_resource: str,
    collector: OfferCollector,
    max_depth: int = DEFAULT_MAX_DEPTH
) -> bool:
    """
    Cheap resource-level feasibility check.

    Walks resources breadth-first from the goal; fails as soon as a
    reached resource has no sellers. Corps, quantities and prices are
    ignored.
    """
    visited = set()
    queue = [goal_resource]
    depth = 0

    while queue and depth < max_depth:
        resource = queue.pop(0)
        if resource in visited:
            continue
        visited.add(resource)

        sell_offers = collector.get_sell_offers(resource)
        if not sell_offers:
            return False

        for offer in sell_offers:
            for buy in collector.get_buy_offers(offer.resource):
                if buy.resource not in visited:
                    queue.append(buy.resource)

        depth += 1

    return True
