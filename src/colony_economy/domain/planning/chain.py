"""
Production chain model and pure combinators.

A Chain is an ordered sequence of ChainSegments from leaf (raw
production) to root (the goal corp). Every segment applies cost-plus
pricing:

    output_price = input_cost * (1 + margin)

so margins compound multiplicatively along the chain. Leaf segments have
no input cost, which makes their output price 0 whatever their margin.

Example chain for controller upgrading:
1. Mining corp harvests energy (leaf, input_cost=0)
2. Hauling corp moves the energy (input = mined energy)
3. Upgrading corp turns energy into controller progress (goal)

The chain is viable when mint_value > total_cost.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from ..shared.value_objects import CorpType


@dataclass(frozen=True)
class ChainSegment:
    """One corp's value-added step within a chain"""
    corp_id: str
    corp_type: CorpType
    resource: str
    quantity: float
    input_cost: float
    margin: float
    output_price: float

    def __repr__(self) -> str:
        return (
            f"{self.corp_id}[{self.corp_type.value}] {self.resource} x{self.quantity:g} "
            f"({self.input_cost:.2f} +{self.margin:.0%} -> {self.output_price:.2f})"
        )


@dataclass(frozen=True)
class Chain:
    """
    Complete, priced chain from raw production to a value-minting goal.

    Invariants:
    - total_cost equals the last segment's output_price
    - leaf_cost equals the first segment's input_cost
    - profit == mint_value - total_cost
    """
    chain_id: str
    segments: Tuple[ChainSegment, ...]
    leaf_cost: float
    total_cost: float
    mint_value: float
    profit: float
    funded: bool = False
    priority: float = 0
    age: int = 0

    @property
    def goal_corp_id(self) -> str:
        """Corp achieving the goal (root segment); empty for a chain without segments"""
        return self.segments[-1].corp_id if self.segments else ""


def build_segment(
    corp_id: str,
    corp_type: CorpType,
    resource: str,
    quantity: float,
    input_cost: float,
    margin: float
) -> ChainSegment:
    """Build a segment with cost-plus pricing applied"""
    return ChainSegment(
        corp_id=corp_id,
        corp_type=corp_type,
        resource=resource,
        quantity=quantity,
        input_cost=input_cost,
        margin=margin,
        output_price=input_cost * (1 + margin)
    )


def calculate_total_cost(segments: Sequence[ChainSegment]) -> float:
    """The last segment's output price carries every upstream cost"""
    if not segments:
        return 0
    return segments[-1].output_price


def create_chain(chain_id: str, segments: Iterable[ChainSegment], mint_value: float) -> Chain:
    """Create an unfunded chain; priority starts at its profit"""
    segments = tuple(segments)
    total_cost = calculate_total_cost(segments)
    profit = mint_value - total_cost
    leaf_cost = segments[0].input_cost if segments else 0

    return Chain(
        chain_id=chain_id,
        segments=segments,
        leaf_cost=leaf_cost,
        total_cost=total_cost,
        mint_value=mint_value,
        profit=profit,
        funded=False,
        priority=profit,
        age=0
    )


def create_chain_id(goal_corp_id: str, tick: int) -> str:
    return f"chain-{goal_corp_id}-{tick}"


def calculate_profit(chain: Chain) -> float:
    return chain.mint_value - chain.total_cost


def is_viable(chain: Chain) -> bool:
    return calculate_profit(chain) > 0


def calculate_chain_roi(chain: Chain) -> float:
    """Profit per credit spent; 0 for a chain that costs nothing"""
    if chain.total_cost == 0:
        return 0
    return (chain.mint_value - chain.total_cost) / chain.total_cost


def sort_by_profit(chains: Iterable[Chain]) -> List[Chain]:
    """Highest profit first"""
    return sorted(chains, key=lambda c: c.profit, reverse=True)


def sort_by_roi(chains: Iterable[Chain]) -> List[Chain]:
    """Highest ROI first"""
    return sorted(chains, key=calculate_chain_roi, reverse=True)


def filter_viable(chains: Iterable[Chain]) -> List[Chain]:
    return [c for c in chains if is_viable(c)]


def get_corp_ids(chain: Chain) -> List[str]:
    return [s.corp_id for s in chain.segments]


def chains_overlap(a: Chain, b: Chain) -> bool:
    """Chains sharing a corp would double-count that corp's capacity"""
    a_corps = set(get_corp_ids(a))
    return any(corp_id in a_corps for corp_id in get_corp_ids(b))


def select_non_overlapping(chains: Iterable[Chain]) -> List[Chain]:
    """
    Greedily keep chains by descending profit, skipping any chain that
    uses a corp already claimed by a kept chain.
    """
    selected = []
    used_corps = set()

    for chain in sort_by_profit(chains):
        corp_ids = get_corp_ids(chain)
        if any(corp_id in used_corps for corp_id in corp_ids):
            continue
        selected.append(chain)
        used_corps.update(corp_ids)

    return selected


def select_within_budget(chains: Iterable[Chain], budget: float) -> List[Chain]:
    """
    Accept chains in the given order while cumulative cost fits the budget.

    A chain that does not fit is skipped; later, cheaper chains may still
    be accepted.
    """
    affordable = []
    spent = 0

    for chain in chains:
        if spent + chain.total_cost <= budget:
            affordable.append(chain)
            spent += chain.total_cost

    return affordable


def mark_funded(chain: Chain) -> Chain:
    return replace(chain, funded=True)


def increment_age(chain: Chain, ticks: int = 1) -> Chain:
    return replace(chain, age=chain.age + ticks)


def serialize_segment(segment: ChainSegment) -> Dict[str, Any]:
    return {
        'corp_id': segment.corp_id,
        'corp_type': segment.corp_type.value,
        'resource': segment.resource,
        'quantity': segment.quantity,
        'input_cost': segment.input_cost,
        'margin': segment.margin,
        'output_price': segment.output_price,
    }


def deserialize_segment(data: Dict[str, Any]) -> ChainSegment:
    """Restore a segment field-for-field; prices are not recomputed"""
    return ChainSegment(
        corp_id=data['corp_id'],
        corp_type=CorpType(data['corp_type']),
        resource=data['resource'],
        quantity=data['quantity'],
        input_cost=data['input_cost'],
        margin=data['margin'],
        output_price=data['output_price']
    )


def serialize_chain(chain: Chain) -> Dict[str, Any]:
    """Plain JSON-compatible record of a chain"""
    return {
        'id': chain.chain_id,
        'segments': [serialize_segment(s) for s in chain.segments],
        'leaf_cost': chain.leaf_cost,
        'total_cost': chain.total_cost,
        'mint_value': chain.mint_value,
        'profit': chain.profit,
        'funded': chain.funded,
        'priority': chain.priority,
        'age': chain.age,
    }


def deserialize_chain(data: Dict[str, Any]) -> Chain:
    """Restore a chain exactly as serialized"""
    return Chain(
        chain_id=data['id'],
        segments=tuple(deserialize_segment(s) for s in data['segments']),
        leaf_cost=data['leaf_cost'],
        total_cost=data['total_cost'],
        mint_value=data['mint_value'],
        profit=data['profit'],
        funded=data['funded'],
        priority=data['priority'],
        age=data['age']
    )
