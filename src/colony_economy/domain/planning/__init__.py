"""Planning domain - production chains and the chain planner"""

from .chain import (
    Chain,
    ChainSegment,
    build_segment,
    create_chain,
    create_chain_id,
    calculate_profit,
    is_viable,
    calculate_total_cost,
    calculate_chain_roi,
    sort_by_profit,
    sort_by_roi,
    filter_viable,
    get_corp_ids,
    chains_overlap,
    select_non_overlapping,
    select_within_budget,
    mark_funded,
    increment_age,
    serialize_chain,
    deserialize_chain,
)
from .registry import ActorRegistry
from .distance import (
    InputRequirement,
    DistanceStrategy,
    PositionDistance,
    EconomicGraphDistance,
    create_distance_strategy,
)
from .chain_planner import (
    ChainPlanner,
    ChainGoal,
    TraceResult,
    DEFAULT_MAX_DEPTH,
    DEFAULT_GOAL_RESOURCES,
    can_build_chain,
)

__all__ = [
    'Chain',
    'ChainSegment',
    'build_segment',
    'create_chain',
    'create_chain_id',
    'calculate_profit',
    'is_viable',
    'calculate_total_cost',
    'calculate_chain_roi',
    'sort_by_profit',
    'sort_by_roi',
    'filter_viable',
    'get_corp_ids',
    'chains_overlap',
    'select_non_overlapping',
    'select_within_budget',
    'mark_funded',
    'increment_age',
    'serialize_chain',
    'deserialize_chain',
    'ActorRegistry',
    'InputRequirement',
    'DistanceStrategy',
    'PositionDistance',
    'EconomicGraphDistance',
    'create_distance_strategy',
    'ChainPlanner',
    'ChainGoal',
    'TraceResult',
    'DEFAULT_MAX_DEPTH',
    'DEFAULT_GOAL_RESOURCES',
    'can_build_chain',
]
