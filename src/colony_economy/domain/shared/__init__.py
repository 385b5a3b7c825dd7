"""Shared domain primitives"""

from .exceptions import (
    DomainException,
    InvalidOfferError,
    UnknownMintPresetError,
    ChainNotFoundError,
    ScenarioError,
)
from .value_objects import (
    CorpType,
    Position,
    parse_room_name,
    manhattan_distance,
    estimate_cross_room_distance,
    ROOM_SIZE,
)

__all__ = [
    'DomainException',
    'InvalidOfferError',
    'UnknownMintPresetError',
    'ChainNotFoundError',
    'ScenarioError',
    'CorpType',
    'Position',
    'parse_room_name',
    'manhattan_distance',
    'estimate_cross_room_distance',
    'ROOM_SIZE',
]
