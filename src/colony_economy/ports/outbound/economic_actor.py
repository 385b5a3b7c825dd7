from abc import ABC, abstractmethod
from typing import List

from ...domain.market.offer import Offer
from ...domain.shared.value_objects import CorpType, Position

__all__ = ['IEconomicActor', 'CorpType']


class IEconomicActor(ABC):
    """
    Port for an economic actor (corp) taking part in planning.

    A corp with no buy offers is a leaf producer (raw extraction).
    Margins are fractions in [0, 1); wealthier corps charge thinner ones.
    """

    @property
    @abstractmethod
    def corp_id(self) -> str:
        """Stable identifier, unique across the colony"""
        pass

    @property
    @abstractmethod
    def corp_type(self) -> CorpType:
        pass

    @abstractmethod
    def sells(self) -> List[Offer]:
        """Current sell offers"""
        pass

    @abstractmethod
    def buys(self) -> List[Offer]:
        """Current buy offers (input requirements); empty for leaf producers"""
        pass

    @abstractmethod
    def get_position(self) -> Position:
        pass

    @abstractmethod
    def get_margin(self) -> float:
        pass
