from abc import ABC, abstractmethod
from typing import List, Optional

from ...domain.planning.chain import Chain


class IChainRepository(ABC):
    """Port for storing planned chains between planning cycles"""

    @abstractmethod
    def save(self, chain: Chain) -> Chain:
        """Insert or replace a chain by ID"""
        pass

    @abstractmethod
    def find_by_id(self, chain_id: str) -> Optional[Chain]:
        pass

    @abstractmethod
    def list_all(self) -> List[Chain]:
        pass

    @abstractmethod
    def list_funded(self) -> List[Chain]:
        pass

    @abstractmethod
    def delete(self, chain_id: str) -> None:
        """
        Remove a chain

        Raises:
            ChainNotFoundError: If no chain has that ID
        """
        pass
