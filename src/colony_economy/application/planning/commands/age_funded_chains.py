"""Age funded chains command"""
import logging
from dataclasses import dataclass
from typing import List

from ....domain.planning.chain import Chain, increment_age
from ....mediator import Request, RequestHandler
from ....ports.outbound.chain_repository import IChainRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgeFundedChainsCommand(Request[List[Chain]]):
    """Command to advance every funded chain by ticks"""
    ticks: int = 1

    def validate(self) -> None:
        if self.ticks < 1:
            raise ValueError(f"ticks must be positive, got {self.ticks}")


class AgeFundedChainsHandler(RequestHandler[AgeFundedChainsCommand, List[Chain]]):
    """Handler for AgeFundedChainsCommand"""

    def __init__(self, chain_repository: IChainRepository):
        self._chain_repo = chain_repository

    async def handle(self, request: AgeFundedChainsCommand) -> List[Chain]:
        aged = []
        for chain in self._chain_repo.list_funded():
            aged_chain = increment_age(chain, request.ticks)
            self._chain_repo.save(aged_chain)
            aged.append(aged_chain)

        logger.info(f"Aged {len(aged)} funded chains by {request.ticks}")
        return aged
