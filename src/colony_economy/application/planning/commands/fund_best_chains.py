"""Fund best chains command"""
import logging
from dataclasses import dataclass
from typing import Callable, List

from ....domain.planning.chain import Chain, mark_funded
from ....domain.planning.chain_planner import ChainPlanner
from ....mediator import Request, RequestHandler
from ....ports.outbound.chain_repository import IChainRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FundBestChainsCommand(Request[List[Chain]]):
    """Command to plan the best chains for a budget and fund them"""
    tick: int
    budget: float

    def validate(self) -> None:
        if self.tick < 0:
            raise ValueError(f"tick must be non-negative, got {self.tick}")
        if self.budget < 0:
            raise ValueError(f"budget must be non-negative, got {self.budget}")


class FundBestChainsHandler(RequestHandler[FundBestChainsCommand, List[Chain]]):
    """
    Handler for FundBestChainsCommand

    Plans the best chains for the budget, marks each funded and persists
    it. Returns the funded chains in selection order.
    """

    def __init__(
        self,
        planner_factory: Callable[[], ChainPlanner],
        chain_repository: IChainRepository
    ):
        self._planner_factory = planner_factory
        self._chain_repo = chain_repository

    async def handle(self, request: FundBestChainsCommand) -> List[Chain]:
        planner = self._planner_factory()
        selected = planner.find_best_chains(request.tick, request.budget)

        funded = []
        for chain in selected:
            funded_chain = mark_funded(chain)
            self._chain_repo.save(funded_chain)
            funded.append(funded_chain)

        total_cost = sum(chain.total_cost for chain in funded)
        logger.info(
            f"Funded {len(funded)} chains at tick {request.tick} "
            f"(cost {total_cost:.2f} of budget {request.budget:.2f})"
        )
        return funded
