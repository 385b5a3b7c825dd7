"""Find best chains query"""
from dataclasses import dataclass
from typing import Callable, List

from ....domain.planning.chain import Chain
from ....domain.planning.chain_planner import ChainPlanner
from ....mediator import Request, RequestHandler


@dataclass(frozen=True)
class FindBestChainsQuery(Request[List[Chain]]):
    """Query for non-overlapping viable chains fitting a budget"""
    tick: int
    budget: float

    def validate(self) -> None:
        if self.tick < 0:
            raise ValueError(f"tick must be non-negative, got {self.tick}")
        if self.budget < 0:
            raise ValueError(f"budget must be non-negative, got {self.budget}")


class FindBestChainsHandler(RequestHandler[FindBestChainsQuery, List[Chain]]):
    """Handler for FindBestChainsQuery"""

    def __init__(self, planner_factory: Callable[[], ChainPlanner]):
        self._planner_factory = planner_factory

    async def handle(self, request: FindBestChainsQuery) -> List[Chain]:
        return self._planner_factory().find_best_chains(request.tick, request.budget)
