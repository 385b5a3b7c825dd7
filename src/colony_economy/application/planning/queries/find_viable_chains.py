"""Find viable chains query"""
from dataclasses import dataclass
from typing import Callable, List

from ....domain.planning.chain import Chain
from ....domain.planning.chain_planner import ChainPlanner
from ....mediator import Request, RequestHandler


@dataclass(frozen=True)
class FindViableChainsQuery(Request[List[Chain]]):
    """Query for every profitable chain at a tick"""
    tick: int

    def validate(self) -> None:
        if self.tick < 0:
            raise ValueError(f"tick must be non-negative, got {self.tick}")


class FindViableChainsHandler(RequestHandler[FindViableChainsQuery, List[Chain]]):
    """Handler for FindViableChainsQuery"""

    def __init__(self, planner_factory: Callable[[], ChainPlanner]):
        """
        Args:
            planner_factory: Builds a planner over the current offer snapshot
        """
        self._planner_factory = planner_factory

    async def handle(self, request: FindViableChainsQuery) -> List[Chain]:
        """
        Returns:
            Viable chains, highest profit first
        """
        return self._planner_factory().find_viable_chains(request.tick)
