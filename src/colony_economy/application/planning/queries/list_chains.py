"""List stored chains query"""
from dataclasses import dataclass
from typing import List

from ....domain.planning.chain import Chain
from ....mediator import Request, RequestHandler
from ....ports.outbound.chain_repository import IChainRepository


@dataclass(frozen=True)
class ListChainsQuery(Request[List[Chain]]):
    """Query to list stored chains, optionally only funded ones"""
    funded_only: bool = False


class ListChainsHandler(RequestHandler[ListChainsQuery, List[Chain]]):
    """Handler for ListChainsQuery"""

    def __init__(self, chain_repository: IChainRepository):
        self._chain_repo = chain_repository

    async def handle(self, request: ListChainsQuery) -> List[Chain]:
        if request.funded_only:
            return self._chain_repo.list_funded()
        return self._chain_repo.list_all()
