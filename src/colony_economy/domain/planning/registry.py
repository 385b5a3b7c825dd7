"""Read-only actor snapshot for one planning cycle"""
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from ...ports.outbound.economic_actor import IEconomicActor


class ActorRegistry:
    """
    Immutable lookup of corps (and the nodes hosting them) by corp ID.

    Built once per planning cycle and shared read-only by every branch of
    the chain search.
    """

    def __init__(
        self,
        corps: Mapping[str, IEconomicActor],
        corp_nodes: Optional[Mapping[str, str]] = None
    ):
        self._corps = MappingProxyType(dict(corps))
        self._corp_nodes = MappingProxyType(dict(corp_nodes or {}))

    @classmethod
    def from_corps(cls, corps: Iterable[IEconomicActor]) -> "ActorRegistry":
        """Registry without node placement (position-distance planning)"""
        return cls({corp.corp_id: corp for corp in corps})

    @classmethod
    def from_nodes(cls, nodes: Mapping[str, Iterable[IEconomicActor]]) -> "ActorRegistry":
        """
        Registry with node placement

        Args:
            nodes: Mapping of node ID to the corps hosted at that node
        """
        corps: Dict[str, IEconomicActor] = {}
        corp_nodes: Dict[str, str] = {}
        for node_id, node_corps in nodes.items():
            for corp in node_corps:
                corps[corp.corp_id] = corp
                corp_nodes[corp.corp_id] = node_id
        return cls(corps, corp_nodes)

    def get(self, corp_id: str) -> Optional[IEconomicActor]:
        return self._corps.get(corp_id)

    def node_of(self, corp_id: str) -> Optional[str]:
        """Node hosting a corp, or None when its placement is unknown"""
        return self._corp_nodes.get(corp_id)

    def corps(self) -> List[IEconomicActor]:
        return list(self._corps.values())

    def __contains__(self, corp_id: object) -> bool:
        return corp_id in self._corps

    def __iter__(self) -> Iterator[IEconomicActor]:
        return iter(self._corps.values())

    def __len__(self) -> int:
        return len(self._corps)
