"""
Scenario loader.

A scenario is a JSON snapshot of a colony's corps and their standing
offers, for example:

    {
        "mint_values": {"rcl_upgrade": 1200},
        "corps": [
            {
                "id": "miner-1",
                "type": "mining",
                "position": {"x": 10, "y": 10, "room": "W1N1"},
                "balance": 2500,
                "node": "W1N1-sources",
                "sells": [{"resource": "energy", "quantity": 100, "price": 20}]
            }
        ],
        "edges": [{"a": "W1N1-sources", "b": "W1N1-core", "weight": 3}]
    }

Offers default to the corp's position and a one-tick duration.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from ....domain.colony.mint_values import DEFAULT_MINT_VALUES, MintValues, create_mint_values
from ....domain.market.offer import HAULING_COST_PER_TILE, Offer, OfferType, create_offer_id
from ....domain.market.offer_collector import OfferCollector
from ....domain.market.pricing import calculate_margin
from ....domain.planning.chain_planner import DEFAULT_MAX_DEPTH, ChainPlanner
from ....domain.planning.registry import ActorRegistry
from ....domain.shared.exceptions import DomainException, ScenarioError
from ....domain.shared.value_objects import CorpType, Position
from ....ports.outbound.economic_actor import IEconomicActor
from ....ports.outbound.graph_navigator import ECONOMIC_EDGE
from ..navigation.node_navigator import NodeNavigator

logger = logging.getLogger(__name__)


class ScenarioCorp(IEconomicActor):
    """Corp read from a scenario file; its offers are fixed for the cycle"""

    def __init__(
        self,
        corp_id: str,
        corp_type: CorpType,
        position: Position,
        margin: float,
        sells: Optional[List[Offer]] = None,
        buys: Optional[List[Offer]] = None,
        node_id: Optional[str] = None
    ):
        self._corp_id = corp_id
        self._corp_type = corp_type
        self._position = position
        self._margin = margin
        self._sells = list(sells or [])
        self._buys = list(buys or [])
        self._node_id = node_id

    @property
    def corp_id(self) -> str:
        return self._corp_id

    @property
    def corp_type(self) -> CorpType:
        return self._corp_type

    @property
    def node_id(self) -> Optional[str]:
        return self._node_id

    def sells(self) -> List[Offer]:
        return list(self._sells)

    def buys(self) -> List[Offer]:
        return list(self._buys)

    def get_position(self) -> Position:
        return self._position

    def get_margin(self) -> float:
        return self._margin

    def __repr__(self) -> str:
        return f"ScenarioCorp({self._corp_id}, {self._corp_type.value})"


@dataclass(frozen=True)
class Scenario:
    """Corps, optional node graph and mint values for one planning cycle"""
    corps: List[ScenarioCorp]
    navigator: Optional[NodeNavigator]
    mint_values: MintValues

    def create_registry(self) -> ActorRegistry:
        """Registry placing each corp at its declared node, if any"""
        return ActorRegistry(
            {corp.corp_id: corp for corp in self.corps},
            {corp.corp_id: corp.node_id for corp in self.corps if corp.node_id}
        )

    def create_collector(self, hauling_cost_per_tile: float = HAULING_COST_PER_TILE) -> OfferCollector:
        collector = OfferCollector(hauling_cost_per_tile)
        collector.collect_from_corps(self.corps)
        return collector

    def create_planner(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        hauling_cost_per_tile: float = HAULING_COST_PER_TILE
    ) -> ChainPlanner:
        """Fresh planner over an immutable snapshot of this scenario"""
        return ChainPlanner(
            self.create_collector(hauling_cost_per_tile),
            self.mint_values,
            self.create_registry(),
            max_depth=max_depth,
            navigator=self.navigator
        )


def load_scenario(
    path: Union[str, Path],
    base_mint_values: Optional[MintValues] = None
) -> Scenario:
    """
    Load a scenario JSON file.

    Args:
        path: Scenario file
        base_mint_values: Table the file's mint_values overrides apply to

    Raises:
        ScenarioError: If the file is missing, not JSON or malformed
    """
    path = Path(path)
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioError(f"Scenario file not found: {path}") from None
    except json.JSONDecodeError as e:
        raise ScenarioError(f"Invalid JSON in scenario {path}: {e}") from e

    scenario = parse_scenario(data, base_mint_values)
    logger.info(f"Loaded scenario {path}: {len(scenario.corps)} corps")
    return scenario


def parse_scenario(
    data: Mapping[str, Any],
    base_mint_values: Optional[MintValues] = None
) -> Scenario:
    """Build a Scenario from already-decoded JSON"""
    if not isinstance(data, Mapping):
        raise ScenarioError("Scenario must be a JSON object")

    corps_data = data.get('corps')
    if not isinstance(corps_data, list):
        raise ScenarioError("Scenario needs a 'corps' list")

    corps = [_parse_corp(entry) for entry in corps_data]

    seen = set()
    for corp in corps:
        if corp.corp_id in seen:
            raise ScenarioError(f"Duplicate corp id '{corp.corp_id}'")
        seen.add(corp.corp_id)

    navigator = _parse_edges(data.get('edges'), corps)

    try:
        mint_values = create_mint_values(
            data.get('mint_values') or {},
            base_mint_values or DEFAULT_MINT_VALUES
        )
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"Invalid mint_values: {e}") from e

    return Scenario(corps=corps, navigator=navigator, mint_values=mint_values)


def _parse_corp(entry: Mapping[str, Any]) -> ScenarioCorp:
    try:
        corp_id = str(entry['id'])
        corp_type = CorpType(entry['type'])
        position = _parse_position(entry['position'])
    except KeyError as e:
        raise ScenarioError(f"Corp entry missing field {e}: {entry}") from None
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"Invalid corp entry {entry.get('id')}: {e}") from e

    try:
        if 'margin' in entry:
            margin = float(entry['margin'])
        else:
            margin = calculate_margin(float(entry.get('balance', 0)))
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"Invalid margin for corp {corp_id}: {e}") from e

    if not 0 <= margin < 1:
        raise ScenarioError(f"Margin of corp {corp_id} must be in [0, 1), got {margin}")

    try:
        sells = [_parse_offer(o, corp_id, OfferType.SELL, position) for o in entry.get('sells', [])]
        buys = [_parse_offer(o, corp_id, OfferType.BUY, position) for o in entry.get('buys', [])]
    except DomainException as e:
        raise ScenarioError(f"Invalid offer for corp {corp_id}: {e}") from e

    return ScenarioCorp(
        corp_id=corp_id,
        corp_type=corp_type,
        position=position,
        margin=margin,
        sells=sells,
        buys=buys,
        node_id=entry.get('node')
    )


def _parse_position(data: Mapping[str, Any]) -> Position:
    return Position(int(data['x']), int(data['y']), str(data['room']))


def _parse_offer(
    data: Mapping[str, Any],
    corp_id: str,
    offer_type: OfferType,
    default_location: Position
) -> Offer:
    try:
        resource = str(data['resource'])
        quantity = float(data['quantity'])
        price = float(data.get('price', 0))
        duration = int(data.get('duration', 1))
        location = default_location
        if 'location' in data:
            location = _parse_position(data['location'])
    except KeyError as e:
        raise ScenarioError(f"Offer of corp {corp_id} missing field {e}") from None
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"Invalid offer of corp {corp_id}: {e}") from e

    return Offer(
        offer_id=data.get('id') or f"{create_offer_id(corp_id, resource, 0)}-{offer_type.value}",
        corp_id=corp_id,
        offer_type=offer_type,
        resource=resource,
        quantity=quantity,
        price=price,
        duration=duration,
        location=location
    )


def _parse_edges(
    edges_data: Optional[List[Mapping[str, Any]]],
    corps: List[ScenarioCorp]
) -> Optional[NodeNavigator]:
    if not edges_data:
        return None

    navigator = NodeNavigator(corp.node_id for corp in corps if corp.node_id)
    for edge in edges_data:
        try:
            navigator.add_edge(
                str(edge['a']),
                str(edge['b']),
                float(edge.get('weight', 1)),
                edge.get('kind', ECONOMIC_EDGE)
            )
        except KeyError as e:
            raise ScenarioError(f"Edge missing field {e}: {edge}") from None
        except (TypeError, ValueError) as e:
            raise ScenarioError(f"Invalid edge {edge}: {e}") from e

    logger.debug(f"Scenario graph: {navigator}")
    return navigator
