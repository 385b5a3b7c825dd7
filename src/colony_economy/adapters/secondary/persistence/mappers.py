"""Mapping between Chain domain objects and chains table rows"""
from typing import Any, Dict, Mapping

from ....domain.planning.chain import Chain, deserialize_chain, serialize_chain


class ChainMapper:
    """Maps Chain <-> chains row"""

    @staticmethod
    def to_db_dict(chain: Chain) -> Dict[str, Any]:
        data = serialize_chain(chain)
        return {
            'chain_id': data['id'],
            'goal_corp_id': chain.goal_corp_id,
            'segments': data['segments'],
            'leaf_cost': data['leaf_cost'],
            'total_cost': data['total_cost'],
            'mint_value': data['mint_value'],
            'profit': data['profit'],
            'funded': data['funded'],
            'priority': data['priority'],
            'age': data['age'],
        }

    @staticmethod
    def from_db_row(row: Mapping[str, Any]) -> Chain:
        return deserialize_chain({
            'id': row['chain_id'],
            'segments': row['segments'],
            'leaf_cost': row['leaf_cost'],
            'total_cost': row['total_cost'],
            'mint_value': row['mint_value'],
            'profit': row['profit'],
            'funded': bool(row['funded']),
            'priority': row['priority'],
            'age': row['age'],
        })
