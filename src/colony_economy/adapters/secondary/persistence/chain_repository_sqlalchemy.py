"""SQLAlchemy-based ChainRepository implementation."""
import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine

from ....domain.planning.chain import Chain
from ....domain.shared.exceptions import ChainNotFoundError
from ....ports.outbound.chain_repository import IChainRepository
from .mappers import ChainMapper
from .models import chains

logger = logging.getLogger(__name__)


class ChainRepositorySQLAlchemy(IChainRepository):
    """Repository for planned chains using SQLAlchemy Core"""

    def __init__(self, engine: Engine):
        """
        Initialize chain repository.

        Args:
            engine: SQLAlchemy Engine instance
        """
        self._engine = engine

    def save(self, chain: Chain) -> Chain:
        """
        Insert or replace a chain by ID.

        created_at is kept from the first insert.
        """
        values = ChainMapper.to_db_dict(chain)

        stmt = sqlite_insert(chains).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=['chain_id'],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key != 'chain_id'
            }
        )

        with self._engine.begin() as conn:
            conn.execute(stmt)

        logger.debug(f"Saved chain {chain.chain_id} (funded={chain.funded}, age={chain.age})")
        return chain

    def find_by_id(self, chain_id: str) -> Optional[Chain]:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(chains).where(chains.c.chain_id == chain_id)
            ).mappings().first()

        if row is None:
            logger.debug(f"Chain not found: {chain_id}")
            return None

        return ChainMapper.from_db_row(row)

    def list_all(self) -> List[Chain]:
        """All chains, highest priority first"""
        return self._list(select(chains))

    def list_funded(self) -> List[Chain]:
        """Funded chains, highest priority first"""
        return self._list(select(chains).where(chains.c.funded.is_(True)))

    def delete(self, chain_id: str) -> None:
        with self._engine.begin() as conn:
            result = conn.execute(delete(chains).where(chains.c.chain_id == chain_id))

        if result.rowcount == 0:
            raise ChainNotFoundError(f"Chain {chain_id} not found")

        logger.info(f"Deleted chain {chain_id}")

    def _list(self, stmt) -> List[Chain]:
        stmt = stmt.order_by(chains.c.priority.desc(), chains.c.chain_id)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [ChainMapper.from_db_row(row) for row in rows]
