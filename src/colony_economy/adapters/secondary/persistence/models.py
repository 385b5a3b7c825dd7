"""SQLAlchemy Core table definitions (no ORM)"""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)

metadata = MetaData()

# Planned chains; segments are stored as the serialized JSON list
chains = Table(
    'chains',
    metadata,
    Column('chain_id', String, primary_key=True),
    Column('goal_corp_id', String, nullable=False),
    Column('segments', JSON, nullable=False),
    Column('leaf_cost', Float, nullable=False),
    Column('total_cost', Float, nullable=False),
    Column('mint_value', Float, nullable=False),
    Column('profit', Float, nullable=False),
    Column('funded', Boolean, nullable=False, default=False),
    Column('priority', Float, nullable=False),
    Column('age', Integer, nullable=False, default=0),
    Column('created_at', DateTime(timezone=True), nullable=False,
           default=lambda: datetime.now(timezone.utc)),
)

Index('idx_chains_funded', chains.c.funded)
Index('idx_chains_goal_corp', chains.c.goal_corp_id)
