"""SQLAlchemy engine factory.

Selects the backend from configuration:
- db_path=":memory:" -> SQLite in-memory (tests)
- otherwise -> SQLite file (explicit path > COLONY_ECONOMY_DB_PATH > default)
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DB_PATH_ENV = "COLONY_ECONOMY_DB_PATH"
DEFAULT_DB_PATH = Path("var/colony_economy.db")


def _resolve_sqlite_path(db_path: Optional[Union[str, Path]]) -> Path:
    # Priority: explicit parameter > environment variable > default
    if db_path is not None:
        return Path(db_path)

    env_path = os.environ.get(DB_PATH_ENV)
    if env_path and env_path != ":memory:":
        return Path(env_path)

    return DEFAULT_DB_PATH


def create_engine_from_config(db_path: Optional[Union[str, Path]] = None) -> Engine:
    """
    Create SQLAlchemy engine from configuration.

    Args:
        db_path: Optional explicit database path.
                 Use ":memory:" for in-memory SQLite (testing).

    Returns:
        Configured SQLAlchemy Engine instance
    """
    if str(db_path) == ":memory:":
        logger.info("Creating SQLite in-memory engine (testing mode)")

        # StaticPool keeps a single connection; each new connection would
        # otherwise see a fresh empty database
        return create_engine(
            "sqlite:///:memory:",
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
            json_serializer=json.dumps,
            json_deserializer=json.loads,
            echo=False,
        )

    sqlite_path = _resolve_sqlite_path(db_path)
    sqlite_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating SQLite file engine: {sqlite_path}")

    engine = create_engine(
        f"sqlite:///{sqlite_path}",
        connect_args={'check_same_thread': False},
        json_serializer=json.dumps,
        json_deserializer=json.loads,
        echo=False,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def get_database_url(db_path: Optional[Union[str, Path]] = None) -> str:
    """Database URL create_engine_from_config() would use"""
    if str(db_path) == ":memory:":
        return "sqlite:///:memory:"
    return f"sqlite:///{_resolve_sqlite_path(db_path)}"
