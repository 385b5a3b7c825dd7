"""SQLAlchemy persistence for planned chains"""

from .engine import create_engine_from_config, get_database_url
from .models import metadata, chains
from .chain_repository_sqlalchemy import ChainRepositorySQLAlchemy

__all__ = [
    'create_engine_from_config',
    'get_database_url',
    'metadata',
    'chains',
    'ChainRepositorySQLAlchemy',
]
