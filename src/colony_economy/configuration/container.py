"""
Dependency Injection Container.

Provides singleton instances and factory methods for:
- Database engine
- Chain repository
- Planner factory for the current offer snapshot
- Mediator with all handlers and pipeline behaviors registered
"""
from typing import Callable, Optional

from sqlalchemy.engine import Engine

from ..adapters.secondary.persistence.chain_repository_sqlalchemy import ChainRepositorySQLAlchemy
from ..adapters.secondary.persistence.engine import create_engine_from_config
from ..adapters.secondary.persistence.models import metadata
from ..application.common.behaviors import LoggingBehavior, ValidationBehavior
from ..application.planning.commands.age_funded_chains import (
    AgeFundedChainsCommand,
    AgeFundedChainsHandler
)
from ..application.planning.commands.fund_best_chains import (
    FundBestChainsCommand,
    FundBestChainsHandler
)
from ..application.planning.queries.find_best_chains import (
    FindBestChainsHandler,
    FindBestChainsQuery
)
from ..application.planning.queries.find_viable_chains import (
    FindViableChainsHandler,
    FindViableChainsQuery
)
from ..application.planning.queries.list_chains import ListChainsHandler, ListChainsQuery
from ..domain.colony.mint_values import MintValues, get_preset
from ..domain.planning.chain_planner import ChainPlanner
from ..mediator import Mediator
from ..ports.outbound.chain_repository import IChainRepository
from .settings import settings

PlannerFactory = Callable[[], ChainPlanner]

# Singleton instances
_engine = None
_chain_repo = None
_planner_factory: Optional[PlannerFactory] = None
_mediator = None


def get_engine() -> Engine:
    """
    Returns:
        Engine: Singleton engine with the schema created
    """
    global _engine
    if _engine is None:
        _engine = create_engine_from_config(settings.db_path)
        metadata.create_all(_engine)
    return _engine


def get_chain_repository() -> IChainRepository:
    """
    Returns:
        IChainRepository: Singleton chain repository instance
    """
    global _chain_repo
    if _chain_repo is None:
        _chain_repo = ChainRepositorySQLAlchemy(get_engine())
    return _chain_repo


def get_mint_values() -> MintValues:
    """Mint-value table of the configured preset"""
    return get_preset(settings.mint_preset)


def configure_planner_factory(factory: Optional[PlannerFactory]) -> None:
    """Set the callable that builds a planner over the current offer snapshot"""
    global _planner_factory
    _planner_factory = factory


def get_planner_factory() -> PlannerFactory:
    """
    Raises:
        RuntimeError: If no planner factory has been configured
    """
    if _planner_factory is None:
        raise RuntimeError("No planner factory configured; load a scenario first")
    return _planner_factory


def _current_planner() -> ChainPlanner:
    # Resolved per call so reconfiguring after get_mediator() takes effect
    return get_planner_factory()()


def get_mediator() -> Mediator:
    """
    Get or create the mediator with:

    1. Pipeline behaviors (LoggingBehavior, ValidationBehavior)
    2. All command handlers
    3. All query handlers

    Returns:
        Mediator: Fully configured mediator instance
    """
    global _mediator
    if _mediator is None:
        _mediator = Mediator()

        # These execute in order: Logging -> Validation -> Handler
        _mediator.register_behavior(LoggingBehavior())
        _mediator.register_behavior(ValidationBehavior())

        # ===== Planning Query Handlers =====
        _mediator.register_handler(
            FindViableChainsQuery,
            lambda: FindViableChainsHandler(_current_planner)
        )
        _mediator.register_handler(
            FindBestChainsQuery,
            lambda: FindBestChainsHandler(_current_planner)
        )
        _mediator.register_handler(
            ListChainsQuery,
            lambda: ListChainsHandler(get_chain_repository())
        )

        # ===== Planning Command Handlers =====
        _mediator.register_handler(
            FundBestChainsCommand,
            lambda: FundBestChainsHandler(_current_planner, get_chain_repository())
        )
        _mediator.register_handler(
            AgeFundedChainsCommand,
            lambda: AgeFundedChainsHandler(get_chain_repository())
        )

    return _mediator


def reset_container():
    """
    Reset all singleton instances.

    Useful for testing to ensure clean state between tests.
    """
    global _engine, _chain_repo, _planner_factory, _mediator

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _chain_repo = None
    _planner_factory = None
    _mediator = None
