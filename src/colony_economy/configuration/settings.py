"""
Application settings and configuration.

Values come from COLONY_ECONOMY_* environment variables when set.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path


def _env_path(name: str, default: str) -> Path:
    return Path(os.environ.get(name, default))


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value else default


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    return float(value) if value else default


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        db_path: Path to SQLite database file
        max_depth: Recursion limit of the chain search
        hauling_cost_per_tile: Credits per tile per unit hauled
        mint_preset: Mint-value preset name (default, expansion, defensive)
    """
    db_path: Path = field(
        default_factory=lambda: _env_path("COLONY_ECONOMY_DB_PATH", "var/colony_economy.db")
    )
    max_depth: int = field(
        default_factory=lambda: _env_int("COLONY_ECONOMY_MAX_DEPTH", 10)
    )
    hauling_cost_per_tile: float = field(
        default_factory=lambda: _env_float("COLONY_ECONOMY_HAULING_COST", 0.01)
    )
    mint_preset: str = field(
        default_factory=lambda: os.environ.get("COLONY_ECONOMY_MINT_PRESET", "default")
    )


# Global settings instance
settings = Settings()
