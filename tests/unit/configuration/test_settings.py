"""Unit tests for settings and container wiring"""
from pathlib import Path

import pytest

from colony_economy.configuration import container
from colony_economy.configuration.settings import Settings, settings
from colony_economy.domain.colony.mint_values import EXPANSION_MINT_VALUES
from colony_economy.domain.shared.exceptions import UnknownMintPresetError


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("COLONY_ECONOMY_DB_PATH", "COLONY_ECONOMY_MAX_DEPTH",
                     "COLONY_ECONOMY_HAULING_COST", "COLONY_ECONOMY_MINT_PRESET"):
            monkeypatch.delenv(name, raising=False)

        defaults = Settings()

        assert defaults.db_path == Path("var/colony_economy.db")
        assert defaults.max_depth == 10
        assert defaults.hauling_cost_per_tile == 0.01
        assert defaults.mint_preset == "default"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("COLONY_ECONOMY_DB_PATH", "/tmp/colony.db")
        monkeypatch.setenv("COLONY_ECONOMY_MAX_DEPTH", "4")
        monkeypatch.setenv("COLONY_ECONOMY_HAULING_COST", "0.5")
        monkeypatch.setenv("COLONY_ECONOMY_MINT_PRESET", "expansion")

        configured = Settings()

        assert configured.db_path == Path("/tmp/colony.db")
        assert configured.max_depth == 4
        assert configured.hauling_cost_per_tile == 0.5
        assert configured.mint_preset == "expansion"


class TestContainer:

    def test_singletons(self):
        assert container.get_engine() is container.get_engine()
        assert container.get_chain_repository() is container.get_chain_repository()
        assert container.get_mediator() is container.get_mediator()

    def test_reset_clears_singletons(self):
        repository = container.get_chain_repository()

        container.reset_container()

        assert container.get_chain_repository() is not repository

    def test_planner_factory_must_be_configured(self):
        with pytest.raises(RuntimeError):
            container.get_planner_factory()

    def test_mint_values_follow_preset(self, monkeypatch):
        monkeypatch.setattr(settings, 'mint_preset', 'expansion')
        assert container.get_mint_values() == EXPANSION_MINT_VALUES

    def test_unknown_preset(self, monkeypatch):
        monkeypatch.setattr(settings, 'mint_preset', 'hoarding')
        with pytest.raises(UnknownMintPresetError):
            container.get_mint_values()
