"""
Root pytest configuration.

Every test runs against a fresh in-memory database and an empty
container, so nothing leaks between tests.
"""
import pytest

from colony_economy.configuration import container
from colony_economy.configuration.settings import settings


@pytest.fixture(autouse=True)
def isolated_container(monkeypatch):
    """Point the container at an in-memory database and reset it around each test"""
    monkeypatch.setattr(settings, 'db_path', ':memory:')
    monkeypatch.setattr(settings, 'mint_preset', 'default')
    monkeypatch.setattr(settings, 'max_depth', 10)
    monkeypatch.setattr(settings, 'hauling_cost_per_tile', 0.01)
    container.reset_container()
    yield
    container.reset_container()


@pytest.fixture
def context():
    """Shared context dictionary for BDD steps"""
    return {}
