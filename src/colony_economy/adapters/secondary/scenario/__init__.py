"""JSON scenario files describing a colony snapshot"""

from .scenario_loader import Scenario, ScenarioCorp, load_scenario, parse_scenario

__all__ = ['Scenario', 'ScenarioCorp', 'load_scenario', 'parse_scenario']
