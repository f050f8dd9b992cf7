"""Scenario simulation and synthetic history."""

from .comparison import compare_scenarios, scenario_impact
from .generator import HistoryGenerator
from .simulator import ScenarioSimulator

__all__ = ['ScenarioSimulator', 'HistoryGenerator', 'compare_scenarios', 'scenario_impact']
