"""Data models for tasks, predictions and scenarios."""

from .prediction import ObjectivePrediction, TaskPrediction, VelocityMetrics
from .scenario import Scenario, ScenarioComparison, ScenarioModification
from .task import Objective, Task

__all__ = [
    'Objective',
    'Task',
    'TaskPrediction',
    'ObjectivePrediction',
    'VelocityMetrics',
    'Scenario',
    'ScenarioModification',
    'ScenarioComparison',
]
