"""Completion-time prediction and what-if scenario simulation for objectives."""

from .api import (
    add_task,
    build_forecaster,
    build_simulator,
    change_agent_role,
    create_scenario,
    modify_priority,
    predict_objective,
    predict_task,
    remove_task,
    reorder_tasks,
    velocity,
)
from .models import Objective, Task
from .simulation.comparison import compare_scenarios, scenario_impact
from .utils.datetime_utils import format_duration

__all__ = [
    'Objective',
    'Task',
    'predict_task',
    'predict_objective',
    'velocity',
    'create_scenario',
    'add_task',
    'remove_task',
    'modify_priority',
    'change_agent_role',
    'reorder_tasks',
    'compare_scenarios',
    'scenario_impact',
    'format_duration',
    'build_forecaster',
    'build_simulator',
]
