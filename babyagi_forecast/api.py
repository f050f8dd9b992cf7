"""Module-level forecasting and simulation functions using the default config."""

from typing import List, Optional

from .engine.forecaster import Forecaster
from .estimators.similarity import SimilarityEstimator
from .models.prediction import ObjectivePrediction, TaskPrediction, VelocityMetrics
from .models.scenario import Scenario
from .models.task import Objective, Task
from .simulation.simulator import ScenarioSimulator
from .utils.config import get_default_config


def build_forecaster(config: dict = None) -> Forecaster:
    """Create a forecaster backed by the similarity estimator."""
    config = config or get_default_config()
    return Forecaster(SimilarityEstimator(config), config)


def build_simulator(config: dict = None) -> ScenarioSimulator:
    """Create a scenario simulator with its own forecaster."""
    return ScenarioSimulator(build_forecaster(config))


_simulator = build_simulator()
_forecaster = _simulator.forecaster


def predict_task(
    task: Task,
    historical_tasks: List[Task],
    agent_role: Optional[str] = None,
) -> TaskPrediction:
    """Predict one task against a flat list of historical tasks."""
    return _forecaster.predict_task(task, historical_tasks, agent_role)


def predict_objective(
    objective: Objective,
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> ObjectivePrediction:
    """Forecast an objective against the historical objective corpus."""
    return _forecaster.predict_objective(objective, historical_objectives, now=now)


def velocity(
    objectives: List[Objective],
    window_days: int = 7,
    now: Optional[float] = None,
) -> VelocityMetrics:
    """Compute throughput over objectives created in the last window_days."""
    return _forecaster.velocity(objectives, window_days, now=now)


def create_scenario(
    objective: Objective,
    name: str,
    description: str,
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> Scenario:
    """Start a what-if scenario from a copy of the objective."""
    return _simulator.create_scenario(objective, name, description, historical_objectives, now=now)


def add_task(
    scenario: Scenario,
    task: Task,
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> Scenario:
    """Append a task to a new copy of the scenario."""
    return _simulator.add_task(scenario, task, historical_objectives, now=now)


def remove_task(
    scenario: Scenario,
    task_id: str,
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> Scenario:
    """Drop a top-level task from a new copy of the scenario."""
    return _simulator.remove_task(scenario, task_id, historical_objectives, now=now)


def modify_priority(
    scenario: Scenario,
    task_id: str,
    new_priority: int,
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> Scenario:
    """Change one task's priority; unknown ids leave the scenario as-is."""
    return _simulator.modify_priority(scenario, task_id, new_priority, historical_objectives, now=now)


def change_agent_role(
    scenario: Scenario,
    new_role: str,
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> Scenario:
    """Switch the agent role of a new copy of the scenario."""
    return _simulator.change_agent_role(scenario, new_role, historical_objectives, now=now)


def reorder_tasks(
    scenario: Scenario,
    task_ids: List[str],
    historical_objectives: List[Objective],
    now: Optional[float] = None,
) -> Scenario:
    """Rebuild the task order of a new copy of the scenario."""
    return _simulator.reorder_tasks(scenario, task_ids, historical_objectives, now=now)
