"""What-if scenario simulation."""

import logging
import uuid
from dataclasses import replace
from typing import List, Optional

from ..engine.forecaster import Forecaster
from ..models.scenario import Scenario, ScenarioModification
from ..models.task import Objective, Task
from ..utils.datetime_utils import now_ms

logger = logging.getLogger(__name__)


class ScenarioSimulator:
    """Creates and mutates scenarios, re-forecasting after every change.

    Every mutation returns a new Scenario holding its own copy of the
    modified objective and its own modification list, so earlier scenario
    values stay valid for comparison or undo.
    """

    def __init__(self, forecaster: Forecaster):
        """Initialize simulator with a forecaster."""
        self.forecaster = forecaster

    def create_scenario(
        self,
        objective: Objective,
        name: str,
        description: str,
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> Scenario:
        """Create a scenario from an independent copy of the objective."""
        if now is None:
            now = now_ms()

        modified_objective = objective.clone()
        prediction = self.forecaster.predict_objective(
            modified_objective, historical_objectives, now=now
        )

        scenario = Scenario(
            scenario_id=f"scenario-{int(now)}-{uuid.uuid4().hex[:7]}",
            name=name,
            description=description,
            base_objective=objective,
            modified_objective=modified_objective,
            prediction=prediction,
            created_at=now,
            modifications=[],
        )
        logger.info("Created scenario %s (%s)", scenario.scenario_id, name)
        return scenario

    def add_task(
        self,
        scenario: Scenario,
        task: Task,
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> Scenario:
        """Append a task to the scenario's objective."""
        objective = scenario.modified_objective.clone()
        objective.tasks.append(task.clone())

        return self._derive(
            scenario,
            objective,
            historical_objectives,
            ScenarioModification(
                kind='add_task',
                description=f"Added task: {task.title}",
                task_id=task.task_id,
                details={'task': task.clone()},
            ),
            now,
        )

    def remove_task(
        self,
        scenario: Scenario,
        task_id: str,
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> Scenario:
        """Remove a top-level task; unknown ids only re-forecast."""
        objective = scenario.modified_objective.clone()
        removed = objective.find_task(task_id)
        objective.tasks = [t for t in objective.tasks if t.task_id != task_id]

        modification = None
        if removed is not None:
            modification = ScenarioModification(
                kind='remove_task',
                description=f"Removed task: {removed.title}",
                task_id=task_id,
                details={'task': removed},
            )
        else:
            logger.debug("Task %s not in scenario %s", task_id, scenario.scenario_id)

        return self._derive(scenario, objective, historical_objectives, modification, now)

    def modify_priority(
        self,
        scenario: Scenario,
        task_id: str,
        new_priority: int,
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> Scenario:
        """Change a task's priority; unknown ids return the scenario as-is."""
        if scenario.modified_objective.find_task(task_id) is None:
            logger.debug("Task %s not in scenario %s", task_id, scenario.scenario_id)
            return scenario

        objective = scenario.modified_objective.clone()
        task = objective.find_task(task_id)
        old_priority = task.priority if task.priority else 5
        task.priority = new_priority

        return self._derive(
            scenario,
            objective,
            historical_objectives,
            ScenarioModification(
                kind='change_priority',
                description=(
                    f'Changed priority of "{task.title}" from {old_priority} to {new_priority}'
                ),
                task_id=task_id,
                details={'old_priority': old_priority, 'new_priority': new_priority},
            ),
            now,
        )

    def change_agent_role(
        self,
        scenario: Scenario,
        new_role: str,
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> Scenario:
        """Switch the agent role, which rescales every task estimate."""
        objective = scenario.modified_objective.clone()
        old_role = objective.agent_role or 'general'
        objective.agent_role = new_role

        return self._derive(
            scenario,
            objective,
            historical_objectives,
            ScenarioModification(
                kind='change_role',
                description=f"Changed agent role from {old_role} to {new_role}",
                details={'old_role': old_role, 'new_role': new_role},
            ),
            now,
        )

    def reorder_tasks(
        self,
        scenario: Scenario,
        task_ids: List[str],
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> Scenario:
        """Rebuild the task list in the given order; unlisted tasks are dropped."""
        objective = scenario.modified_objective.clone()
        by_id = {task.task_id: task for task in objective.tasks}
        objective.tasks = [by_id[task_id].clone() for task_id in task_ids if task_id in by_id]

        return self._derive(
            scenario,
            objective,
            historical_objectives,
            ScenarioModification(
                kind='reorder_tasks',
                description="Reordered tasks",
                details={'task_ids': list(task_ids)},
            ),
            now,
        )

    def _derive(
        self,
        scenario: Scenario,
        objective: Objective,
        historical_objectives: List[Objective],
        modification: Optional[ScenarioModification],
        now: Optional[float],
    ) -> Scenario:
        """Build the successor scenario with a fresh forecast and log."""
        modifications = list(scenario.modifications)
        if modification is not None:
            modifications.append(modification)
            logger.info("Scenario %s: %s", scenario.scenario_id, modification.description)

        return replace(
            scenario,
            modified_objective=objective,
            prediction=self.forecaster.predict_objective(
                objective, historical_objectives, now=now
            ),
            modifications=modifications,
        )
