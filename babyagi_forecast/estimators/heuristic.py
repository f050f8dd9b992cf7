"""Rule-based duration estimator used when history is too thin."""

from typing import List, Optional

from ..engine.features import speed_multiplier
from ..models.task import Task
from ..models.prediction import TaskPrediction
from .base import DurationEstimator


class HeuristicEstimator(DurationEstimator):
    """Heuristic estimator: title length, priority, category and subtasks."""

    def __init__(self, config: dict):
        """Initialize heuristic estimator."""
        super().__init__(config)
        self.heuristic_config = config.get('heuristic', {})

    def estimate(
        self,
        task: Task,
        historical_tasks: List[Task] = None,
        agent_role: Optional[str] = None,
    ) -> TaskPrediction:
        """Estimate duration from task attributes alone."""
        cfg = self.heuristic_config
        duration = cfg.get('base_duration_ms', 180000)

        # Title length as a complexity proxy
        duration += len(task.title) * cfg.get('title_char_ms', 50)

        # Lower priority numbers add more time
        if task.priority:
            duration += (11 - task.priority) * cfg.get('priority_step_ms', 30000)

        if task.category:
            multipliers = cfg.get('category_multipliers', {})
            duration *= multipliers.get(
                task.category.lower(),
                cfg.get('default_category_multiplier', 1.3),
            )

        if task.subtasks:
            duration *= 1 + len(task.subtasks) * cfg.get('subtask_factor', 0.3)

        duration *= speed_multiplier(agent_role, self.config)

        return TaskPrediction(
            estimated_duration=max(0.0, duration),
            confidence_score=cfg.get('confidence', 0.4),
            factors=['Heuristic estimation', 'Insufficient historical data'],
            similar_task_count=0,
        )

    def get_estimator_name(self) -> str:
        """Return estimator name."""
        return "HEURISTIC"
