"""Objective forecasting engine."""

import logging
from typing import Dict, List, Optional

from ..estimators.base import DurationEstimator
from ..models.task import Objective, Task
from ..models.prediction import ObjectivePrediction, TaskPrediction, VelocityMetrics
from ..utils.datetime_utils import DAY_MS, now_ms

logger = logging.getLogger(__name__)


class Forecaster:
    """Aggregates per-task estimates into objective forecasts."""

    def __init__(self, estimator: DurationEstimator, config: dict):
        """Initialize forecaster with estimator and configuration."""
        self.estimator = estimator
        self.config = config
        self.forecast_config = config.get('forecast', {})
        self.window_days = config.get('velocity', {}).get('window_days', 7)

    def predict_task(
        self,
        task: Task,
        historical_tasks: List[Task],
        agent_role: Optional[str] = None,
    ) -> TaskPrediction:
        """Predict completion time for a single task."""
        return self.estimator.estimate(task, historical_tasks, agent_role)

    def predict_objective(
        self,
        objective: Objective,
        historical_objectives: List[Objective],
        now: Optional[float] = None,
    ) -> ObjectivePrediction:
        """Forecast an objective's top-level tasks against the history pool."""
        if now is None:
            now = now_ms()

        cfg = self.forecast_config
        long_task_ms = cfg.get('long_task_ms', 600000)
        bottleneck_ms = cfg.get('bottleneck_ms', 900000)
        low_confidence = cfg.get('low_confidence', 0.5)

        historical_tasks = [task for obj in historical_objectives for task in obj.tasks]

        task_predictions: Dict[str, TaskPrediction] = {}
        total_estimated_time = 0.0
        high_risk_tasks = 0
        bottlenecks = []

        for task in objective.tasks:
            prediction = self.predict_task(task, historical_tasks, objective.agent_role)
            task_predictions[task.task_id] = prediction
            total_estimated_time += prediction.estimated_duration

            if (prediction.confidence_score < low_confidence
                    or prediction.estimated_duration > long_task_ms):
                high_risk_tasks += 1
            if prediction.estimated_duration > bottleneck_ms:
                bottlenecks.append(task.title)

        # Sequential execution overhead for context switching
        total_estimated_time *= cfg.get('sequential_overhead', 1.2)

        risk_ratio = high_risk_tasks / max(len(objective.tasks), 1)
        risk_level = self._classify_risk(risk_ratio)

        logger.debug(
            "Forecast for %s: %d tasks, total=%.0fms, risk=%s (ratio %.2f)",
            objective.objective_id, len(objective.tasks),
            total_estimated_time, risk_level, risk_ratio,
        )

        return ObjectivePrediction(
            total_estimated_time=total_estimated_time,
            completion_at=now + total_estimated_time,
            task_predictions=task_predictions,
            risk_level=risk_level,
            bottlenecks=bottlenecks[:cfg.get('max_bottlenecks', 3)],
        )

    def _classify_risk(self, risk_ratio: float) -> str:
        """Map a high-risk task ratio to a risk level."""
        if risk_ratio > self.forecast_config.get('high_risk_ratio', 0.5):
            return 'high'
        if risk_ratio > self.forecast_config.get('medium_risk_ratio', 0.25):
            return 'medium'
        return 'low'

    def velocity(
        self,
        objectives: List[Objective],
        window_days: Optional[int] = None,
        now: Optional[float] = None,
    ) -> VelocityMetrics:
        """Compute throughput over objectives created within the window."""
        days = self.window_days if window_days is None else window_days
        if days <= 0:
            raise ValueError(f"Velocity window must be positive: {days}")
        if now is None:
            now = now_ms()
        cutoff = now - days * DAY_MS

        recent = [obj for obj in objectives if obj.created_at >= cutoff]
        completed_tasks = [
            task for obj in recent for task in obj.tasks if task.has_timing()
        ]
        completed_objectives = sum(1 for obj in recent if obj.status == 'completed')

        if completed_tasks:
            avg_task_duration = (
                sum(task.duration_ms() for task in completed_tasks) / len(completed_tasks)
            )
        else:
            avg_task_duration = 0

        return VelocityMetrics(
            tasks_per_day=len(completed_tasks) / days,
            objectives_per_week=completed_objectives / days * 7,
            avg_task_duration=avg_task_duration,
        )
