"""Prediction result models."""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List

from ..utils.datetime_utils import format_duration, ms_to_datetime


@dataclass
class TaskPrediction:
    """Predicted completion time for a single task."""

    estimated_duration: float
    confidence_score: float
    factors: List[str] = field(default_factory=list)
    similar_task_count: int = 0


@dataclass
class ObjectivePrediction:
    """Aggregated forecast for an objective."""

    total_estimated_time: float
    completion_at: float
    task_predictions: Dict[str, TaskPrediction]
    risk_level: str
    bottlenecks: List[str] = field(default_factory=list)

    @property
    def completion_date(self) -> datetime:
        """Projected completion as a datetime."""
        return ms_to_datetime(self.completion_at)

    def to_dict(self) -> Dict[str, Any]:
        """Convert prediction to dictionary for JSON export."""
        data = asdict(self)
        data['completion_date'] = self.completion_date.isoformat()
        return data

    def to_human_readable(self, titles: Dict[str, str] = None) -> str:
        """Generate human-readable report format."""
        titles = titles or {}
        lines = [
            "=== Objective Forecast ===",
            f"Total estimated time: {format_duration(self.total_estimated_time)}",
            f"Estimated completion: {self.completion_date:%Y-%m-%d %H:%M}",
            f"Risk level: {self.risk_level.upper()}",
            "",
            "Task Predictions:",
        ]

        for task_id, prediction in self.task_predictions.items():
            lines.append(f"  {titles.get(task_id, task_id)}:")
            lines.append(f"    Estimate: {format_duration(prediction.estimated_duration)}")
            lines.append(f"    Confidence: {prediction.confidence_score:.0%}")
            lines.append(f"    Similar tasks: {prediction.similar_task_count}")
            if prediction.factors:
                lines.append(f"    Factors: {', '.join(prediction.factors)}")

        if self.bottlenecks:
            lines.extend(["", "Bottlenecks:"])
            for title in self.bottlenecks:
                lines.append(f"  - {title}")

        lines.append("=" * 50)

        return "\n".join(lines)


@dataclass
class VelocityMetrics:
    """Windowed throughput metrics."""

    tasks_per_day: float
    objectives_per_week: float
    avg_task_duration: float

    def to_dict(self) -> Dict[str, float]:
        """Convert metrics to dictionary for JSON export."""
        return asdict(self)
