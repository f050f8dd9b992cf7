"""Base duration estimator interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.task import Task
from ..models.prediction import TaskPrediction


class DurationEstimator(ABC):
    """Abstract base class for task duration estimators."""

    def __init__(self, config: dict):
        """Initialize estimator with configuration."""
        self.config = config

    @abstractmethod
    def estimate(
        self,
        task: Task,
        historical_tasks: List[Task],
        agent_role: Optional[str] = None,
    ) -> TaskPrediction:
        """Predict how long a task will take."""
        pass

    @abstractmethod
    def get_estimator_name(self) -> str:
        """Return the name of this estimator."""
        pass
