"""Similarity-based duration estimator."""

import logging
import math
from typing import List, Optional

from ..engine.features import cosine_similarity, extract_features, speed_multiplier
from ..models.task import Task
from ..models.prediction import TaskPrediction
from .base import DurationEstimator
from .heuristic import HeuristicEstimator

logger = logging.getLogger(__name__)


class SimilarityEstimator(DurationEstimator):
    """Estimates from the durations of the most similar completed tasks.

    Historical tasks are compared by cosine similarity of their feature
    vectors. Only candidates above the similarity threshold count, and at
    most ``max_similar_tasks`` of them. When history is too thin or nothing
    is similar enough, the fallback estimator answers instead.
    """

    def __init__(self, config: dict, fallback: Optional[DurationEstimator] = None):
        """Initialize similarity estimator."""
        super().__init__(config)
        self.prediction_config = config.get('prediction', {})
        self.fallback = fallback or HeuristicEstimator(config)

    def estimate(
        self,
        task: Task,
        historical_tasks: List[Task],
        agent_role: Optional[str] = None,
    ) -> TaskPrediction:
        """Predict task duration from similar historical tasks."""
        cfg = self.prediction_config
        completed = [t for t in historical_tasks if t.has_timing()]

        if len(completed) < cfg.get('min_history', 3):
            logger.debug(
                "Insufficient history for %s (%d timed tasks), using %s",
                task.task_id, len(completed), self.fallback.get_estimator_name(),
            )
            return self.fallback.estimate(task, historical_tasks, agent_role)

        similar = self._find_similar(task, completed)

        if not similar:
            logger.debug("No similar tasks for %s, using fallback", task.task_id)
            return self.fallback.estimate(task, historical_tasks, agent_role)

        durations = [t.duration_ms() for t in similar]
        avg_duration = sum(durations) / len(durations)
        std_dev = math.sqrt(
            sum((d - avg_duration) ** 2 for d in durations) / len(durations)
        )

        estimated_duration = avg_duration * speed_multiplier(agent_role, self.config)

        return TaskPrediction(
            estimated_duration=max(0.0, estimated_duration),
            confidence_score=self._confidence(len(similar), avg_duration, std_dev),
            factors=self._factors(task, len(similar)),
            similar_task_count=len(similar),
        )

    def _find_similar(self, task: Task, candidates: List[Task]) -> List[Task]:
        """Rank candidates by similarity, keeping the best above threshold."""
        threshold = self.prediction_config.get('similarity_threshold', 0.3)
        limit = self.prediction_config.get('max_similar_tasks', 10)

        features = extract_features(task, self.config)
        scored = []
        for candidate in candidates:
            similarity = cosine_similarity(features, extract_features(candidate, self.config))
            if similarity > threshold:
                scored.append((similarity, candidate))

        # Stable sort keeps corpus order among equal scores
        scored.sort(key=lambda item: item[0], reverse=True)
        return [candidate for _, candidate in scored[:limit]]

    def _confidence(self, match_count: int, avg_duration: float, std_dev: float) -> float:
        """Average of sample-size and variance confidence, each in [0, 1]."""
        limit = self.prediction_config.get('max_similar_tasks', 10)
        sample_confidence = min(match_count / limit, 1.0)

        if avg_duration > 0:
            variance_confidence = max(0.0, min(1.0, 1.0 - std_dev / avg_duration))
        else:
            variance_confidence = 0.0

        return max(0.0, min(1.0, (sample_confidence + variance_confidence) / 2))

    def _factors(self, task: Task, match_count: int) -> List[str]:
        """List human-readable factors behind the estimate."""
        cfg = self.prediction_config
        factors = []

        if task.priority and task.priority <= cfg.get('high_priority_cutoff', 3):
            factors.append('High priority')
        if task.category:
            factors.append(f"{task.category} task")
        if task.subtasks:
            factors.append(f"{len(task.subtasks)} subtasks")
        if match_count >= cfg.get('strong_history_count', 5):
            factors.append('Strong historical data')

        return factors

    def get_estimator_name(self) -> str:
        """Return estimator name."""
        return "SIMILARITY"
