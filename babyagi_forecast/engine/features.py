"""Task feature extraction and similarity."""

import math
from typing import List, Optional, Sequence

from ..exceptions import FeatureMismatchError
from ..models.task import Task


FEATURE_LABELS = ['title_length', 'priority', 'category_complexity', 'subtask_count']


def category_complexity(category: Optional[str], config: dict) -> float:
    """Map a category name to its complexity score (case-insensitive)."""
    features_config = config.get('features', {})
    default = features_config.get('default_category_complexity', 4)
    if not category:
        return default
    return features_config.get('category_complexity', {}).get(category.lower(), default)


def extract_features(task: Task, config: dict) -> List[float]:
    """Build the similarity feature vector for a task."""
    default_priority = config.get('features', {}).get('default_priority', 5)
    priority = task.priority if task.priority is not None else default_priority

    return [
        len(task.title),
        priority,
        category_complexity(task.category, config),
        len(task.subtasks) * 2,
    ]


def cosine_similarity(features1: Sequence[float], features2: Sequence[float]) -> float:
    """Compute cosine similarity; zero-magnitude vectors score 0."""
    if len(features1) != len(features2):
        raise FeatureMismatchError(len(features1), len(features2))

    dot_product = sum(f1 * f2 for f1, f2 in zip(features1, features2))
    magnitude1 = math.sqrt(sum(f * f for f in features1))
    magnitude2 = math.sqrt(sum(f * f for f in features2))

    if magnitude1 == 0 or magnitude2 == 0:
        return 0.0

    return dot_product / (magnitude1 * magnitude2)


def speed_multiplier(agent_role: Optional[str], config: dict) -> float:
    """Get the duration multiplier for an agent role (<1 is faster)."""
    speeds = config.get('agent_speed', {})
    general = speeds.get('general', 1.0)
    return speeds.get(agent_role or 'general', general)
