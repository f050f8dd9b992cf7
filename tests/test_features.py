"""Tests for feature extraction and similarity."""

import pytest

from babyagi_forecast.engine.features import (
    category_complexity,
    cosine_similarity,
    extract_features,
    speed_multiplier,
)
from babyagi_forecast.exceptions import FeatureMismatchError
from babyagi_forecast.models.task import Task
from babyagi_forecast.utils.config import get_default_config


CONFIG = get_default_config()


class TestExtractFeatures:
    def test_vector_layout(self):
        task = Task(
            task_id="t1",
            title="Build API",
            priority=2,
            category="execution",
            subtasks=[Task(task_id="s1", title="a"), Task(task_id="s2", title="b")],
        )
        assert extract_features(task, CONFIG) == [9, 2, 6, 4]

    def test_missing_priority_defaults_to_five(self):
        task = Task(task_id="t1", title="abc")
        assert extract_features(task, CONFIG)[1] == 5

    def test_category_is_case_insensitive(self):
        assert category_complexity("Optimization", CONFIG) == 7
        assert category_complexity("TESTING", CONFIG) == 5

    def test_unknown_and_absent_category_default(self):
        assert category_complexity("marketing", CONFIG) == 4
        assert category_complexity(None, CONFIG) == 4


class TestCosineSimilarity:
    def test_identical_vectors(self):
        assert cosine_similarity([9, 5, 6, 0], [9, 5, 6, 0]) == pytest.approx(1.0)

    def test_scaled_vectors_are_identical_in_direction(self):
        assert cosine_similarity([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)

    def test_zero_magnitude_scores_zero(self):
        assert cosine_similarity([0, 0, 0], [1, 2, 3]) == 0.0
        assert cosine_similarity([1, 2, 3], [0, 0, 0]) == 0.0

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1, 0], [0, 1]) == 0.0

    def test_mismatched_lengths_raise(self):
        with pytest.raises(FeatureMismatchError) as exc_info:
            cosine_similarity([1, 2, 3], [1, 2])
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.left_length == 3
        assert exc_info.value.right_length == 2


class TestSpeedMultiplier:
    @pytest.mark.parametrize("role,expected", [
        ("developer", 0.9),
        ("designer", 1.1),
        ("researcher", 1.3),
        ("manager", 0.8),
        ("analyst", 1.0),
        ("general", 1.0),
    ])
    def test_role_table(self, role, expected):
        assert speed_multiplier(role, CONFIG) == expected

    def test_missing_role_uses_general(self):
        assert speed_multiplier(None, CONFIG) == 1.0

    def test_unknown_role_uses_general(self):
        assert speed_multiplier("astronaut", CONFIG) == 1.0
