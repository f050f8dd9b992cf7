"""Tests for objective forecasting and velocity."""

import pytest

from babyagi_forecast.api import build_forecaster
from babyagi_forecast.estimators.heuristic import HeuristicEstimator
from babyagi_forecast.models.task import Objective, Task
from babyagi_forecast.utils.config import get_default_config
from babyagi_forecast.utils.datetime_utils import DAY_MS, MINUTE_MS


NOW = 1_700_000_000_000


def _similar(task_id: str, minutes: float = 5, completed: bool = True) -> Task:
    return Task(
        task_id=task_id,
        title="Build API",
        status="completed" if completed else "pending",
        priority=5,
        created_at=NOW - DAY_MS,
        completed_at=NOW - DAY_MS + int(minutes * MINUTE_MS) if completed else None,
        category="execution",
    )


def _big(task_id: str, title: str = "x") -> Task:
    # Nearly orthogonal to the history; heuristic estimate is about 56 minutes
    return Task(
        task_id=task_id,
        title=title,
        priority=1,
        category="documentation",
        subtasks=[Task(task_id=f"{task_id}_s{i}", title="s") for i in range(20)],
    )


def _objective(tasks, objective_id: str = "obj", agent_role: str = None,
               status: str = "active", created_at: float = NOW) -> Objective:
    return Objective(
        objective_id=objective_id,
        title="Ship it",
        status=status,
        created_at=created_at,
        tasks=tasks,
        agent_role=agent_role,
    )


@pytest.fixture
def forecaster():
    return build_forecaster()


@pytest.fixture
def history():
    return [_objective([_similar(f"h{i}") for i in range(5)], objective_id="hist")]


class TestPredictObjective:
    def test_heuristic_only_forecast(self, forecaster):
        tasks = [
            Task(task_id="t1", title="Research market", priority=3, category="research"),
            Task(task_id="t2", title="Plan launch", priority=5, category="planning"),
            Task(task_id="t3", title="Write copy", priority=8),
        ]
        prediction = forecaster.predict_objective(_objective(tasks), [], now=NOW)

        heuristic = HeuristicEstimator(get_default_config())
        expected = sum(heuristic.estimate(t).estimated_duration for t in tasks) * 1.2

        assert all(p.confidence_score == 0.4 for p in prediction.task_predictions.values())
        assert prediction.total_estimated_time == pytest.approx(expected)
        assert prediction.completion_at == pytest.approx(NOW + expected)
        # every heuristic task is low confidence
        assert prediction.risk_level == "high"

    def test_predictions_keyed_by_task_in_order(self, forecaster, history):
        tasks = [_similar("a", completed=False), _similar("b", completed=False)]
        prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        assert list(prediction.task_predictions) == ["a", "b"]

    def test_low_risk_with_confident_history(self, forecaster, history):
        tasks = [_similar(f"t{i}", completed=False) for i in range(4)]
        prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)

        assert prediction.risk_level == "low"
        assert prediction.bottlenecks == []
        assert prediction.total_estimated_time == pytest.approx(4 * 5 * MINUTE_MS * 1.2)

    def test_quarter_risky_is_still_low(self, forecaster, history):
        tasks = [_similar(f"t{i}", completed=False) for i in range(3)] + [_big("b1")]
        prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        assert prediction.risk_level == "low"

    def test_half_risky_is_medium(self, forecaster, history):
        tasks = [_similar("t1", completed=False), _similar("t2", completed=False),
                 _big("b1"), _big("b2")]
        prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        assert prediction.risk_level == "medium"

    def test_more_risky_tasks_never_lower_risk(self, forecaster, history):
        levels = {"low": 1, "medium": 2, "high": 3}
        previous = 0
        for risky in range(5):
            tasks = [_big(f"b{i}") for i in range(risky)]
            tasks += [_similar(f"t{i}", completed=False) for i in range(4 - risky)]
            prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)
            assert levels[prediction.risk_level] >= previous
            previous = levels[prediction.risk_level]
        assert previous == 3

    def test_bottlenecks_capped_in_task_order(self, forecaster, history):
        tasks = [_big(f"b{i}", title=letter) for i, letter in enumerate("abcde")]
        prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        assert prediction.bottlenecks == ["a", "b", "c"]

    def test_subtasks_are_not_predicted(self, forecaster):
        parent = Task(task_id="p", title="Parent", subtasks=[Task(task_id="c", title="Child")])
        prediction = forecaster.predict_objective(_objective([parent]), [], now=NOW)
        assert list(prediction.task_predictions) == ["p"]

    def test_empty_objective(self, forecaster):
        prediction = forecaster.predict_objective(_objective([]), [], now=NOW)
        assert prediction.total_estimated_time == 0
        assert prediction.risk_level == "low"
        assert prediction.completion_at == NOW

    def test_objective_role_is_applied(self, forecaster):
        tasks = [Task(task_id="t1", title="abc")]
        general = forecaster.predict_objective(_objective(tasks), [], now=NOW)
        manager = forecaster.predict_objective(_objective(tasks, agent_role="manager"), [], now=NOW)
        assert manager.total_estimated_time == pytest.approx(general.total_estimated_time * 0.8)

    def test_is_deterministic(self, forecaster, history):
        tasks = [_similar("t1", completed=False), _big("b1")]
        first = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        second = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        assert first == second

    def test_human_readable_report(self, forecaster, history):
        tasks = [_big("b1", title="Giant task")]
        prediction = forecaster.predict_objective(_objective(tasks), history, now=NOW)
        report = prediction.to_human_readable({"b1": "Giant task"})

        assert "Risk level: HIGH" in report
        assert "Bottlenecks:" in report
        assert "Heuristic estimation" in report
        assert prediction.to_dict()["risk_level"] == "high"


class TestVelocity:
    def test_no_history(self, forecaster):
        metrics = forecaster.velocity([], 7, now=NOW)
        assert metrics.tasks_per_day == 0
        assert metrics.objectives_per_week == 0
        assert metrics.avg_task_duration == 0

    def test_windowed_metrics(self, forecaster):
        recent_done = _objective(
            [_similar("a", 10), _similar("b", 20), _similar("c", completed=False)],
            objective_id="recent_done", status="completed", created_at=NOW - DAY_MS,
        )
        recent_active = _objective(
            [_similar("d", 30)], objective_id="recent_active", created_at=NOW - 2 * DAY_MS,
        )
        old = _objective(
            [_similar("e", 100)], objective_id="old", status="completed",
            created_at=NOW - 10 * DAY_MS,
        )

        metrics = forecaster.velocity([recent_done, recent_active, old], 7, now=NOW)

        assert metrics.tasks_per_day == pytest.approx(3 / 7)
        assert metrics.objectives_per_week == pytest.approx(1.0)
        assert metrics.avg_task_duration == pytest.approx(20 * MINUTE_MS)

    def test_default_window_from_config(self, forecaster):
        objective = _objective([_similar("a", 10)], created_at=NOW - 6 * DAY_MS)
        metrics = forecaster.velocity([objective], now=NOW)
        assert metrics.tasks_per_day == pytest.approx(1 / 7)

    @pytest.mark.parametrize("window_days", [0, -3])
    def test_non_positive_window_rejected(self, forecaster, window_days):
        objective = _objective([_similar("a", 10)], created_at=NOW - DAY_MS)
        with pytest.raises(ValueError, match="window"):
            forecaster.velocity([objective], window_days, now=NOW)
