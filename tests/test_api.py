"""Tests for the module-level functions."""

import babyagi_forecast as forecast
from babyagi_forecast import Objective, Task


NOW = 1_700_000_000_000


def _objective():
    return Objective(
        objective_id="obj",
        title="Write report",
        created_at=NOW,
        tasks=[
            Task(task_id="t1", title="Gather data", priority=3, category="research"),
            Task(task_id="t2", title="Draft report", priority=5, category="documentation"),
            Task(task_id="t3", title="Review", priority=7),
        ],
    )


def test_velocity_with_no_history():
    metrics = forecast.velocity([], 7)
    assert (metrics.tasks_per_day, metrics.objectives_per_week, metrics.avg_task_duration) == (0, 0, 0)


def test_predict_task_without_history():
    prediction = forecast.predict_task(Task(task_id="t", title="abc"), [])
    assert prediction.confidence_score == 0.4


def test_predict_objective_is_deterministic():
    first = forecast.predict_objective(_objective(), [], now=NOW)
    second = forecast.predict_objective(_objective(), [], now=NOW)
    assert first == second


def test_scenario_workflow():
    baseline = forecast.create_scenario(_objective(), "Current Plan", "As-is", [], now=NOW)
    trimmed = forecast.remove_task(baseline, "t1", [], now=NOW)
    trimmed = forecast.modify_priority(trimmed, "nonexistent-id", 7, [], now=NOW)
    trimmed = forecast.reorder_tasks(trimmed, ["t3", "t2"], [], now=NOW)
    trimmed = forecast.change_agent_role(trimmed, "analyst", [], now=NOW)
    extended = forecast.add_task(baseline, Task(task_id="t4", title="Publish"), [], now=NOW)

    assert [m.kind for m in trimmed.modifications] == ["remove_task", "reorder_tasks", "change_role"]
    assert len(baseline.modified_objective.tasks) == 3

    comparison = forecast.compare_scenarios([baseline, trimmed, extended])
    assert comparison.time_deltas[0] == 0
    assert comparison.time_deltas[1] < 0 < comparison.time_deltas[2]
    assert any(r.startswith('Removing 1 task(s) in "Current Plan" saves') for r in comparison.recommendations)
    assert forecast.format_duration(comparison.time_deltas[2]).endswith("m")


def test_mutations_use_injected_time():
    baseline = forecast.create_scenario(_objective(), "Current Plan", "As-is", [], now=NOW)
    mutated = [
        forecast.add_task(baseline, Task(task_id="t4", title="Publish"), [], now=NOW),
        forecast.remove_task(baseline, "t1", [], now=NOW),
        forecast.modify_priority(baseline, "t2", 1, [], now=NOW),
        forecast.change_agent_role(baseline, "manager", [], now=NOW),
        forecast.reorder_tasks(baseline, ["t2", "t1"], [], now=NOW),
    ]

    for scenario in mutated:
        prediction = scenario.prediction
        assert prediction.completion_at == NOW + prediction.total_estimated_time
