"""Scenario comparison and recommendations."""

from typing import List

from ..models.scenario import Scenario, ScenarioComparison
from ..utils.datetime_utils import format_duration


RISK_ORDINALS = {'low': 1, 'medium': 2, 'high': 3}


def compare_scenarios(scenarios: List[Scenario]) -> ScenarioComparison:
    """Compare scenarios against the first one and suggest options."""
    if not scenarios:
        return ScenarioComparison(scenarios=[])

    base_time = scenarios[0].prediction.total_estimated_time
    time_deltas = [s.prediction.total_estimated_time - base_time for s in scenarios]

    risk_comparison = [
        f"{s.prediction.risk_level.upper()} "
        f"({len(s.modified_objective.tasks)} tasks, {len(s.prediction.bottlenecks)} bottlenecks)"
        for s in scenarios
    ]

    recommendations = []

    # index() returns the first occurrence, so ties favor earlier scenarios
    fastest_index = time_deltas.index(min(time_deltas))
    if fastest_index > 0:
        recommendations.append(
            f'Scenario "{scenarios[fastest_index].name}" is the fastest option'
        )

    risk_scores = [RISK_ORDINALS[s.prediction.risk_level] for s in scenarios]
    lowest_risk_index = risk_scores.index(min(risk_scores))
    if lowest_risk_index != fastest_index:
        recommendations.append(
            f'Scenario "{scenarios[lowest_risk_index].name}" has the lowest risk'
        )

    for index, scenario in enumerate(scenarios[1:], start=1):
        added = scenario.count_modifications('add_task')
        removed = scenario.count_modifications('remove_task')

        if removed > 0 and time_deltas[index] < 0:
            recommendations.append(
                f'Removing {removed} task(s) in "{scenario.name}" saves '
                f"{format_duration(-time_deltas[index], coarse=True)}"
            )

        if added > 0 and scenario.prediction.risk_level == 'low':
            recommendations.append(
                f'Adding {added} task(s) in "{scenario.name}" is feasible with low risk'
            )

    return ScenarioComparison(
        scenarios=list(scenarios),
        time_deltas=time_deltas,
        risk_comparison=risk_comparison,
        recommendations=recommendations,
    )


def scenario_impact(scenario: Scenario, base_scenario: Scenario) -> str:
    """Summarize how a scenario differs from a base scenario."""
    time_diff = (
        scenario.prediction.total_estimated_time
        - base_scenario.prediction.total_estimated_time
    )
    task_diff = (
        len(scenario.modified_objective.tasks)
        - len(base_scenario.modified_objective.tasks)
    )

    parts = []

    if time_diff > 0:
        parts.append(f"+{format_duration(time_diff, coarse=True)} longer")
    elif time_diff < 0:
        parts.append(f"{format_duration(-time_diff, coarse=True)} faster")
    else:
        parts.append("Same duration")

    if task_diff != 0:
        parts.append(f"{'+' if task_diff > 0 else ''}{task_diff} tasks")

    if scenario.prediction.risk_level != base_scenario.prediction.risk_level:
        parts.append(f"{scenario.prediction.risk_level} risk")

    return ", ".join(parts)
