"""Main entry point for the objective forecasting engine."""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from babyagi_forecast.api import build_simulator
from babyagi_forecast.models.task import Objective
from babyagi_forecast.simulation.comparison import compare_scenarios, scenario_impact
from babyagi_forecast.simulation.generator import HistoryGenerator
from babyagi_forecast.utils.config import load_config, get_default_config
from babyagi_forecast.utils.datetime_utils import format_duration, now_ms


def resolve_config(config_path: str) -> dict:
    """Load the config file if it exists, otherwise use defaults."""
    if config_path and Path(config_path).exists():
        return load_config(config_path)
    return get_default_config()


def load_objectives(objectives_path: Optional[str], config: dict, now: float) -> List[Objective]:
    """Load objectives from a JSON export, or generate a seeded history."""
    if not objectives_path:
        return HistoryGenerator(seed=42, config=config).generate_objectives(now)

    with open(objectives_path, 'r') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get('objectives', [])
    return [Objective.from_dict(record) for record in data]


def select_objective(objectives: List[Objective], objective_id: Optional[str]) -> Objective:
    """Pick the requested objective, defaulting to the most recent one."""
    if not objectives:
        raise ValueError("No objectives available")
    if objective_id is None:
        return max(objectives, key=lambda obj: obj.created_at)
    for objective in objectives:
        if objective.objective_id == objective_id:
            return objective
    raise ValueError(f"Unknown objective: {objective_id}")


def run_predict(config: dict, objectives: List[Objective], objective_id: Optional[str], now: float):
    """Forecast one objective against the full history."""
    simulator = build_simulator(config)
    objective = select_objective(objectives, objective_id)

    prediction = simulator.forecaster.predict_objective(objective, objectives, now=now)
    titles = {task.task_id: task.title for task in objective.tasks}

    print(f"\nForecast for {objective.title} ({objective.objective_id})")
    print(prediction.to_human_readable(titles))

    return prediction


def run_velocity(config: dict, objectives: List[Objective], days: Optional[int], now: float):
    """Print velocity metrics for the recent window."""
    forecaster = build_simulator(config).forecaster
    metrics = forecaster.velocity(objectives, days, now=now)

    print(f"\nVelocity over the last {forecaster.window_days if days is None else days} days")
    print(f"  Tasks per day: {metrics.tasks_per_day:.2f}")
    print(f"  Objectives per week: {metrics.objectives_per_week:.2f}")
    print(f"  Average task duration: {format_duration(metrics.avg_task_duration)}")

    return metrics


def run_simulation(config: dict, objectives: List[Objective], objective_id: Optional[str], now: float):
    """Compare the current plan against a trimmed plan and a manager-led plan."""
    simulator = build_simulator(config)
    objective = select_objective(objectives, objective_id)

    baseline = simulator.create_scenario(
        objective, 'Current Plan', 'The current objective as-is', objectives, now=now
    )

    trimmed = simulator.create_scenario(
        objective, 'Trimmed plan', 'Drop the longest task', objectives, now=now
    )
    if objective.tasks:
        longest_id = max(
            baseline.prediction.task_predictions.items(),
            key=lambda item: item[1].estimated_duration,
        )[0]
        trimmed = simulator.remove_task(trimmed, longest_id, objectives, now=now)

    managed = simulator.create_scenario(
        objective, 'Manager-led', 'Hand the objective to a manager agent', objectives, now=now
    )
    managed = simulator.change_agent_role(managed, 'manager', objectives, now=now)

    scenarios = [baseline, trimmed, managed]
    comparison = compare_scenarios(scenarios)

    print(f"\nScenario comparison for {objective.title}")
    for scenario, risk in zip(scenarios, comparison.risk_comparison):
        print(f"  {scenario.name}: {format_duration(scenario.prediction.total_estimated_time)} - {risk}")
        if scenario is not baseline:
            print(f"    Impact: {scenario_impact(scenario, baseline)}")
    print("\nRecommendations:")
    for recommendation in comparison.recommendations or ["No changes recommended"]:
        print(f"  - {recommendation}")

    return comparison


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Objective Forecasting and What-If Simulation"
    )
    parser.add_argument(
        'command',
        choices=['predict', 'velocity', 'simulate', 'generate-history'],
        help='Command to run'
    )
    parser.add_argument(
        '--config',
        type=str,
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '--objectives',
        type=str,
        default=None,
        help='JSON file with exported objectives (default: generated history)'
    )
    parser.add_argument(
        '--objective-id',
        type=str,
        default=None,
        help='Objective to forecast or simulate (default: most recent)'
    )
    parser.add_argument(
        '--days',
        type=int,
        default=None,
        help='Velocity window in days (default: from config)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    config = resolve_config(args.config)
    now = now_ms()

    if args.command == 'generate-history':
        objectives = HistoryGenerator(seed=42, config=config).generate_objectives(now)

        results_dir = Path("results")
        results_dir.mkdir(exist_ok=True)
        with open(results_dir / "generated_objectives.json", 'w') as f:
            json.dump([obj.to_dict() for obj in objectives], f, indent=2)

        print(f"Generated {len(objectives)} objectives")
        print(f"Objectives saved to: results/generated_objectives.json")
        return

    objectives = load_objectives(args.objectives, config, now)

    if args.command == 'predict':
        run_predict(config, objectives, args.objective_id, now)
    elif args.command == 'velocity':
        run_velocity(config, objectives, args.days, now)
    elif args.command == 'simulate':
        run_simulation(config, objectives, args.objective_id, now)


if __name__ == "__main__":
    main()
