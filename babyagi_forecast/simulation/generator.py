"""Synthetic objective history generator."""

import random
from typing import List

from ..models.task import AGENT_ROLES, Objective, Task
from ..utils.datetime_utils import DAY_MS, MINUTE_MS


CATEGORIES = ['research', 'planning', 'execution', 'testing', 'documentation', 'optimization']

TASK_TITLES = {
    'research': ['Survey existing solutions', 'Collect user feedback', 'Review prior art'],
    'planning': ['Draft milestone plan', 'Define acceptance criteria', 'Estimate resources'],
    'execution': ['Implement core workflow', 'Build data pipeline', 'Integrate payment API'],
    'testing': ['Write regression tests', 'Run load tests', 'Verify edge cases'],
    'documentation': ['Update README', 'Write release notes', 'Document API endpoints'],
    'optimization': ['Profile slow queries', 'Reduce bundle size', 'Tune cache settings'],
}


class HistoryGenerator:
    """Generates deterministic objective histories for demos and evaluation."""

    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
        self.generator_config = self.config.get('generator', {})

    def generate_task(self, task_id: str, created_at: float, completed: bool) -> Task:
        """Generate one task, optionally completed with a realistic duration."""
        category = self.random.choice(CATEGORIES) if self.random.random() < 0.8 else None
        title = self.random.choice(TASK_TITLES[category or self.random.choice(CATEGORIES)])
        priority = self.random.randint(1, 10)

        completed_at = None
        if completed:
            # Mostly short tasks with a long tail
            if self.random.random() < 0.7:
                minutes = self.random.uniform(2, 12)
            else:
                minutes = self.random.uniform(12, 45)
            completed_at = created_at + int(minutes * MINUTE_MS)

        return Task(
            task_id=task_id,
            title=title,
            status='completed' if completed else 'pending',
            priority=priority,
            created_at=created_at,
            completed_at=completed_at,
            category=category,
        )

    def generate_objectives(self, now: float, count: int = None) -> List[Objective]:
        """Generate a history of objectives created over the last days."""
        count = count or self.generator_config.get('objective_count', 12)
        min_tasks, max_tasks = self.generator_config.get('tasks_per_objective', [3, 8])
        history_days = self.generator_config.get('history_days', 14)
        completion_rate = self.generator_config.get('completion_rate', 0.7)

        objectives = []
        for i in range(count):
            objective_id = f"obj_{i:03d}"
            created_at = now - int(self.random.uniform(0, history_days) * DAY_MS)
            objective_done = self.random.random() < completion_rate

            tasks = []
            for j in range(self.random.randint(min_tasks, max_tasks)):
                completed = objective_done or self.random.random() < completion_rate
                task_created = created_at + j * MINUTE_MS
                tasks.append(self.generate_task(f"{objective_id}_task_{j:02d}", task_created, completed))

            objectives.append(Objective(
                objective_id=objective_id,
                title=f"Objective {i}",
                description=f"Generated objective {i}",
                status='completed' if objective_done else 'active',
                created_at=created_at,
                tasks=tasks,
                agent_role=self.random.choice(AGENT_ROLES),
            ))

        return objectives
