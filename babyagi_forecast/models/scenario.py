"""Scenario models for what-if simulation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .prediction import ObjectivePrediction
from .task import Objective


MODIFICATION_KINDS = (
    'add_task',
    'remove_task',
    'modify_task',
    'change_role',
    'change_priority',
    'reorder_tasks',
)


@dataclass
class ScenarioModification:
    """Records a single change applied to a scenario."""

    kind: str
    description: str
    task_id: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.kind not in MODIFICATION_KINDS:
            raise ValueError(f"Unknown modification kind: {self.kind}")


@dataclass
class Scenario:
    """A named what-if variant of an objective.

    ``base_objective`` is the objective the scenario was created from and is
    never mutated. ``modified_objective`` is owned by this scenario value
    alone; simulator operations hand back a new scenario with a fresh copy.
    """

    scenario_id: str
    name: str
    description: str
    base_objective: Objective
    modified_objective: Objective
    prediction: ObjectivePrediction
    created_at: float
    modifications: List[ScenarioModification] = field(default_factory=list)

    def count_modifications(self, kind: str) -> int:
        """Count logged modifications of one kind."""
        return sum(1 for m in self.modifications if m.kind == kind)


@dataclass
class ScenarioComparison:
    """Side-by-side comparison of scenarios against the first one."""

    scenarios: List[Scenario] = field(default_factory=list)
    time_deltas: List[float] = field(default_factory=list)
    risk_comparison: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert comparison to dictionary for JSON export."""
        return {
            'scenarios': [
                {
                    'id': s.scenario_id,
                    'name': s.name,
                    'total_estimated_time': s.prediction.total_estimated_time,
                    'risk_level': s.prediction.risk_level,
                    'modifications': [m.description for m in s.modifications],
                }
                for s in self.scenarios
            ],
            'time_deltas': self.time_deltas,
            'risk_comparison': self.risk_comparison,
            'recommendations': self.recommendations,
        }
