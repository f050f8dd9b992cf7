"""Task and objective data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import InvalidRecordError


TASK_STATUSES = ('pending', 'executing', 'completed')
OBJECTIVE_STATUSES = ('active', 'paused', 'completed')
AGENT_ROLES = ('developer', 'designer', 'researcher', 'manager', 'analyst', 'general')


@dataclass
class Task:
    """A unit of work belonging to an objective."""

    task_id: str
    title: str
    status: str = 'pending'
    priority: Optional[int] = None
    created_at: float = 0
    completed_at: Optional[float] = None
    category: Optional[str] = None
    estimated_time: Optional[str] = None
    subtasks: List['Task'] = field(default_factory=list)

    def duration_ms(self) -> Optional[float]:
        """Get elapsed time between creation and completion."""
        if self.completed_at is None or self.created_at is None:
            return None
        return self.completed_at - self.created_at

    def has_timing(self) -> bool:
        """Check whether the task can serve as historical timing data."""
        return (
            self.status == 'completed'
            and bool(self.created_at)
            and bool(self.completed_at)
        )

    def clone(self) -> 'Task':
        """Copy the task and its whole subtask tree."""
        return Task(
            task_id=self.task_id,
            title=self.title,
            status=self.status,
            priority=self.priority,
            created_at=self.created_at,
            completed_at=self.completed_at,
            category=self.category,
            estimated_time=self.estimated_time,
            subtasks=[subtask.clone() for subtask in self.subtasks],
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Build a task from the application's JSON record."""
        try:
            task_id = str(data['id'])
            title = data['title']
        except KeyError as e:
            raise InvalidRecordError(f"Task record missing field: {e.args[0]}") from e

        status = data.get('status', 'pending')
        if status not in TASK_STATUSES:
            raise InvalidRecordError(f"Unknown task status for {task_id}: {status}")

        return cls(
            task_id=task_id,
            title=title,
            status=status,
            priority=data.get('priority'),
            created_at=data.get('createdAt', 0),
            completed_at=data.get('completedAt'),
            category=data.get('category'),
            estimated_time=data.get('estimatedTime'),
            subtasks=[cls.from_dict(sub) for sub in data.get('subtasks') or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the application's JSON record."""
        record: Dict[str, Any] = {
            'id': self.task_id,
            'title': self.title,
            'status': self.status,
            'priority': self.priority,
            'createdAt': self.created_at,
        }
        if self.completed_at is not None:
            record['completedAt'] = self.completed_at
        if self.category is not None:
            record['category'] = self.category
        if self.estimated_time is not None:
            record['estimatedTime'] = self.estimated_time
        if self.subtasks:
            record['subtasks'] = [subtask.to_dict() for subtask in self.subtasks]
        return record


@dataclass
class Objective:
    """A goal with an ordered list of top-level tasks."""

    objective_id: str
    title: str
    description: str = ''
    status: str = 'active'
    created_at: float = 0
    tasks: List[Task] = field(default_factory=list)
    agent_role: Optional[str] = None

    def find_task(self, task_id: str) -> Optional[Task]:
        """Find a top-level task by id."""
        for task in self.tasks:
            if task.task_id == task_id:
                return task
        return None

    def clone(self) -> 'Objective':
        """Copy the objective with fully independent task trees."""
        return Objective(
            objective_id=self.objective_id,
            title=self.title,
            description=self.description,
            status=self.status,
            created_at=self.created_at,
            tasks=[task.clone() for task in self.tasks],
            agent_role=self.agent_role,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Objective':
        """Build an objective from the application's JSON record."""
        try:
            objective_id = str(data['id'])
            title = data['title']
        except KeyError as e:
            raise InvalidRecordError(f"Objective record missing field: {e.args[0]}") from e

        status = data.get('status', 'active')
        if status not in OBJECTIVE_STATUSES:
            raise InvalidRecordError(f"Unknown objective status for {objective_id}: {status}")

        agent_role = data.get('agentRole')
        if agent_role is not None and agent_role not in AGENT_ROLES:
            raise InvalidRecordError(f"Unknown agent role for {objective_id}: {agent_role}")

        return cls(
            objective_id=objective_id,
            title=title,
            description=data.get('description', ''),
            status=status,
            created_at=data.get('createdAt', 0),
            tasks=[Task.from_dict(task) for task in data.get('tasks') or []],
            agent_role=agent_role,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the application's JSON record."""
        record: Dict[str, Any] = {
            'id': self.objective_id,
            'title': self.title,
            'description': self.description,
            'status': self.status,
            'createdAt': self.created_at,
            'tasks': [task.to_dict() for task in self.tasks],
        }
        if self.agent_role is not None:
            record['agentRole'] = self.agent_role
        return record
