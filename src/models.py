"""Data models for the terminal task list.

A task has no stored id. Its id is its 1-based position in whatever list
is being shown, so it changes whenever an earlier task is deleted.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Free text, trimmed on creation. Duplicates allowed.
        completed: True/False, or None when the stored record predates the
            completion flag. None is kept as-is so old records are written
            back without a "completed" key.
        extra: Any other keys found in the stored record.
    """
    description: str
    completed: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_completed(self) -> bool:
        return bool(self.completed)

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["Task"]:
        """Decode one stored record; None if it cannot be a task."""
        if not isinstance(raw, Mapping):
            return None
        raw_description = raw.get('description')
        if raw_description is None:
            return None
        completed = raw.get('completed')
        # plain truthiness: a stored "false" string counts as done
        if completed is not None and not isinstance(completed, bool):
            completed = bool(completed)
        extra = {k: v for k, v in raw.items() if k not in ('description', 'completed')}
        return cls(description=str(raw_description), completed=completed, extra=extra)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'description': self.description}
        if self.completed is not None:
            data['completed'] = self.completed
        data.update(self.extra)
        return data

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(description={self.description!r}, completed={self.completed})"


class StatusFilter(Enum):
    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    def matches(self, task: Task) -> bool:
        if self is StatusFilter.COMPLETED:
            return task.is_completed
        if self is StatusFilter.INCOMPLETE:
            return not task.is_completed
        return True


class ToggleOutcome(Enum):
    TOGGLED = "toggled"
    ALREADY_COMPLETE = "already-complete"
