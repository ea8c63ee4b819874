from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Sequence

import pytest

from models import Task
from storage import TaskStore


class RecordingStore(TaskStore):
    """TaskStore that counts save() calls."""

    def __init__(self, path: Path):
        super().__init__(path)
        self.saves = 0

    def save(self, tasks: Sequence[Task]) -> None:
        self.saves += 1
        super().save(tasks)


@pytest.fixture
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "task.json"


@pytest.fixture
def store(task_file: Path) -> RecordingStore:
    return RecordingStore(task_file)


@pytest.fixture
def write_tasks(task_file: Path):
    def _write(records: List[Any]) -> None:
        task_file.write_text(json.dumps(records, indent=2), encoding="utf-8")

    return _write
