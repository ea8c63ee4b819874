"""Persistence for the task list (load/save of the whole file).

The file is a JSON array of task objects, rewritten in full on every
change. Any read problem (missing, empty, corrupt) degrades to an empty
list; no backup or repair is attempted.
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Sequence

from errors import StoreWriteError
from models import Task

logger = logging.getLogger(__name__)

TASK_FILE = Path('task.json')


class TaskStore:
    def __init__(self, path: Path = TASK_FILE):
        self.path: Path = Path(path)

    def load(self) -> List[Task]:
        """Load every task from disk, in stored order.

        Missing file, empty file or undecodable content -> empty list.
        Records without a description are skipped.
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s (%s); starting with no tasks", self.path, exc)
            return []
        if not text.strip():
            return []
        try:
            data: Any = json.loads(text)
        except (ValueError, RecursionError) as exc:
            logger.warning("Could not decode %s (%s); starting with no tasks", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array; starting with no tasks", self.path)
            return []
        tasks: List[Task] = []
        for idx, raw in enumerate(data, start=1):
            task = Task.from_dict(raw)
            if task is None:
                logger.warning("Skipping malformed record #%d in %s", idx, self.path)
                continue
            tasks.append(task)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        """Overwrite the file with all tasks (2-space indented JSON)."""
        payload = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False) + '\n'
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding='utf-8')
        except OSError as exc:
            logger.error("Failed to save %d task(s) to %s: %s", len(tasks), self.path, exc)
            raise StoreWriteError(self.path, exc) from exc
        logger.info("Saved %d task(s) to %s", len(tasks), self.path)
