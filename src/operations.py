"""Task operations: add, list, delete and toggle over a TaskStore.

Every call loads the current file first. Mutations save exactly once, and
only when the mutation is valid.

Positions are 1-based against the full, unfiltered list. list_tasks with a
status filter numbers its result from 1 on its own, so those numbers are
display-only and do not line up with what delete/toggle expect.
"""
import logging
from typing import List, Tuple, Union

from errors import EmptyDescriptionError, InvalidIndexError
from models import StatusFilter, Task, ToggleOutcome
from storage import TaskStore

logger = logging.getLogger(__name__)

Position = Union[int, str]


def parse_position(raw: Position) -> int:
    """Turn user input into an int position; InvalidIndexError if not numeric."""
    if isinstance(raw, bool):
        raise InvalidIndexError(raw)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    digits = text[1:] if text[:1] in ('+', '-') else text
    if not digits.isdigit() or not digits.isascii():
        raise InvalidIndexError(raw)
    return int(text)


def _index_for(raw: Position, tasks: List[Task]) -> int:
    position = parse_position(raw)
    if position < 1 or position > len(tasks):
        raise InvalidIndexError(raw)
    return position - 1


def add_task(store: TaskStore, description: str) -> Task:
    text = (description or '').strip()
    if not text:
        raise EmptyDescriptionError()
    tasks = store.load()
    task = Task(description=text, completed=False)
    tasks.append(task)
    store.save(tasks)
    logger.debug("Added task #%d: %r", len(tasks), text)
    return task


def list_tasks(store: TaskStore, status_filter: StatusFilter = StatusFilter.ALL) -> List[Tuple[int, Task]]:
    """Return (display position, task) pairs for the tasks matching the filter."""
    matching = [t for t in store.load() if status_filter.matches(t)]
    return list(enumerate(matching, start=1))


def delete_task(store: TaskStore, position: Position) -> Task:
    tasks = store.load()
    idx = _index_for(position, tasks)
    removed = tasks.pop(idx)
    store.save(tasks)
    logger.debug("Deleted task #%d: %r", idx + 1, removed.description)
    return removed


def toggle_status(store: TaskStore, position: Position) -> Tuple[ToggleOutcome, Task]:
    """Mark the task at a position complete.

    One-way: a task that is already complete stays complete, and nothing
    is written.
    """
    tasks = store.load()
    idx = _index_for(position, tasks)
    task = tasks[idx]
    if task.is_completed:
        logger.debug("Task #%d already complete", idx + 1)
        return ToggleOutcome.ALREADY_COMPLETE, task
    task.completed = True
    store.save(tasks)
    logger.debug("Marked task #%d complete", idx + 1)
    return ToggleOutcome.TOGGLED, task
