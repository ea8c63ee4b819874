"""Interactive menu loop for the task list.

The loop owns the terminal: it redraws the screen every cycle, shows the
output of the previous action above the current menu, and always leaves
the alternate screen on the way out. All task logic lives in operations.
"""
import logging
import sys
from typing import List, Optional, Sequence, Tuple

import click

import operations
from errors import TodoError
from models import StatusFilter, Task, ToggleOutcome
from storage import TaskStore
import theme
from theme import color, DONE_COLOR, EMPTY_COLOR, ERROR_COLOR, HEADER_COLOR, ID_COLOR, PENDING_COLOR

logger = logging.getLogger(__name__)

# --- terminal control helpers ---
# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home)
_CLEAR = "\033[3J\033[H\033[2J\033[H"
_ALT_SCREEN_ON = "\033[?1049h"
_ALT_SCREEN_OFF = "\033[?1049l"

MAIN_TITLE = "=== Task List CLI ==="
MAIN_OPTIONS: Tuple[str, ...] = (
    "View tasks",
    "Add task",
    "Delete task",
    "Task status",
    "Exit",
)
STATUS_TITLE = "=== Task Status ==="
STATUS_OPTIONS: Tuple[str, ...] = (
    "View incomplete tasks",
    "View completed tasks",
    "Toggle task status",
    "View all tasks",
    "Return to main menu",
)

LIST_TITLES = {
    StatusFilter.ALL: "=== Tasks ===",
    StatusFilter.COMPLETED: "=== Completed Tasks ===",
    StatusFilter.INCOMPLETE: "=== Incomplete Tasks ===",
}
EMPTY_MESSAGES = {
    StatusFilter.ALL: "No pending tasks.",
    StatusFilter.COMPLETED: "No completed tasks.",
    StatusFilter.INCOMPLETE: "No incomplete tasks.",
}


def _write(text: str) -> None:
    # screen control; kept on a real terminal even when NO_COLOR is set
    click.echo(text, nl=False, color=theme.colors_enabled() or sys.stdout.isatty())


def _echo(line: str = '') -> None:
    # click strips ANSI off a non-TTY unless told otherwise; FORCE_COLOR must win
    click.echo(line, color=theme.colors_enabled())


def format_entry(position: int, task: Task) -> str:
    mark = '[x]' if task.is_completed else '[ ]'
    tone = DONE_COLOR if task.is_completed else PENDING_COLOR
    return color(f"{position}.", ID_COLOR) + ' ' + color(f"{mark} {task.description}", tone)


def render_entries(status_filter: StatusFilter, entries: Sequence[Tuple[int, Task]]) -> List[str]:
    lines = [color(LIST_TITLES[status_filter], HEADER_COLOR)]
    if not entries:
        lines.append(color(EMPTY_MESSAGES[status_filter], EMPTY_COLOR))
    else:
        lines.extend(format_entry(pos, task) for pos, task in entries)
    return lines


def render_menu(title: str, options: Sequence[str]) -> List[str]:
    lines = [color(title, HEADER_COLOR)]
    lines.extend(f"{color(str(n) + '.', ID_COLOR)} {label}" for n, label in enumerate(options, start=1))
    return lines


class CLI:
    def __init__(self, store: TaskStore, alt_screen: bool = True):
        self.store: TaskStore = store
        self.alt_screen: bool = alt_screen
        # lines produced by the last action, shown on the next redraw
        self._pending: List[str] = []

    def run(self) -> None:
        """Main menu loop; returns when the user exits or interrupts."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _write(_ALT_SCREEN_ON)
        try:
            self._main_menu()
            exit_message = "Goodbye!"
        except (KeyboardInterrupt, click.Abort):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _write(_ALT_SCREEN_OFF)
            if exit_message:
                _echo(color(exit_message, HEADER_COLOR))

    # -------------------- menus --------------------
    def _main_menu(self) -> None:
        while True:
            choice = self._choose(MAIN_TITLE, MAIN_OPTIONS)
            if choice == '1':
                self._view(StatusFilter.ALL)
            elif choice == '2':
                self._add()
            elif choice == '3':
                self._delete()
            elif choice == '4':
                self._status_menu()
            elif choice == '5':
                return
            else:
                self._error("Invalid option. Try again.")

    def _status_menu(self) -> None:
        while True:
            choice = self._choose(STATUS_TITLE, STATUS_OPTIONS)
            if choice == '1':
                self._view(StatusFilter.INCOMPLETE)
            elif choice == '2':
                self._view(StatusFilter.COMPLETED)
            elif choice == '3':
                self._toggle()
            elif choice == '4':
                self._view(StatusFilter.ALL)
            elif choice == '5':
                return
            else:
                self._error("Invalid option. Try again.")

    # -------------------- actions --------------------
    def _view(self, status_filter: StatusFilter) -> None:
        entries = operations.list_tasks(self.store, status_filter)
        self._pending.extend(render_entries(status_filter, entries))

    def _add(self) -> None:
        self._redraw([])
        description = self._ask("Enter the task description")
        try:
            task = operations.add_task(self.store, description)
        except TodoError as exc:
            logger.debug("Add rejected: %s", exc)
            self._error(str(exc))
            return
        self._success(f'Task added: "{task.description}"')
        self._success("Tasks saved.")

    def _delete(self) -> None:
        position = self._pick_position("No tasks to delete.", "Enter the ID of the task to delete")
        if position is None:
            return
        try:
            task = operations.delete_task(self.store, position)
        except TodoError as exc:
            logger.debug("Delete of %r rejected: %s", position, exc)
            self._error(str(exc))
            return
        self._success(f'Task deleted: "{task.description}"')
        self._success("Tasks saved.")

    def _toggle(self) -> None:
        position = self._pick_position("No tasks to update.", "Enter the ID of the task to mark complete")
        if position is None:
            return
        try:
            outcome, task = operations.toggle_status(self.store, position)
        except TodoError as exc:
            logger.debug("Toggle of %r rejected: %s", position, exc)
            self._error(str(exc))
            return
        if outcome is ToggleOutcome.ALREADY_COMPLETE:
            self._error(f'Task "{task.description}" is already complete.')
            return
        self._success(f'Task marked as complete: "{task.description}"')
        self._success("Tasks saved.")

    def _pick_position(self, empty_message: str, prompt: str) -> Optional[str]:
        """Show the full list (IDs are full-list positions) and ask for an ID."""
        entries = operations.list_tasks(self.store)
        if not entries:
            self._error(empty_message)
            return None
        self._redraw(render_entries(StatusFilter.ALL, entries))
        return self._ask(prompt)

    # -------------------- terminal i/o --------------------
    def _choose(self, title: str, options: Sequence[str]) -> str:
        self._redraw(render_menu(title, options))
        return self._ask("\nChoose an option").strip()

    def _redraw(self, lines: Sequence[str]) -> None:
        _write(_CLEAR)
        for line in self._pending:
            _echo(line)
        if self._pending:
            _echo()
        self._pending = []
        for line in lines:
            _echo(line)

    @staticmethod
    def _ask(text: str) -> str:
        return click.prompt(text, default='', show_default=False)

    def _success(self, message: str) -> None:
        self._pending.append(color(message, DONE_COLOR))

    def _error(self, message: str) -> None:
        self._pending.append(color(message, ERROR_COLOR))
