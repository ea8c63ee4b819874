"""Main entry point for the terminal task list."""
import logging

import click

from cli import CLI
from settings import get_settings
from storage import TaskStore


@click.command()
def main() -> None:
    """Manage a task list stored in ./task.json through an interactive menu."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    CLI(TaskStore(), alt_screen=settings.alt_screen).run()


if __name__ == "__main__":
    main()
