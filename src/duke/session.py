"""Session layer between the CLI and the core.

Loads the stored list, then feeds input lines through the core one at a
time until input runs out or a command ends the session.
"""

import logging
from pathlib import Path
from typing import Iterable

from .adapters.file_storage import FileTaskStore
from .config import Config
from .core import errors
from .core.executor import interpret_and_execute
from .core.task_list import TaskList
from .ports import Output, TaskStore

logger = logging.getLogger(__name__)


def get_store(config: Config, path: Path | str | None = None) -> FileTaskStore:
    """Resolve the data file, preferring an explicit path over config."""
    return FileTaskStore(path if path else config.data_file)


def load_task_list(store: FileTaskStore, ui: Output) -> TaskList:
    """Rehydrate the task list, reporting any stored lines that were skipped."""
    tasks = TaskList.from_tasks(store.load())
    if store.skipped:
        ui.show(errors.SKIPPED_LINES.format(count=len(store.skipped), path=store.path))
    logger.debug(f"Loaded {tasks.count} tasks from {store.path}")
    return tasks


def greet(ui: Output, show_logo: bool = True) -> None:
    if show_logo:
        ui.show("Hello from\n" + errors.LOGO)
    ui.show(errors.GREETING)


def run_line(line: str, tasks: TaskList, store: TaskStore, ui: Output) -> bool:
    """Execute one line and show the feedback. Returns True if the session should end."""
    feedback, should_exit = interpret_and_execute(line, tasks, store)
    ui.show(feedback)
    return should_exit


def run_session(lines: Iterable[str], tasks: TaskList, store: TaskStore, ui: Output) -> None:
    """Read-execute-print loop. Storage errors propagate to the caller."""
    for line in lines:
        if run_line(line, tasks, store, ui):
            return
    logger.debug("Input ended without bye")
