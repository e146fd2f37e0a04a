"""Apply parsed commands to the task list.

Each call is one atomic step: validate, mutate, persist, then report.
Nothing is saved when a command fails, and a failing command leaves the
list exactly as it found it.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from . import errors
from .commands import (
    AddCommand,
    ByeCommand,
    Command,
    DeadlineCommand,
    DeleteCommand,
    EventCommand,
    ListCommand,
    MarkCommand,
    TodoCommand,
    UnmarkCommand,
    parse_command,
)
from .errors import ErrorKind, Failure
from .task_list import TaskList

if TYPE_CHECKING:
    from duke.ports.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Feedback for one command and whether the session should end."""

    feedback: str
    should_exit: bool = False


def execute(command: Command, tasks: TaskList, store: "TaskStore") -> Outcome:
    """Run a parsed command against the task list."""
    match command:
        case ByeCommand():
            return Outcome(errors.FAREWELL, should_exit=True)
        case ListCommand():
            return Outcome(tasks.render())
        case MarkCommand(index=index):
            return _mark(tasks, store, index, done=True)
        case UnmarkCommand(index=index):
            return _mark(tasks, store, index, done=False)
        case DeleteCommand(index=index):
            return _delete(tasks, store, index)
        case TodoCommand() | DeadlineCommand() | EventCommand():
            return _add(tasks, store, command)
        case _:
            return Outcome(Failure.of(ErrorKind.UNKNOWN_COMMAND).message)


def interpret_and_execute(line: str, tasks: TaskList, store: "TaskStore") -> tuple[str, bool]:
    """Parse and execute one line. Returns (feedback, should_exit)."""
    command = parse_command(line)
    if isinstance(command, Failure):
        logger.debug(f"Rejected {line!r}: {command.kind.value}")
        return command.message, False
    outcome = execute(command, tasks, store)
    return outcome.feedback, outcome.should_exit


def _mark(tasks: TaskList, store: "TaskStore", index: int, done: bool) -> Outcome:
    result = tasks.mark_at(index) if done else tasks.unmark_at(index)
    if isinstance(result, Failure):
        return Outcome(result.message)
    store.save(tasks)
    logger.debug(f"{'Marked' if done else 'Unmarked'} task {index + 1}")
    template = errors.MARKED if done else errors.UNMARKED
    return Outcome(template.format(task=result.render()))


def _delete(tasks: TaskList, store: "TaskStore", index: int) -> Outcome:
    task = tasks.get(index)
    if isinstance(task, Failure):
        return Outcome(task.message)
    rendered = task.render()
    tasks.remove_at(index)
    store.save(tasks)
    logger.debug(f"Deleted task {index + 1}, {tasks.count} left")
    return Outcome(errors.REMOVED.format(task=rendered, count=tasks.count))


def _add(tasks: TaskList, store: "TaskStore", command: AddCommand) -> Outcome:
    task = command.to_task()
    if tasks.contains_duplicate(task):
        return Outcome(Failure.of(ErrorKind.DUPLICATE_TASK).message)
    tasks.append(task)
    store.save(tasks)
    logger.debug(f"Added {task.kind.name.lower()} task, now {tasks.count}")
    return Outcome(errors.ADDED.format(task=task.render(), count=tasks.count))
