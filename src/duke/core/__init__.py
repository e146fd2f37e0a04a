"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskKind, format_display, format_storage, parse_datetime
from .task_list import TaskList
from .errors import ErrorKind, Failure
from .commands import Command, parse_command
from .executor import Outcome, execute, interpret_and_execute

__all__ = [
    # Tasks
    "Task",
    "TaskKind",
    "format_display",
    "format_storage",
    "parse_datetime",
    "TaskList",
    # Errors
    "ErrorKind",
    "Failure",
    # Commands
    "Command",
    "parse_command",
    "Outcome",
    "execute",
    "interpret_and_execute",
]
