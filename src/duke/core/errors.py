"""Error kinds and user-facing messages."""

from dataclasses import dataclass
from enum import Enum

LOGO = (
    " ____        _        \n"
    "|  _ \\ _   _| | _____ \n"
    "| | | | | | | |/ / _ \\\n"
    "| |_| | |_| |   <  __/\n"
    "|____/ \\__,_|_|\\_\\___|\n"
)

GREETING = "Wakanda forever! I'm Winston Duke\nWhat can I do for you?"
FAREWELL = (
    "Bye. Remember!\n"
    "In times of crisis, the wise build bridges while the foolish build barriers."
)

LIST_HEADER = "Here are the tasks in your list:"
ADDED = "Got it. I've added this task:\n  {task}\nNow you have {count} tasks in the list."
REMOVED = "Noted. I've removed this task:\n  {task}\nNow you have {count} tasks in the list."
MARKED = "Nice! I've marked this task as done:\n  {task}"
UNMARKED = "OK, I've marked this task as not done yet:\n  {task}"
SKIPPED_LINES = "Skipped {count} unreadable line(s) in {path}"


class ErrorKind(Enum):
    """Every way a single command can fail."""

    EMPTY_INPUT = "empty_input"
    UNKNOWN_COMMAND = "unknown_command"
    TASK_NUMBER_NOT_NUMERIC = "task_number_not_numeric"
    TASK_INDEX_OUT_OF_RANGE = "task_index_out_of_range"
    EMPTY_DESCRIPTION = "empty_description"
    MISSING_PREPOSITION = "missing_preposition"
    INVALID_DATE_FORMAT = "invalid_date_format"
    DUPLICATE_TASK = "duplicate_task"


MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_INPUT: "Empty input detected, please re-enter",
    ErrorKind.UNKNOWN_COMMAND: "Sorry, this is not a task I recognize.",
    ErrorKind.TASK_NUMBER_NOT_NUMERIC: "Task number not exist!",
    ErrorKind.TASK_INDEX_OUT_OF_RANGE: "Task number out of list range!",
    ErrorKind.EMPTY_DESCRIPTION: "The description of a {command} cannot be empty.",
    ErrorKind.MISSING_PREPOSITION: "Please add the date with {usage}",
    ErrorKind.INVALID_DATE_FORMAT: (
        "Date and time must look like yyyy-MM-dd HHmm, e.g. 2019-12-01 1800"
    ),
    ErrorKind.DUPLICATE_TASK: "This task already exists in your list!",
}


@dataclass(frozen=True)
class Failure:
    """A recoverable command failure, returned instead of raised."""

    kind: ErrorKind
    message: str

    @classmethod
    def of(cls, kind: ErrorKind, **details: str) -> "Failure":
        return cls(kind, MESSAGES[kind].format(**details))
