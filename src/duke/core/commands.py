"""Turn one line of user input into a typed command."""

import re
from dataclasses import dataclass
from datetime import datetime

from .errors import ErrorKind, Failure
from .tasks import Task, parse_datetime

# A "/word" keyword, e.g. "/by" or "/from", surrounded by whitespace or line ends
PREPOSITION_RE = re.compile(r"(?:^|\s)/(\w+)(?=\s|$)")
END_KEYWORD = "to"
TASK_NUMBER_RE = re.compile(r"^[+-]?\d+$")

DEADLINE_USAGE = "/by yyyy-MM-dd HHmm"
EVENT_USAGE = "/from yyyy-MM-dd HHmm /to yyyy-MM-dd HHmm"


@dataclass(frozen=True)
class ByeCommand:
    pass


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class MarkCommand:
    index: int


@dataclass(frozen=True)
class UnmarkCommand:
    index: int


@dataclass(frozen=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True)
class TodoCommand:
    description: str

    def to_task(self) -> Task:
        return Task.todo(self.description)


@dataclass(frozen=True)
class DeadlineCommand:
    description: str
    preposition: str
    when: datetime

    def to_task(self) -> Task:
        return Task.deadline(self.description, self.preposition, self.when)


@dataclass(frozen=True)
class EventCommand:
    description: str
    preposition: str
    start: datetime
    end: datetime

    def to_task(self) -> Task:
        return Task.event(self.description, self.preposition, self.start, self.end)


@dataclass(frozen=True)
class UnknownCommand:
    word: str


Command = (
    ByeCommand
    | ListCommand
    | MarkCommand
    | UnmarkCommand
    | DeleteCommand
    | TodoCommand
    | DeadlineCommand
    | EventCommand
    | UnknownCommand
)
AddCommand = TodoCommand | DeadlineCommand | EventCommand

INDEXED_COMMANDS = {
    "mark": MarkCommand,
    "unmark": UnmarkCommand,
    "delete": DeleteCommand,
}


def parse_command(line: str) -> Command | Failure:
    """
    Parse a line of input.

    Returns exactly one of a command or a Failure. Task numbers are
    converted to zero-based indices here but not range-checked.
    """
    if not line.strip():
        return Failure.of(ErrorKind.EMPTY_INPUT)

    parts = line.split(maxsplit=1)
    word = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    match word:
        case "bye":
            return ByeCommand()
        case "list":
            return ListCommand()
        case "mark" | "unmark" | "delete":
            return _parse_indexed(word, rest)
        case "todo":
            return _parse_todo(rest)
        case "deadline":
            return _parse_deadline(rest)
        case "event":
            return _parse_event(rest)
        case _:
            return UnknownCommand(word)


def _parse_indexed(word: str, rest: str) -> Command | Failure:
    tokens = rest.split()
    if not tokens or not TASK_NUMBER_RE.match(tokens[0]):
        return Failure.of(ErrorKind.TASK_NUMBER_NOT_NUMERIC)
    return INDEXED_COMMANDS[word](int(tokens[0]) - 1)


def _parse_todo(rest: str) -> TodoCommand | Failure:
    description = rest.strip()
    if not description:
        return Failure.of(ErrorKind.EMPTY_DESCRIPTION, command="todo")
    return TodoCommand(description)


def _split_preposition(text: str) -> tuple[str, str, str] | None:
    """Split 'desc /word tail' into (desc, word, tail) on the first keyword."""
    m = PREPOSITION_RE.search(text)
    if not m:
        return None
    return text[: m.start()].strip(), m.group(1), text[m.end() :].strip()


def _parse_deadline(rest: str) -> DeadlineCommand | Failure:
    if not rest.strip():
        return Failure.of(ErrorKind.EMPTY_DESCRIPTION, command="deadline")

    split = _split_preposition(rest)
    if split is None:
        return Failure.of(ErrorKind.MISSING_PREPOSITION, usage=DEADLINE_USAGE)
    description, preposition, date_text = split

    if not description:
        return Failure.of(ErrorKind.EMPTY_DESCRIPTION, command="deadline")

    when = parse_datetime(date_text)
    if when is None:
        return Failure.of(ErrorKind.INVALID_DATE_FORMAT)
    return DeadlineCommand(description, preposition, when)


def _parse_event(rest: str) -> EventCommand | Failure:
    if not rest.strip():
        return Failure.of(ErrorKind.EMPTY_DESCRIPTION, command="event")

    split = _split_preposition(rest)
    if split is None or split[1] == END_KEYWORD:
        return Failure.of(ErrorKind.MISSING_PREPOSITION, usage=EVENT_USAGE)
    description, preposition, span = split

    end_split = _split_preposition(span)
    if end_split is None or end_split[1] != END_KEYWORD:
        return Failure.of(ErrorKind.MISSING_PREPOSITION, usage=EVENT_USAGE)
    start_text, _, end_text = end_split

    if not description:
        return Failure.of(ErrorKind.EMPTY_DESCRIPTION, command="event")

    start = parse_datetime(start_text)
    end = parse_datetime(end_text)
    if start is None or end is None:
        return Failure.of(ErrorKind.INVALID_DATE_FORMAT)
    return EventCommand(description, preposition, start, end)
