"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# Format typed by the user and written to the data file, e.g. "2019-12-01 1800"
INPUT_FORMAT = "%Y-%m-%d %H%M"
# strptime alone accepts single-digit fields like "2019-1-1 180"
INPUT_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{4}")


class TaskKind(Enum):
    """Task variant. The value is the marker shown in brackets."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def parse_datetime(text: str) -> datetime | None:
    """Parse 'yyyy-MM-dd HHmm' text. Returns None if it doesn't match."""
    text = text.strip()
    if not INPUT_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, INPUT_FORMAT)
    except ValueError:
        return None


def format_storage(dt: datetime) -> str:
    return dt.strftime(INPUT_FORMAT)


def format_display(dt: datetime) -> str:
    """Format for display, e.g. 'Dec 1 2019, 6:00pm'."""
    hour = dt.hour % 12 or 12
    suffix = "am" if dt.hour < 12 else "pm"
    return f"{dt.strftime('%b')} {dt.day} {dt.year}, {hour}:{dt.minute:02d}{suffix}"


@dataclass
class Task:
    """
    A tracked item.

    One dataclass covers all three variants, tagged by `kind`:
    todos carry no dates, deadlines use `start` as their due date-time,
    events span `start` to `end`.
    """

    kind: TaskKind
    description: str
    done: bool = False
    preposition: str = ""
    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        self.description = self.description.strip()
        if not self.description:
            raise ValueError("Task description cannot be empty")
        if self.kind in (TaskKind.DEADLINE, TaskKind.EVENT) and self.start is None:
            raise ValueError(f"{self.kind.name.lower()} requires a date-time")
        if self.kind == TaskKind.EVENT and self.end is None:
            raise ValueError("event requires an end date-time")

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, preposition: str, when: datetime) -> "Task":
        return cls(TaskKind.DEADLINE, description, preposition=preposition, start=when)

    @classmethod
    def event(
        cls, description: str, preposition: str, start: datetime, end: datetime
    ) -> "Task":
        # start <= end is not checked
        return cls(TaskKind.EVENT, description, preposition=preposition, start=start, end=end)

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    def date_field(self, n: int) -> str:
        """Display text of date field n (1 = due/start, 2 = end), or ''."""
        if n == 1 and self.start is not None:
            return format_display(self.start)
        if n == 2 and self.end is not None:
            return format_display(self.end)
        return ""

    def date_key(self) -> str:
        """Date text compared when looking for duplicates."""
        match self.kind:
            case TaskKind.TODO:
                return ""
            case TaskKind.DEADLINE:
                return self.date_field(1)
            case TaskKind.EVENT:
                return f"{self.date_field(1)}-{self.date_field(2)}"

    def render(self, index: int | None = None) -> str:
        """One-line form, e.g. '[D][ ] return book (by: Dec 1 2019, 6:00pm)'."""
        status = "X" if self.done else " "
        line = f"[{self.kind.value}][{status}] {self.description}"
        match self.kind:
            case TaskKind.DEADLINE:
                line += f" ({self.preposition}: {self.date_field(1)})"
            case TaskKind.EVENT:
                line += f" ({self.preposition}: {self.date_field(1)} to: {self.date_field(2)})"
        if index is not None:
            line = f"{index}. {line}"
        return line
