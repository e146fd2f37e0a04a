"""Flat text file task storage adapter."""

import logging
from pathlib import Path

from duke.core.task_list import TaskList
from duke.core.tasks import Task, TaskKind, format_storage, parse_datetime

logger = logging.getLogger(__name__)

SEPARATOR = " | "


class StorageError(Exception):
    """Raised when the data file can't be written or read."""


def encode_task(task: Task) -> str:
    """
    Encode a task as one line.

    The description always comes last so it may contain the separator:
        T | 0 | read book
        D | 1 | by | 2019-12-01 1800 | return book
        E | 0 | from | 2019-12-01 1400 | 2019-12-01 1600 | project meeting
    """
    fields = [task.kind.value, "1" if task.done else "0"]
    if task.kind != TaskKind.TODO:
        fields.append(task.preposition)
        fields.append(format_storage(task.start))
    if task.kind == TaskKind.EVENT:
        fields.append(format_storage(task.end))
    fields.append(task.description)
    return SEPARATOR.join(fields)


def decode_task(line: str) -> Task:
    """Decode one stored line. Raises ValueError if it's malformed."""
    kind = TaskKind(line[:1])
    n_fields = {TaskKind.TODO: 3, TaskKind.DEADLINE: 5, TaskKind.EVENT: 6}[kind]
    fields = line.split(SEPARATOR, n_fields - 1)
    if len(fields) != n_fields or fields[0] != kind.value:
        raise ValueError(f"expected {n_fields} fields")

    done_flag = fields[1]
    if done_flag not in ("0", "1"):
        raise ValueError(f"bad done flag {done_flag!r}")

    dates = [parse_datetime(text) for text in fields[3:-1]]
    if any(dt is None for dt in dates):
        raise ValueError("bad date-time")

    match kind:
        case TaskKind.TODO:
            task = Task.todo(fields[2])
        case TaskKind.DEADLINE:
            task = Task.deadline(fields[4], fields[2], dates[0])
        case TaskKind.EVENT:
            task = Task.event(fields[5], fields[2], dates[0], dates[1])
    task.done = done_flag == "1"
    return task


class FileTaskStore:
    """
    File-based task storage.

    Implements TaskStore protocol. The whole list is rewritten on every save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.skipped: list[tuple[int, str]] = []

    def save(self, tasks: TaskList) -> None:
        """Write the full task list to the data file."""
        content = "".join(encode_task(task) + "\n" for task in tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to save tasks to {self.path}: {e}")
            raise StorageError(f"Could not save tasks to {self.path}: {e}") from e
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")

    def load(self) -> list[Task]:
        """Read stored tasks, skipping lines that can't be decoded."""
        self.skipped = []
        if not self.path.exists():
            return []
        try:
            with self.path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            raise StorageError(f"Could not read tasks from {self.path}: {e}") from e

        # Only "\n" ends a record; descriptions may hold other line-break characters
        tasks = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line))
            except ValueError as e:
                logger.warning(f"Skipping line {line_number} of {self.path}: {e}")
                self.skipped.append((line_number, line))
        return tasks
