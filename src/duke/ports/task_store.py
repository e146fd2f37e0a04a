"""Task storage interface."""

from typing import TYPE_CHECKING, Protocol

from duke.core.tasks import Task

if TYPE_CHECKING:
    from duke.core.task_list import TaskList


class TaskStore(Protocol):
    """Interface for persisting the task list between sessions."""

    def save(self, tasks: "TaskList") -> None:
        """Write the full task list, replacing whatever was stored."""
        ...

    def load(self) -> list[Task]:
        """Read stored tasks. Unreadable entries are skipped, not fatal."""
        ...
