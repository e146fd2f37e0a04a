"""Ordered, mutable task container."""

from typing import Iterable, Iterator

from .errors import LIST_HEADER, ErrorKind, Failure
from .tasks import Task, TaskKind


class TaskList:
    """
    The user's tasks, in insertion order.

    `count` is kept alongside the list and moves by exactly one on every
    append/remove, so it always equals len(self._tasks).
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._count = 0

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task]) -> "TaskList":
        task_list = cls()
        for task in tasks:
            task_list.append(task)
        return task_list

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _in_range(self, index: int) -> bool:
        # negative indices must not wrap around to the end of the list
        return 0 <= index < self._count

    def append(self, task: Task) -> None:
        self._tasks.append(task)
        self._count += 1

    def get(self, index: int) -> Task | Failure:
        if not self._in_range(index):
            return Failure.of(ErrorKind.TASK_INDEX_OUT_OF_RANGE)
        return self._tasks[index]

    def remove_at(self, index: int) -> Task | Failure:
        if not self._in_range(index):
            return Failure.of(ErrorKind.TASK_INDEX_OUT_OF_RANGE)
        task = self._tasks.pop(index)
        self._count -= 1
        return task

    def mark_at(self, index: int) -> Task | Failure:
        task = self.get(index)
        if isinstance(task, Task):
            task.mark_done()
        return task

    def unmark_at(self, index: int) -> Task | Failure:
        task = self.get(index)
        if isinstance(task, Task):
            task.mark_undone()
        return task

    def descriptions_and_dates(self) -> list[tuple[TaskKind, str, str]]:
        """(kind, description, display date text) for every task."""
        return [(t.kind, t.description, t.date_key()) for t in self._tasks]

    def contains_duplicate(self, task: Task) -> bool:
        return (task.kind, task.description, task.date_key()) in self.descriptions_and_dates()

    def render(self) -> str:
        lines = [LIST_HEADER]
        lines.extend(task.render(i) for i, task in enumerate(self._tasks, start=1))
        return "\n".join(lines)
