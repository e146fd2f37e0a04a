from datetime import datetime

import pytest

from duke.core.task_list import TaskList
from duke.core.tasks import Task

from .fakes import FakeStore


@pytest.fixture
def when():
    return datetime(2019, 12, 1, 18, 0)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def tasks():
    return TaskList()


@pytest.fixture
def sample_tasks(when):
    """A todo, a deadline and an event."""
    return [
        Task.todo("read book"),
        Task.deadline("return book", "by", when),
        Task.event("project meeting", "from", datetime(2019, 12, 2, 14, 0), datetime(2019, 12, 2, 16, 0)),
    ]
