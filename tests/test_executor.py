"""Tests for command execution."""

import pytest

from duke.core.commands import (
    ByeCommand,
    DeleteCommand,
    ListCommand,
    MarkCommand,
    TodoCommand,
    UnknownCommand,
)
from duke.core.errors import FAREWELL, MESSAGES, ErrorKind
from duke.core.executor import Outcome, execute, interpret_and_execute
from duke.core.task_list import TaskList
from duke.core.tasks import Task

from .fakes import FailingStore


def run(lines, tasks, store):
    """Feed lines through the core, returning the feedback for each."""
    return [interpret_and_execute(line, tasks, store)[0] for line in lines]


@pytest.fixture
def two_tasks(tasks, store):
    run(["todo read book", "deadline return book /by 2019-12-01 1800"], tasks, store)
    store.saves.clear()
    return tasks


class TestExecute:
    def test_bye_ends_session(self, tasks, store):
        outcome = execute(ByeCommand(), tasks, store)
        assert outcome == Outcome(FAREWELL, should_exit=True)
        assert store.saves == []

    def test_list(self, two_tasks, store):
        outcome = execute(ListCommand(), two_tasks, store)
        assert outcome.feedback == two_tasks.render()
        assert outcome.should_exit is False
        assert store.saves == []

    def test_unknown(self, tasks, store):
        outcome = execute(UnknownCommand("blah"), tasks, store)
        assert outcome.feedback == MESSAGES[ErrorKind.UNKNOWN_COMMAND]
        assert tasks.count == 0
        assert store.saves == []


class TestAdd:
    def test_todo_added_unmarked(self, tasks, store):
        feedback, should_exit = interpret_and_execute("todo read book", tasks, store)
        assert should_exit is False
        assert tasks.count == 1
        assert tasks.get(0).done is False
        assert "[T][ ] read book" in feedback
        assert "Now you have 1 tasks in the list." in feedback

    def test_each_add_saves_full_list_once(self, tasks, store):
        run(["todo a", "todo b"], tasks, store)
        assert store.saves == [["[T][ ] a"], ["[T][ ] a", "[T][ ] b"]]

    def test_duplicate_todo(self, tasks, store):
        first, second = run(["todo read book", "todo read book"], tasks, store)
        assert second == MESSAGES[ErrorKind.DUPLICATE_TASK]
        assert tasks.count == 1
        assert len(store.saves) == 1

    def test_duplicate_deadline(self, two_tasks, store):
        feedback, _ = interpret_and_execute(
            "deadline return book /by 2019-12-01 1800", two_tasks, store
        )
        assert feedback == MESSAGES[ErrorKind.DUPLICATE_TASK]
        assert two_tasks.count == 2
        assert store.saves == []

    def test_same_description_new_date_is_added(self, two_tasks, store):
        interpret_and_execute("deadline return book /by 2019-12-02 1800", two_tasks, store)
        assert two_tasks.count == 3

    def test_duplicate_event(self, tasks, store):
        line = "event meeting /from 2019-12-02 1400 /to 2019-12-02 1600"
        _, second = run([line, line], tasks, store)
        assert second == MESSAGES[ErrorKind.DUPLICATE_TASK]
        assert tasks.count == 1

    def test_done_task_still_counts_as_duplicate(self, tasks, store):
        feedback = run(["todo read book", "mark 1", "todo read book"], tasks, store)[-1]
        assert feedback == MESSAGES[ErrorKind.DUPLICATE_TASK]

    def test_parse_failure_does_not_save(self, tasks, store):
        feedback, _ = interpret_and_execute("deadline return book /by someday", tasks, store)
        assert feedback == MESSAGES[ErrorKind.INVALID_DATE_FORMAT]
        assert tasks.count == 0
        assert store.saves == []


class TestMark:
    def test_mark(self, two_tasks, store):
        feedback, _ = interpret_and_execute("mark 1", two_tasks, store)
        assert "[T][X] read book" in feedback
        assert two_tasks.get(0).done is True
        assert len(store.saves) == 1

    def test_unmark(self, two_tasks, store):
        run(["mark 2", "unmark 2"], two_tasks, store)
        assert two_tasks.get(1).done is False
        assert len(store.saves) == 2

    def test_mark_twice_is_fine(self, two_tasks, store):
        run(["mark 1", "mark 1"], two_tasks, store)
        assert two_tasks.get(0).done is True

    @pytest.mark.parametrize("line", ["mark 5", "mark 0", "unmark 3", "unmark -1"])
    def test_out_of_range(self, two_tasks, store, line):
        before = two_tasks.render()
        feedback, _ = interpret_and_execute(line, two_tasks, store)
        assert feedback == MESSAGES[ErrorKind.TASK_INDEX_OUT_OF_RANGE]
        assert two_tasks.render() == before
        assert store.saves == []

    def test_not_numeric(self, two_tasks, store):
        feedback, _ = interpret_and_execute("mark first", two_tasks, store)
        assert feedback == "Task number not exist!"


class TestDelete:
    def test_delete_shifts_following_tasks(self, two_tasks, store):
        feedback, _ = interpret_and_execute("delete 1", two_tasks, store)
        assert "[T][ ] read book" in feedback
        assert "Now you have 1 tasks in the list." in feedback
        assert two_tasks.render().splitlines()[1:] == [
            "1. [D][ ] return book (by: Dec 1 2019, 6:00pm)"
        ]
        assert store.saves == [["[D][ ] return book (by: Dec 1 2019, 6:00pm)"]]

    def test_delete_out_of_range(self, two_tasks, store):
        outcome = execute(DeleteCommand(2), two_tasks, store)
        assert outcome.feedback == MESSAGES[ErrorKind.TASK_INDEX_OUT_OF_RANGE]
        assert two_tasks.count == 2
        assert store.saves == []

    def test_delete_from_empty(self, tasks, store):
        feedback, _ = interpret_and_execute("delete 1", tasks, store)
        assert feedback == MESSAGES[ErrorKind.TASK_INDEX_OUT_OF_RANGE]


class TestStorageFailure:
    def test_save_error_propagates(self, tasks):
        with pytest.raises(OSError):
            execute(TodoCommand("read book"), tasks, FailingStore())

    def test_failed_validation_never_reaches_store(self):
        tasks = TaskList.from_tasks([Task.todo("read book")])
        outcome = execute(MarkCommand(4), tasks, FailingStore())
        assert outcome.feedback == MESSAGES[ErrorKind.TASK_INDEX_OUT_OF_RANGE]


class TestScenarios:
    def test_add_then_list(self, tasks, store):
        listing = run(
            ["todo read book", "deadline return book /by 2019-12-01 1800", "list"], tasks, store
        )[-1]
        assert listing.splitlines() == [
            "Here are the tasks in your list:",
            "1. [T][ ] read book",
            "2. [D][ ] return book (by: Dec 1 2019, 6:00pm)",
        ]

    def test_mark_then_list(self, two_tasks, store):
        listing = run(["mark 1", "list"], two_tasks, store)[-1]
        assert "1. [T][X] read book" in listing.splitlines()

    def test_delete_then_list(self, two_tasks, store):
        listing = run(["delete 1", "list"], two_tasks, store)[-1]
        assert listing.splitlines()[1:] == ["1. [D][ ] return book (by: Dec 1 2019, 6:00pm)"]

    def test_mark_out_of_range_on_two_tasks(self, two_tasks, store):
        feedback, listing = run(["mark 5", "list"], two_tasks, store)
        assert feedback == "Task number out of list range!"
        assert "[X]" not in listing

    def test_bye_line(self, tasks, store):
        assert interpret_and_execute("bye", tasks, store) == (FAREWELL, True)

    def test_empty_line(self, tasks, store):
        assert interpret_and_execute("", tasks, store) == (
            MESSAGES[ErrorKind.EMPTY_INPUT],
            False,
        )
