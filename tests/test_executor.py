from taskline.services.executor import CommandExecutor
from taskline.adapters.memory.task_store import InMemoryTaskStore
from taskline.domain.task_list import TaskList
from taskline.domain.task import Todo, Deadline, Event
from taskline.domain.commands import (
    ListTasks, Exit, AddTodo, AddDeadline, AddEvent, Mark, Unmark, Delete, Find,
)
from taskline.domain.errors import (
    DuplicateTaskError, InvalidEventRangeError, InvalidTaskNumberError, ValidationError,
)
from datetime import datetime
import pytest


@pytest.fixture
def store():
    return InMemoryTaskStore()


def make_executor(store, *tasks):
    return CommandExecutor(TaskList(tasks), store)


def test_list_does_not_save(store):
    executor = make_executor(store, Todo("Task 1"), Todo("Task 2"))

    result = executor.execute(ListTasks())

    assert result.lines == ["Here are the tasks in your list:", "1.[T][ ] Task 1", "2.[T][ ] Task 2"]
    assert store.save_count == 0
    assert not executor.history.can_undo()


def test_list_renders_times_in_display_format(store):
    executor = make_executor(
        store,
        Deadline("return book", datetime(2019, 12, 2, 18, 0), is_done=True),
        Event("meeting", datetime(2025, 6, 15), datetime(2025, 6, 15, 12, 0)),
    )

    result = executor.execute(ListTasks())

    assert "1.[D][X] return book (by: Dec 2 2019 6:00PM)" in result.lines
    assert "2.[E][ ] meeting (from: Jun 15 2025 to: Jun 15 2025 12:00PM)" in result.lines


def test_exit_signals_end(store):
    result = make_executor(store).execute(Exit())

    assert result.is_exit
    assert store.save_count == 0


def test_add_todo_saves_and_confirms(store):
    # Arrange
    executor = make_executor(store)

    # Act
    result = executor.execute(AddTodo("Buy groceries"))

    # Assert
    assert executor.tasks.size() == 1
    assert isinstance(executor.tasks.get(0), Todo)
    assert executor.tasks.get(0).is_done is False
    assert store.save_count == 1
    assert store.lines == ["T | 0 | Buy groceries"]
    assert "Got it. I've added this task:" in result.lines
    assert "Now you have 1 tasks in the list." in result.lines


def test_add_duplicate_fails_without_saving(store):
    executor = make_executor(store, Todo("Buy groceries"))

    with pytest.raises(DuplicateTaskError, match="already exists"):
        executor.execute(AddTodo("buy GROCERIES"))
    assert executor.tasks.size() == 1
    assert store.save_count == 0
    assert not executor.history.can_undo()


def test_add_deadline(store):
    by = datetime(2025, 12, 31, 23, 59)
    executor = make_executor(store)

    executor.execute(AddDeadline("Finish report", by))

    task = executor.tasks.get(0)
    assert isinstance(task, Deadline)
    assert task.by == by
    assert store.lines == ["D | 0 | Finish report | 2025-12-31T23:59"]


def test_add_event(store):
    start, end = datetime(2025, 6, 15, 10, 0), datetime(2025, 6, 15, 12, 0)
    executor = make_executor(store)

    executor.execute(AddEvent("Team meeting", start, end))

    task = executor.tasks.get(0)
    assert isinstance(task, Event)
    assert (task.start, task.end) == (start, end)


@pytest.mark.parametrize(
    "end",
    [datetime(2025, 6, 15, 10, 0), datetime(2025, 6, 15, 9, 0)],
)
def test_event_end_must_be_after_start(store, end):
    executor = make_executor(store)

    with pytest.raises(InvalidEventRangeError, match="end time must be after start"):
        executor.execute(AddEvent("Invalid event", datetime(2025, 6, 15, 10, 0), end))
    assert executor.tasks.size() == 0
    assert store.save_count == 0


def test_mark_and_unmark(store):
    executor = make_executor(store, Todo("Task to mark"))

    marked = executor.execute(Mark(0))
    assert executor.tasks.get(0).is_done
    assert "Nice! I've marked this task as done:" in marked.lines
    assert "  [T][X] Task to mark" in marked.lines

    unmarked = executor.execute(Unmark(0))
    assert not executor.tasks.get(0).is_done
    assert "OK, I've marked this task as not done yet:" in unmarked.lines
    assert store.save_count == 2


@pytest.mark.parametrize("command", [Mark(0), Unmark(0), Delete(0)])
def test_index_commands_on_empty_list(store, command):
    executor = make_executor(store)

    with pytest.raises(InvalidTaskNumberError, match="There are no tasks"):
        executor.execute(command)


@pytest.mark.parametrize("command", [Mark(1), Unmark(5), Delete(-1)])
def test_index_commands_out_of_range(store, command):
    executor = make_executor(store, Todo("only one"))

    with pytest.raises(ValidationError, match="valid task number"):
        executor.execute(command)
    assert store.save_count == 0


def test_delete(store):
    executor = make_executor(store, Todo("a"), Todo("b"))

    result = executor.execute(Delete(0))

    assert [t.description for t in executor.tasks] == ["b"]
    assert "Noted. I've removed this task:" in result.lines
    assert "Now you have 1 tasks in the list." in result.lines
    assert store.lines == ["T | 0 | b"]


def test_find_renumbers_matches(store):
    executor = make_executor(store, Todo("read book"), Todo("write code"), Todo("return book"))

    result = executor.execute(Find("BOOK"))

    assert result.lines == [
        "Here are the matching tasks in your list:",
        "1.[T][ ] read book",
        "2.[T][ ] return book",
    ]
    assert store.save_count == 0


def test_find_without_matches(store):
    result = make_executor(store, Todo("read book")).execute(Find("cake"))

    assert result.lines == ['No tasks found containing "cake".']
