from taskline.domain.task_list import TaskList
from taskline.domain.task import Todo, Deadline, Event
from taskline.domain.errors import DuplicateTaskError
from datetime import datetime
import pytest


def test_add_appends_not_done_task():
    # Arrange
    tasks = TaskList()

    # Act
    tasks.add(Todo("read book"))

    # Assert
    assert tasks.size() == 1
    assert tasks.get(0).description == "read book"
    assert tasks.get(0).is_done is False


def test_duplicate_todo_differing_only_by_case_is_rejected():
    tasks = TaskList()
    tasks.add(Todo("Buy Milk"))

    with pytest.raises(DuplicateTaskError):
        tasks.add(Todo("buy milk"))
    assert tasks.size() == 1


def test_same_description_different_kind_is_allowed():
    tasks = TaskList()
    tasks.add(Todo("report"))
    tasks.add(Deadline("report", datetime(2025, 1, 1, 12, 0)))

    assert tasks.size() == 2


def test_deadlines_with_different_times_are_not_duplicates():
    tasks = TaskList()
    tasks.add(Deadline("report", datetime(2025, 1, 1)))
    tasks.add(Deadline("report", datetime(2025, 1, 2)))

    with pytest.raises(DuplicateTaskError):
        tasks.add(Deadline("REPORT", datetime(2025, 1, 2)))
    assert tasks.size() == 2


def test_event_duplicate_needs_both_times_equal():
    start, end = datetime(2025, 6, 15, 10), datetime(2025, 6, 15, 12)
    tasks = TaskList()
    tasks.add(Event("meeting", start, end))
    tasks.add(Event("meeting", start, datetime(2025, 6, 15, 13)))

    with pytest.raises(DuplicateTaskError):
        tasks.add(Event("Meeting", start, end))


def test_loaded_duplicates_are_kept():
    tasks = TaskList([Todo("a"), Todo("A")])

    assert tasks.size() == 2


def test_mark_and_unmark_flip_completion():
    tasks = TaskList([Todo("a")])

    tasks.mark_done(0)
    assert tasks.get(0).is_done is True

    tasks.mark_not_done(0)
    assert tasks.get(0).is_done is False


def test_out_of_range_access_raises_index_error():
    tasks = TaskList([Todo("a")])

    with pytest.raises(IndexError):
        tasks.get(1)
    with pytest.raises(IndexError):
        tasks.remove(-1)
    with pytest.raises(IndexError):
        tasks.mark_done(5)


def test_remove_returns_task_and_shifts_order():
    tasks = TaskList([Todo("a"), Todo("b"), Todo("c")])

    removed = tasks.remove(1)

    assert removed.description == "b"
    assert [t.description for t in tasks] == ["a", "c"]


def test_find_is_case_insensitive_and_keeps_order():
    tasks = TaskList([Todo("Read book"), Todo("write code"), Todo("return BOOK")])

    found = tasks.find("book")

    assert [t.description for t in found] == ["Read book", "return BOOK"]


def test_find_result_is_independent_of_later_changes():
    tasks = TaskList([Todo("book one"), Todo("book two")])

    found = tasks.find("book")
    tasks.remove(0)

    assert len(found) == 2
    assert tasks.size() == 1


def test_empty_description_is_rejected_by_model():
    with pytest.raises(ValueError):
        Todo("   ")


def test_is_empty():
    assert TaskList().is_empty()
    assert not TaskList([Todo("a")]).is_empty()
