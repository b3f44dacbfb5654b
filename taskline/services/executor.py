from dataclasses import dataclass, field
from typing import Literal
import logging

from taskline.ports.task_store import TaskStore
from taskline.ports.date_format import DateFormat
from taskline.adapters.system.date_format import LocalDateFormat
from taskline.domain.commands import (
    Command, ListTasks, Exit, Undo, AddTodo, AddDeadline, AddEvent,
    Mark, Unmark, Delete, Find,
)
from taskline.domain.errors import InvalidEventRangeError, InvalidTaskNumberError
from taskline.domain.task import Task, Todo, Deadline, Event
from taskline.domain.task_list import TaskList
from taskline.services.history import UndoHistory

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Wykonanie komend (services/executor.py): przypadki użycia.
# ==========================================================
# Rola:
# - Stosuje Command do TaskList i zapisuje listę przez port TaskStore.
# - Waliduje numery zadań i przedział czasu wydarzenia (ValidationError).
# - Zwraca CommandResult z gotowymi liniami tekstu; wyświetlanie to sprawa UI.
#
# Zasady:
# - Każda komenda zmieniająca listę → pełny zapis (`store.save`).
# - Do historii undo trafiają tylko komendy zmieniające listę, po zmianie w pamięci.
# - List/Find/Exit/Undo nigdy nie są zapisywane w historii.


@dataclass(frozen=True)
class CommandResult:
    lines: list[str] = field(default_factory=list)
    is_exit: bool = False
    kind: Literal["success", "info", "warning"] = "info"

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class CommandExecutor:
    """
    Wykonuje komendy na liście zadań.

    :param tasks: Lista zadań (jedyny właściciel zadań w sesji).
    :param store: Implementacja portu TaskStore.
    :param history: Historia undo (domyślnie nowa, pusta).
    :param dates: Adapter formatów daty do opisu zadań.
    """
    def __init__(
        self,
        tasks: TaskList,
        store: TaskStore,
        history: UndoHistory | None = None,
        dates: DateFormat | None = None,
    ) -> None:
        self.tasks = tasks
        self.store = store
        self.history = history or UndoHistory()
        self.dates = dates or LocalDateFormat()

    def describe(self, task: Task) -> str:
        return task.describe(self.dates.format_display)

    def execute(self, command: Command) -> CommandResult:
        """
            Wykonuje jedną komendę.

            :raises ValidationError: Numer zadania poza zakresem, duplikat, zły przedział czasu,
            brak czegoś do cofnięcia.
            :raises StorageError: Gdy zapis listy się nie powiódł.
            :return: Linie potwierdzenia dla użytkownika.
        """
        logger.debug("executing %r", command)
        match command:
            case ListTasks():
                result = self._list()
            case Exit():
                result = CommandResult(["Bye. Hope to see you again soon!"], is_exit=True)
            case AddTodo(description=desc):
                result = self._add(command, Todo(desc))
            case AddDeadline(description=desc, by=by):
                result = self._add(command, Deadline(desc, by))
            case AddEvent(description=desc, start=start, end=end):
                if end <= start:
                    raise InvalidEventRangeError()
                result = self._add(command, Event(desc, start, end))
            case Mark(index=index):
                self._validate_index(index, "mark")
                task = self.tasks.mark_done(index)
                self._commit(command)
                result = CommandResult(
                    ["Nice! I've marked this task as done:", f"  {self.describe(task)}"], kind="success"
                )
            case Unmark(index=index):
                self._validate_index(index, "unmark")
                task = self.tasks.mark_not_done(index)
                self._commit(command)
                result = CommandResult(
                    ["OK, I've marked this task as not done yet:", f"  {self.describe(task)}"], kind="success"
                )
            case Delete(index=index):
                self._validate_index(index, "delete")
                task = self.tasks.remove(index)
                self._commit(command)
                result = CommandResult(
                    [
                        "Noted. I've removed this task:",
                        f"  {self.describe(task)}",
                        f"Now you have {self.tasks.size()} tasks in the list.",
                    ],
                    kind="success",
                )
            case Find(keyword=keyword):
                result = self._find(keyword)
            case Undo():
                result = self._undo()
            case _:
                raise TypeError(f"unsupported command: {command!r}")
        return result

    def _commit(self, command: Command) -> None:
        # zmiana jest już w pamięci; wpis w historii nawet gdy zapis się nie uda
        self.history.record(command)
        self.store.save(self.tasks)

    def _validate_index(self, index: int, action: str) -> None:
        size = self.tasks.size()
        if size == 0 or index < 0 or index >= size:
            raise InvalidTaskNumberError(action, size)

    def _add(self, command: Command, task: Task) -> CommandResult:
        self.tasks.add(task)
        self._commit(command)
        return CommandResult(
            [
                "Got it. I've added this task:",
                f"  {self.describe(task)}",
                f"Now you have {self.tasks.size()} tasks in the list.",
            ],
            kind="success",
        )

    def _list(self) -> CommandResult:
        if self.tasks.is_empty():
            return CommandResult(["Your list is empty."])
        lines = ["Here are the tasks in your list:"]
        lines += [f"{i}.{self.describe(t)}" for i, t in enumerate(self.tasks, start=1)]
        return CommandResult(lines)

    def _find(self, keyword: str) -> CommandResult:
        matches = self.tasks.find(keyword)
        if not matches:
            return CommandResult([f'No tasks found containing "{keyword}".'])
        lines = ["Here are the matching tasks in your list:"]
        lines += [f"{i}.{self.describe(t)}" for i, t in enumerate(matches, start=1)]
        return CommandResult(lines)

    def _undo(self) -> CommandResult:
        outcome = self.history.undo_last(self.tasks)
        if outcome.changed:
            self.store.save(self.tasks)
        kind = "success" if outcome.complete and outcome.changed else "warning"
        return CommandResult([outcome.message], kind=kind)
