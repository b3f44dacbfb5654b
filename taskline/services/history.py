from dataclasses import dataclass
import logging

from taskline.domain.commands import (
    Command, AddTodo, AddDeadline, AddEvent, Mark, Unmark, Delete, MUTATING_COMMANDS,
)
from taskline.domain.errors import NothingToUndoError
from taskline.domain.task_list import TaskList

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UndoOutcome:
    """Wynik cofnięcia: komunikat dla użytkownika i czy lista się zmieniła."""
    message: str
    changed: bool
    complete: bool = True


class UndoHistory:
    """
    Liniowa historia wykonanych komend zmieniających listę.

    `current_index` wskazuje ostatni jeszcze niecofnięty wpis (-1 = brak).
    Dopisanie nowej komendy po cofnięciu usuwa wpisy za kursorem.
    Historia żyje tylko w pamięci procesu.
    """
    def __init__(self) -> None:
        self._entries: list[Command] = []
        self.current_index = -1

    def record(self, command: Command) -> None:
        if not isinstance(command, MUTATING_COMMANDS):
            raise TypeError(f"{type(command).__name__} cannot be recorded for undo")
        del self._entries[self.current_index + 1:]
        self._entries.append(command)
        self.current_index += 1

    def can_undo(self) -> bool:
        return self.current_index >= 0

    def last_command(self) -> Command | None:
        if not self.can_undo():
            return None
        return self._entries[self.current_index]

    def step_back(self) -> bool:
        """Cofa kursor o jedną pozycję, bez zmiany zadań."""
        if not self.can_undo():
            return False
        self.current_index -= 1
        return True

    def undo_count(self) -> int:
        return self.current_index + 1

    def undo_last(self, tasks: TaskList) -> UndoOutcome:
        """
            Cofa ostatnią zapisaną komendę, stosując jej odwrotność bezpośrednio na liście.

            - Dodanie → usunięcie zadania z ostatniej pozycji listy.
            - Mark/Unmark → przywrócenie poprzedniego stanu pod zapisanym indeksem.
            - Delete → nie da się odtworzyć zadania; zwracana jest tylko informacja
              o jego pozycji (`complete=False`).

            :raises NothingToUndoError: Gdy historia jest pusta.
        """
        command = self.last_command()
        if command is None:
            raise NothingToUndoError()
        self.step_back()
        logger.debug("undoing %r", command)

        match command:
            case AddTodo() | AddDeadline() | AddEvent():
                if tasks.is_empty():
                    return UndoOutcome("Undone add command, but the list is already empty.", changed=False)
                tasks.remove(tasks.size() - 1)
                return UndoOutcome("Undone add command. Task removed.", changed=True)
            case Mark(index=index):
                if index >= tasks.size():
                    return UndoOutcome(f"Cannot undo mark: task {index + 1} no longer exists.", changed=False)
                tasks.mark_not_done(index)
                return UndoOutcome("Undone mark command. Task marked as not done.", changed=True)
            case Unmark(index=index):
                if index >= tasks.size():
                    return UndoOutcome(f"Cannot undo unmark: task {index + 1} no longer exists.", changed=False)
                tasks.mark_done(index)
                return UndoOutcome("Undone unmark command. Task marked as done.", changed=True)
            case Delete(index=index):
                return UndoOutcome(
                    f"Delete command cannot be fully undone. Task was at index {index + 1}.",
                    changed=False,
                    complete=False,
                )
            case _:
                return UndoOutcome("Command type cannot be undone.", changed=False, complete=False)
