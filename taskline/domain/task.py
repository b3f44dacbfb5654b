from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, ClassVar

from taskline.domain.enums import TaskKind


@dataclass
class _TaskBase:
    """
    Wspólna część wszystkich zadań: opis i stan ukończenia.
    Zadania są mutowalne (mark/unmark zmienia stan w miejscu);
    właścicielem każdej instancji jest dokładnie jedna `TaskList`.
    """
    description: str
    is_done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("Task description cannot be empty")

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def times(self) -> tuple[datetime, ...]:
        return ()

    def is_duplicate_of(self, other: Task) -> bool:
        """Ten sam rodzaj, opis bez względu na wielkość liter i identyczne pola czasu."""
        return (
            self.kind is other.kind
            and self.description.casefold() == other.description.casefold()
            and self.times() == other.times()
        )

    def describe(self, format_time: Callable[[datetime], str]) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}"


@dataclass
class Todo(_TaskBase):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass
class Deadline(_TaskBase):
    by: datetime
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def times(self) -> tuple[datetime, ...]:
        return (self.by,)

    def describe(self, format_time: Callable[[datetime], str]) -> str:
        return f"{super().describe(format_time)} (by: {format_time(self.by)})"


@dataclass
class Event(_TaskBase):
    """Zadanie z przedziałem czasu; kolejność start/end waliduje executor, nie model."""
    start: datetime
    end: datetime
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def times(self) -> tuple[datetime, ...]:
        return (self.start, self.end)

    def describe(self, format_time: Callable[[datetime], str]) -> str:
        return (
            f"{super().describe(format_time)} "
            f"(from: {format_time(self.start)} to: {format_time(self.end)})"
        )


# Zamknięty zestaw rodzajów zadań; dopasowanie przez `match` na klasach.
Task = Todo | Deadline | Event
