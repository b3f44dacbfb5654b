from typing import Iterable, Iterator

from taskline.domain.errors import DuplicateTaskError
from taskline.domain.task import Task


class TaskList:
    """
    Uporządkowana lista zadań; pozycja (od 0) to kolejność wyświetlania i zapisu.

    Reguła duplikatów sprawdzana jest tylko przy `add()`: lista wczytana
    z pliku nie jest czyszczona wstecznie.

    :param initial: Zadania startowe (np. z `TaskStore.load()`), bez sprawdzania duplikatów.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(initial or [])

    def add(self, task: Task) -> None:
        """
            Dodaje zadanie na koniec listy.

            :raises DuplicateTaskError: Gdy istnieje już zadanie tego samego rodzaju,
            z tym samym opisem (bez względu na wielkość liter) i tymi samymi datami.
        """
        for existing in self._tasks:
            if existing.is_duplicate_of(task):
                raise DuplicateTaskError(task)
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def mark_not_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_not_done()
        return task

    def find(self, keyword: str) -> list[Task]:
        """Zwraca nową listę zadań, których opis zawiera `keyword` (bez względu na wielkość liter)."""
        needle = keyword.casefold()
        return [t for t in self._tasks if needle in t.description.casefold()]

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def _check(self, index: int) -> int:
        # ujemne indeksy Pythona (-1 = ostatni) nie są poprawnymi numerami zadań
        if index < 0 or index >= len(self._tasks):
            raise IndexError(f"task index {index} out of range")
        return index

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
