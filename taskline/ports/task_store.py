from typing import NamedTuple, Protocol
from taskline.domain.task_list import TaskList


### COMMENTS
# ==========================================================
# Kontrakt magazynu zadań (ports/task_store.py).
# ==========================================================
# - Niezależny od technologii (plik tekstowy, SQLite, pamięć).
# - Ścieżka/URL przekazywane w konstruktorze adaptera, nie w każdym wywołaniu.
# - Zapis to zawsze pełne nadpisanie (bez dopisywania przyrostowego).
# - Adaptery mapują błędy techniczne na StorageError; uszkodzone rekordy
#   są pomijane i odnotowywane w `skipped`.


class SkippedLine(NamedTuple):
    line_no: int
    reason: str


class TaskStore(Protocol):
    """Interfejs trwałości dla całej `TaskList`."""

    skipped: list[SkippedLine]

    def load(self) -> TaskList:
        """Wczytuje listę zadań.

        Zwraca:
            TaskList: Zadania w zapisanej kolejności; brak pliku → pusta lista.

        Wyjątki domenowe:
            StorageError: Gdy źródła nie da się odczytać.

        Uwagi:
            Uszkodzone rekordy są pomijane, a ich numery i powody trafiają
            do `skipped` (nadpisywanego przy każdym `load()`).
        """

    def save(self, tasks: TaskList) -> None:
        """Zapisuje wszystkie zadania w bieżącej kolejności (pełne nadpisanie).

        Wyjątki domenowe:
            StorageError: Gdy zapis się nie powiódł.
        """
