from taskline.ports.task_store import SkippedLine
from taskline.ports.date_format import DateFormat
from taskline.adapters.system.date_format import LocalDateFormat
from taskline.adapters.text.task_store import encode_task, decode_task
from taskline.domain.task_list import TaskList
from taskline.domain.errors import CorruptedDataError
from typing import Iterable


### COMMENTS
# ==========================================================
# Adapter pamięciowy (adapters/memory/task_store.py).
# ==========================================================
# - Służy do testów i sesji bez trwałości (`--memory`).
# - Przechowuje ostatni zapis jako linie w formacie tekstowym, więc `load()`
#   zwraca zawsze nowe obiekty (brak współdzielenia instancji z TaskList).
# - `save_count` pozwala testom sprawdzić, czy komenda zapisała listę.


class InMemoryTaskStore:
    """
        :param initial: Linie w formacie pliku tekstowego do wstępnego załadowania.
    """
    def __init__(self, initial: Iterable[str] | None = None, dates: DateFormat | None = None) -> None:
        self.dates = dates or LocalDateFormat()
        self.lines: list[str] = list(initial or [])
        self.save_count = 0
        self.skipped: list[SkippedLine] = []

    def load(self) -> TaskList:
        self.skipped = []
        tasks = []
        for lineno, line in enumerate(self.lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(decode_task(line.strip(), lineno, self.dates))
            except CorruptedDataError as e:
                self.skipped.append(SkippedLine(e.line_no, e.reason))
        return TaskList(tasks)

    def save(self, tasks: TaskList) -> None:
        self.lines = [encode_task(t, self.dates) for t in tasks]
        self.save_count += 1
