from taskline.ports.task_store import SkippedLine, TaskStore
from taskline.ports.date_format import DateFormat
from taskline.adapters.system.date_format import LocalDateFormat
from taskline.domain.task import Task, Todo, Deadline, Event
from taskline.domain.task_list import TaskList
from taskline.domain.enums import TaskKind
from taskline.domain.errors import CorruptedDataError, StorageError
from pathlib import Path
import logging
import re

logger = logging.getLogger(__name__)

DELIMITER = " | "
SPLIT_RE = re.compile(r"\s*\|\s*")
FIELD_COUNTS = {TaskKind.TODO: 3, TaskKind.DEADLINE: 4, TaskKind.EVENT: 5}


### COMMENTS
# ==========================================================
# Plik tekstowy (adapters/text/task_store.py): domyślny format zapisu.
# ==========================================================
# Jedna linia = jedno zadanie, pola rozdzielone " | ":
#   T | 0 | read book
#   D | 1 | return book | 2019-12-02T18:00
#   E | 0 | meeting | 2019-12-02T14:00 | 2019-12-02T16:00
#
# Polityka uszkodzeń: każda zła linia (za mało pól, nieznany typ, zła liczba
# pól dla danego typu, także nadmiarowe pola w linii T, nieczytelna data)
# jest pomijana, logowana i trafia do `skipped`. Nadmiarowe pole oznacza
# zwykle "|" w opisie, więc linii nie obcinamy do pierwszych pól.
# Wczytywanie przerywa tylko błąd odczytu samego pliku (StorageError).


def encode_task(task: Task, dates: DateFormat) -> str:
    fields = [task.kind.value, "1" if task.is_done else "0", task.description]
    fields.extend(dates.format_stored(t) for t in task.times())
    return DELIMITER.join(fields)


def decode_task(line: str, line_no: int, dates: DateFormat) -> Task:
    """Zamienia linię pliku na zadanie.

    :raises CorruptedDataError: Gdy linia nie opisuje poprawnego zadania.
    """
    parts = SPLIT_RE.split(line)
    if len(parts) < 3:
        raise CorruptedDataError(line_no, f"expected at least 3 fields, got {len(parts)}")
    try:
        kind = TaskKind(parts[0])
    except ValueError:
        raise CorruptedDataError(line_no, f"unknown task type '{parts[0]}'")
    if len(parts) != FIELD_COUNTS[kind]:
        raise CorruptedDataError(
            line_no, f"type {kind} needs {FIELD_COUNTS[kind]} fields, got {len(parts)}"
        )

    is_done = parts[1] == "1"
    description = parts[2]
    try:
        times = [dates.parse_stored(raw) for raw in parts[3:]]
        match kind:
            case TaskKind.TODO:
                return Todo(description, is_done=is_done)
            case TaskKind.DEADLINE:
                return Deadline(description, times[0], is_done=is_done)
            case TaskKind.EVENT:
                return Event(description, times[0], times[1], is_done=is_done)
    except ValueError as e:
        raise CorruptedDataError(line_no, str(e))


class TextTaskStore(TaskStore):
    def __init__(self, path: Path, dates: DateFormat | None = None) -> None:
        """Magazyn w pliku tekstowym; katalog tworzony dopiero przy zapisie."""
        self.path = Path(path)
        self.dates = dates or LocalDateFormat()
        self.skipped: list[SkippedLine] = []

    def load(self) -> TaskList:
        """Wczytuje zadania; brak pliku to pusta lista, nie błąd."""
        self.skipped = []
        tasks: list[Task] = []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        tasks.append(decode_task(line, lineno, self.dates))
                    except CorruptedDataError as e:
                        logger.warning("%s: skipping corrupted record: %s", self.path, e)
                        self.skipped.append(SkippedLine(e.line_no, e.reason))
        except FileNotFoundError:
            logger.info("%s does not exist yet, starting with an empty list", self.path)
            return TaskList()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(self.path, str(e))
        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return TaskList(tasks)

    def save(self, tasks: TaskList) -> None:
        """Nadpisuje cały plik bieżącą zawartością listy."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="\n") as f:
                for t in tasks:
                    f.write(encode_task(t, self.dates))
                    f.write("\n")
        except OSError as e:
            raise StorageError(self.path, str(e))
        logger.debug("saved %d task(s) to %s", tasks.size(), self.path)
