from taskline.ports.date_format import DateFormat
from taskline.adapters.system.date_format import LocalDateFormat
from taskline.domain.errors import ParseError
from taskline.domain.commands import (
    Command, ListTasks, Exit, Undo, AddTodo, AddDeadline, AddEvent,
    Mark, Unmark, Delete, Find,
)
from datetime import datetime
import re

COMMAND_WORDS = ("todo", "deadline", "event", "list", "mark", "unmark", "delete", "find", "undo", "bye")
INDEX_RE = re.compile(r"[+-]?\d+")


### COMMENTS
# ==========================================================
# Parser komend (services/parser.py).
# ==========================================================
# - Bezstanowy: jedna linia → jeden obiekt Command albo ParseError.
# - Pierwsze słowo (bez względu na wielkość liter) wybiera komendę,
#   reszta linii przekazywana jest dalej bez zmian.
# - Słowa kluczowe /by, /from, /to szukane są od końca (ostatnie wystąpienie),
#   więc opis może sam zawierać te napisy.
# - Parser nie zna rozmiaru listy: `mark 99` to poprawna komenda,
#   zakres sprawdza executor.


class CommandParser:
    """
    Zamienia surową linię wejścia na komendę.

    :param dates: Adapter formatów daty (domyślnie `LocalDateFormat`).
    """
    def __init__(self, dates: DateFormat | None = None) -> None:
        self.dates = dates or LocalDateFormat()

    def parse(self, raw_line: str) -> Command:
        """
            Parsuje jedną linię komendy.

            :param raw_line: Tekst wpisany przez użytkownika.
            :raises ParseError: Gdy linia jest pusta, komenda nieznana lub argumenty niepoprawne.
            :return: Niemutowalny obiekt komendy.
        """
        line = raw_line.strip()
        if not line:
            raise ParseError("Input cannot be empty.")

        parts = line.split(maxsplit=1)
        word = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        match word:
            case "list":
                return ListTasks()
            case "bye":
                return Exit()
            case "undo":
                return Undo()
            case "todo":
                return AddTodo(self._description(rest, "todo"))
            case "deadline":
                return self._deadline(rest)
            case "event":
                return self._event(rest)
            case "mark":
                return Mark(self._index(rest, "mark"))
            case "unmark":
                return Unmark(self._index(rest, "unmark"))
            case "delete":
                return Delete(self._index(rest, "delete"))
            case "find":
                keyword = rest.strip()
                if not keyword:
                    raise ParseError("The keyword to find cannot be empty.", usage="find <keyword>")
                return Find(keyword)
            case _:
                raise ParseError(
                    "Not a valid command. Please use one of the following commands:\n"
                    + ", ".join(COMMAND_WORDS)
                )

    def _description(self, rest: str, word: str) -> str:
        desc = rest.strip()
        if not desc:
            raise ParseError(f"The description of a {word} cannot be empty.", usage=f"{word} <description>")
        return desc

    def _index(self, rest: str, word: str) -> int:
        usage = f"{word} <task number>"
        tokens = rest.split()
        if not tokens or not INDEX_RE.fullmatch(tokens[0]):
            raise ParseError("Please give the task number as a whole number.", usage=usage)
        try:
            value = int(tokens[0])
        except ValueError:
            # int() odrzuca napisy dłuższe niż sys.get_int_max_str_digits()
            raise ParseError("The task number is too long.", usage=usage)
        return value - 1

    def _time(self, raw: str) -> datetime:
        try:
            return self.dates.parse_input(raw)
        except ValueError as e:
            raise ParseError(str(e))

    def _deadline(self, rest: str) -> AddDeadline:
        usage = "deadline <description> /by <time>"
        if not rest.strip():
            raise ParseError("The description of a deadline cannot be empty.", usage=usage)
        by_pos = rest.rfind("/by")
        if by_pos == -1:
            raise ParseError("A deadline needs a /by time.", usage=usage)

        desc = rest[:by_pos].strip()
        raw_by = rest[by_pos + len("/by"):].strip()
        if not desc or not raw_by:
            raise ParseError("A deadline needs both a description and a /by time.", usage=usage)
        return AddDeadline(desc, self._time(raw_by))

    def _event(self, rest: str) -> AddEvent:
        usage = "event <description> /from <start> /to <end>"
        if not rest.strip():
            raise ParseError("The description of an event cannot be empty.", usage=usage)
        from_pos = rest.rfind("/from")
        to_pos = rest.rfind("/to")
        if from_pos == -1 or to_pos == -1 or to_pos <= from_pos:
            raise ParseError("An event needs /from followed by /to.", usage=usage)

        desc = rest[:from_pos].strip()
        raw_start = rest[from_pos + len("/from"):to_pos].strip()
        raw_end = rest[to_pos + len("/to"):].strip()
        if not desc or not raw_start or not raw_end:
            raise ParseError("An event needs a description, a start and an end.", usage=usage)
        return AddEvent(desc, self._time(raw_start), self._time(raw_end))
