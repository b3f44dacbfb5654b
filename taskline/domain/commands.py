from dataclasses import dataclass
from datetime import datetime


### COMMENTS
# ==========================================================
# Komendy (domain/commands.py): wynik parsowania jednej linii.
# ==========================================================
# - Każda komenda to niemutowalny obiekt (`frozen=True`) niosący tylko dane
#   potrzebne do wykonania: opis, daty, indeks od 0 albo słowo kluczowe.
# - Zestaw komend jest zamknięty (`Command` = unia); executor dopasowuje je `match`.
# - Komendy zmieniające listę (MUTATING_COMMANDS) trafiają do historii undo
#   dokładnie w takiej postaci, w jakiej zostały wykonane.


@dataclass(frozen=True)
class ListTasks:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class AddTodo:
    description: str


@dataclass(frozen=True)
class AddDeadline:
    description: str
    by: datetime


@dataclass(frozen=True)
class AddEvent:
    description: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class Mark:
    index: int


@dataclass(frozen=True)
class Unmark:
    index: int


@dataclass(frozen=True)
class Delete:
    index: int


@dataclass(frozen=True)
class Find:
    keyword: str


@dataclass(frozen=True)
class Undo:
    pass


Command = ListTasks | Exit | AddTodo | AddDeadline | AddEvent | Mark | Unmark | Delete | Find | Undo

ADD_COMMANDS = (AddTodo, AddDeadline, AddEvent)
MUTATING_COMMANDS = ADD_COMMANDS + (Mark, Unmark, Delete)
