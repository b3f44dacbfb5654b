from taskline.domain.errors import DomainError, ParseError, ValidationError, StorageError
from taskline.domain.task_list import TaskList
from taskline.ports.task_store import TaskStore
from taskline.services.parser import CommandParser
from taskline.services.executor import CommandExecutor, CommandResult
from taskline.adapters.text.task_store import TextTaskStore
from taskline.adapters.sql.task_store import SqlTaskStore
from taskline.adapters.memory.task_store import InMemoryTaskStore
from taskline.api.colors import PanelColor
from typer import Argument, Context, Option, Typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging


### COMMENTS
# ==========================================================
# CLI (Typer + Rich): interfejs użytkownika dla Taskline.
# ==========================================================
# Rola:
# - Wczytuje listę, buduje parser + executor, czyta linie komend.
# - Wyświetla wyniki w panelach (kolor ramki zależny od rodzaju wyniku).
# - Łapie DomainError przy każdej komendzie i drukuje przyjazny komunikat;
#   pętla działa dalej.
#
# Zasady:
# - Zero logiki biznesowej, deleguj do CommandParser / CommandExecutor.
# - Jednorazowy bootstrap sesji w callbacku.
# - Gdy pliku nie da się odczytać, sesja działa tylko w pamięci.

logger = logging.getLogger(__name__)

DEFAULT_FILE = Path("data/taskline.txt")

app = Typer(help="Taskline, a line-oriented task manager")
console = Console()
err_console = Console(stderr=True)


@dataclass
class Session:
    parser: CommandParser
    executor: CommandExecutor
    notices: list[str] = field(default_factory=list)


session: Session | None = None  # ustawimy w callbacku


def build_store(file: Path, db: Optional[Path], memory: bool) -> TaskStore:
    """Tworzy magazyn na bazie wybranego adaptera.
    - --memory -> InMemory (bez trwałości)
    - --db     -> SQLite
    - domyślnie -> plik tekstowy
    """
    if memory:
        return InMemoryTaskStore()
    if db:
        return SqlTaskStore(db)
    return TextTaskStore(file)


def build_session(file: Path, db: Optional[Path] = None, memory: bool = False) -> Session:
    """Wczytuje listę zadań; błąd odczytu → pusta lista i tryb tylko w pamięci."""
    notices: list[str] = []
    try:
        store = build_store(file, db, memory)
        tasks = store.load()
    except StorageError as e:
        logger.error("falling back to in-memory list: %s", e)
        notices.append(f"{e}\nStarting with an empty list; changes will not be saved.")
        store = InMemoryTaskStore()
        tasks = TaskList()

    if store.skipped:
        lines = [f"Skipped {len(store.skipped)} corrupted line(s) in the save file:"]
        lines += [f"  line {s.line_no}: {s.reason}" for s in store.skipped]
        notices.append("\n".join(lines))

    return Session(CommandParser(), CommandExecutor(tasks, store), notices)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: Context,
    file: Path = Option(
        DEFAULT_FILE,
        "--file",
        "-f",
        envvar="TASKLINE_FILE",
        help="Ścieżka do pliku z zadaniami",
    ),
    db: Optional[Path] = Option(
        None,
        "--db",
        envvar="TASKLINE_DB",
        help="Ścieżka do bazy SQLite (zamiast pliku tekstowego)",
    ),
    memory: bool = Option(False, "--memory", help="Bez zapisu na dysk"),
    log_level: str = Option("WARNING", "--log-level", envvar="TASKLINE_LOG_LEVEL"),
) -> None:
    """Bootstrap sesji na starcie procesu CLI."""
    global session
    configure_logging(log_level)
    session = build_session(file, db, memory)
    if ctx.invoked_subcommand is None:
        chat()


def render_result(result: CommandResult) -> None:
    console.print(Panel.fit(
        escape(result.text),
        border_style=str(PanelColor.for_result(result.kind)),
    ))


def render_error(message: str, title: str, hint: str | None = None) -> None:
    body = f"❌ {escape(message)}"
    if hint:
        body += f"\n[dim]{escape(hint)}[/]"
    console.print(Panel.fit(body, title=title, border_style=str(PanelColor.ERROR)))


def dispatch(line: str) -> bool:
    """
    Parsuje i wykonuje jedną linię.

    Flow:
    - command = parser.parse(line); result = executor.execute(command)
    - Sukces: panel z liniami wyniku.
    - Błąd: ParseError / ValidationError / StorageError → czerwony panel, stan bez zmian.

    :return: False, gdy komenda kończy sesję (bye).
    """
    try:
        command = session.parser.parse(line)
        result = session.executor.execute(command)
    except ParseError as e:
        render_error(str(e), "Invalid command")
        return True
    except ValidationError as e:
        render_error(str(e), "Cannot do that")
        return True
    except StorageError as e:
        render_error(str(e), "Storage problem", hint="The change is kept in memory only.")
        return True
    except DomainError as e:
        render_error(str(e), "Error")
        return True
    render_result(result)
    return not result.is_exit


def show_notices() -> None:
    for notice in session.notices:
        console.print(Panel.fit(escape(notice), title="Save file", border_style=str(PanelColor.WARNING)))


@app.command("chat")
def chat() -> None:
    """
    Interaktywna pętla: jedna komenda na linię, aż do `bye` albo Ctrl-D.
    """
    console.print(Panel.fit("Hello! I'm Taskline\nWhat can I do for you?", border_style=str(PanelColor.INFO)))
    show_notices()
    while True:
        try:
            line = console.input("[bold cyan]> [/]")
        except (EOFError, KeyboardInterrupt):
            console.print(Panel.fit("Bye. Hope to see you again soon!", border_style=str(PanelColor.INFO)))
            return
        if not dispatch(line):
            return


@app.command("run")
def run(lines: list[str] = Argument(..., help="Komendy, każda jako osobny argument")) -> None:
    """
    Wykonuje podane komendy po kolei w jednej sesji (undo działa między nimi).

    Przykład: taskline run "todo read book" "mark 1" "undo" "list"
    """
    show_notices()
    for line in lines:
        if not dispatch(line):
            break


if __name__ == "__main__":
    app()
