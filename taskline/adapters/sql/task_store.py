from __future__ import annotations
import logging
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from pathlib import Path
from taskline.ports.task_store import SkippedLine, TaskStore
from taskline.ports.date_format import DateFormat
from taskline.adapters.system.date_format import LocalDateFormat
from taskline.domain.task import Task, Todo, Deadline, Event
from taskline.domain.task_list import TaskList
from taskline.domain.enums import TaskKind
from taskline.domain.errors import StorageError

logger = logging.getLogger(__name__)


class SqlTaskStore(TaskStore):
    def __init__(self, url: str | Path, dates: DateFormat | None = None) -> None:
        """
        url: np. 'sqlite:///data/taskline.db' lub Path do pliku (zostanie zrobiony URL)
        """
        db_url = f"sqlite:///{url}" if isinstance(url, Path) else url

        self.url = db_url
        self.dates = dates or LocalDateFormat()
        self.skipped: list[SkippedLine] = []
        self.meta = db.MetaData()

        # pozycja = kolejność na liście (od 0)
        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("position", db.Integer, primary_key=True, autoincrement=False),
            db.Column("kind", db.String(1), nullable=False),         # 'T'/'D'/'E'
            db.Column("done", db.Boolean, nullable=False),
            db.Column("description", db.String, nullable=False),
            db.Column("by_at", db.String, nullable=True),            # ISO 'yyyy-MM-ddTHH:MM'
            db.Column("start_at", db.String, nullable=True),
            db.Column("end_at", db.String, nullable=True),
        )

        try:
            if isinstance(url, Path):
                url.parent.mkdir(parents=True, exist_ok=True)
            self.engine = db.create_engine(db_url, future=True)
            self.meta.create_all(self.engine)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(self.url, str(e))

    def _encode_dt(self, value) -> str | None:
        return None if value is None else self.dates.format_stored(value)

    def _decode_dt(self, raw: str | None):
        if raw is None:
            raise ValueError("missing timestamp")
        return self.dates.parse_stored(raw)

    def _to_row(self, position: int, task: Task) -> dict:
        row = {
            "position": position,
            "kind": task.kind.value,
            "done": task.is_done,
            "description": task.description,
            "by_at": None,
            "start_at": None,
            "end_at": None,
        }
        match task:
            case Deadline(by=by):
                row["by_at"] = self._encode_dt(by)
            case Event(start=start, end=end):
                row["start_at"] = self._encode_dt(start)
                row["end_at"] = self._encode_dt(end)
        return row

    def _from_row(self, row) -> Task:
        kind = TaskKind(row["kind"])
        done = bool(row["done"])
        match kind:
            case TaskKind.TODO:
                return Todo(row["description"], is_done=done)
            case TaskKind.DEADLINE:
                return Deadline(row["description"], self._decode_dt(row["by_at"]), is_done=done)
            case TaskKind.EVENT:
                return Event(
                    row["description"],
                    self._decode_dt(row["start_at"]),
                    self._decode_dt(row["end_at"]),
                    is_done=done,
                )

    def load(self) -> TaskList:
        self.skipped = []
        stmt = db.select(self.tasks).order_by(self.tasks.c.position.asc())
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(self.url, str(e))

        tasks: list[Task] = []
        for row in rows:
            try:
                tasks.append(self._from_row(row))
            except ValueError as e:
                # ta sama polityka co plik tekstowy: zły rekord pomijamy
                logger.warning("%s: skipping corrupted row %s: %s", self.url, row["position"], e)
                self.skipped.append(SkippedLine(row["position"] + 1, str(e)))
        return TaskList(tasks)

    def save(self, tasks: TaskList) -> None:
        rows = [self._to_row(i, t) for i, t in enumerate(tasks)]
        try:
            with self.engine.begin() as conn:
                conn.execute(db.delete(self.tasks))
                if rows:
                    conn.execute(db.insert(self.tasks), rows)
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(self.url, str(e))
        logger.debug("saved %d task(s) to %s", len(rows), self.url)
