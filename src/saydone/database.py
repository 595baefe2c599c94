"""SQLite persistence for the task list."""

import sqlite3
from contextlib import contextmanager
from datetime import date, datetime
from typing import Iterable, Iterator

from .config import settings
from .models.task import Category, TaskRecord, Urgency


def init_db() -> None:
    """Initialize the database schema."""
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)

    with get_connection() as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS tasks (
                id TEXT PRIMARY KEY,
                position INTEGER NOT NULL,
                description TEXT NOT NULL,
                due_date TEXT,
                category TEXT NOT NULL,
                urgency TEXT NOT NULL,
                completed INTEGER NOT NULL DEFAULT 0,
                completed_at TEXT
            )
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_position ON tasks(position)
        """)
        conn.commit()


@contextmanager
def get_connection() -> Iterator[sqlite3.Connection]:
    """Get a database connection."""
    conn = sqlite3.connect(str(settings.db_path))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def save_tasks(tasks: Iterable[TaskRecord]) -> None:
    """Replace the stored task list, keeping list order."""
    with get_connection() as conn:
        conn.execute("DELETE FROM tasks")
        conn.executemany(
            """
            INSERT INTO tasks
            (id, position, description, due_date, category, urgency,
             completed, completed_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                (
                    task.id,
                    position,
                    task.description,
                    task.due_date.isoformat() if task.due_date else None,
                    task.category.value,
                    task.urgency.value,
                    int(task.completed),
                    task.completed_at.isoformat() if task.completed_at else None,
                )
                for position, task in enumerate(tasks)
            ],
        )
        conn.commit()


def load_tasks() -> list[TaskRecord]:
    """Load the stored task list in order."""
    with get_connection() as conn:
        rows = conn.execute("SELECT * FROM tasks ORDER BY position").fetchall()
        return [_row_to_task(row) for row in rows]


def _row_to_task(row: sqlite3.Row) -> TaskRecord:
    """Convert a database row to a TaskRecord."""
    return TaskRecord(
        id=row["id"],
        description=row["description"],
        due_date=date.fromisoformat(row["due_date"]) if row["due_date"] else None,
        category=Category(row["category"]),
        urgency=Urgency(row["urgency"]),
        completed=bool(row["completed"]),
        completed_at=datetime.fromisoformat(row["completed_at"]) if row["completed_at"] else None,
    )
