"""
Database module for Noted.

SQLite storage for notes, plus the canonical display ordering.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

from pydantic import BaseModel, Field

from noted.config import get_db_path
from noted.errors import StorageError, StorageUnavailable

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

# AUTOINCREMENT keeps ids from being reused after the newest note is deleted.
SCHEMA = """
CREATE TABLE IF NOT EXISTS notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    text TEXT,
    completed INTEGER NOT NULL
);
"""


class Note(BaseModel):
    """A single tracked note."""

    id: int = Field(description="Store-assigned id, never reused")
    name: str = Field(description="Short label")
    text: str = Field(default="", description="Free-form body")
    completed: bool = Field(default=False, description="Completion flag")

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Note":
        return cls(
            id=row["id"],
            name=row["name"],
            text=row["text"] or "",
            completed=bool(row["completed"]),
        )

    def sort_key(self) -> tuple[bool, int, str, str]:
        """Not completed first, then by id. name/text only break exact ties."""
        return (self.completed, self.id, self.name, self.text)

    def __lt__(self, other: "Note") -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def sort_notes(notes: Iterable[Note]) -> list[Note]:
    """Return notes in canonical display order."""
    return sorted(notes, key=Note.sort_key)


class Database:
    """SQLite database wrapper for Noted.

    Holds a single connection for its lifetime. Pass ":memory:" (or use
    Database.in_memory()) for a throwaway store.
    """

    def __init__(self, db_path: Path | str | None = None):
        if db_path is None:
            db_path = get_db_path()
        self.db_path = MEMORY if str(db_path) == MEMORY else Path(db_path)
        self._conn: sqlite3.Connection | None = None
        self._open()

    @classmethod
    def in_memory(cls) -> "Database":
        return cls(MEMORY)

    @property
    def is_memory(self) -> bool:
        return self.db_path == MEMORY

    def _open(self) -> None:
        """Open the connection and create the schema if it is missing."""
        try:
            if not self.is_memory:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as e:
            raise StorageUnavailable(f"Cannot open database {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            conn.close()
            raise StorageUnavailable(f"Cannot open database {self.db_path}: {e}") from e

        self._conn = conn
        logger.debug("Opened database %s, schema ready", self.db_path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Context manager for a single statement against the open connection."""
        if self._conn is None:
            raise StorageError("Database is closed")
        conn = self._conn
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Statement failed on %s: %s", self.db_path, e)
            raise StorageError(str(e)) from e

    def add_note(self, name: str, text: str = "") -> Note:
        """Insert a new, not completed note. Returns it with its id."""
        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO notes (name, text, completed) VALUES (?, ?, 0)",
                (name, text),
            )
            note_id = cursor.lastrowid

        logger.debug("Added note %s", note_id)
        return Note(id=note_id, name=name, text=text, completed=False)

    def get_note(self, note_id: int) -> Note | None:
        """Get a single note by id."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM notes WHERE id = ?", (note_id,)
            ).fetchone()
        if row:
            return Note.from_row(row)
        return None

    def get_all_notes(self) -> list[Note]:
        """Get every note. Order is unspecified; use sort_notes() for display."""
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM notes").fetchall()
        return [Note.from_row(row) for row in rows]

    def search_notes(self, pattern: str) -> list[Note]:
        """Notes whose name matches a LIKE pattern (% = any run, _ = one char)."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM notes WHERE name LIKE ?", (pattern,)
            ).fetchall()
        return [Note.from_row(row) for row in rows]

    def _update(self, sql: str, params: tuple, action: str, note_id: int) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(sql, params)
            changed = cursor.rowcount > 0

        if changed:
            logger.debug("%s note %s", action, note_id)
        else:
            logger.debug("%s note %s: no such note", action, note_id)
        return changed

    def remove_note(self, note_id: int) -> bool:
        """Delete a note. Returns False (not an error) if it did not exist."""
        return self._update(
            "DELETE FROM notes WHERE id = ?", (note_id,), "Removed", note_id
        )

    def complete_note(self, note_id: int) -> bool:
        """Mark a note completed. Completing twice is fine."""
        return self._update(
            "UPDATE notes SET completed = 1 WHERE id = ?",
            (note_id,), "Completed", note_id,
        )

    def uncomplete_note(self, note_id: int) -> bool:
        """Mark a note not completed."""
        return self._update(
            "UPDATE notes SET completed = 0 WHERE id = ?",
            (note_id,), "Uncompleted", note_id,
        )

    def rename_note(self, note_id: int, new_name: str) -> bool:
        """Overwrite a note's name."""
        return self._update(
            "UPDATE notes SET name = ? WHERE id = ?",
            (new_name, note_id), "Renamed", note_id,
        )

    def change_note_text(self, note_id: int, new_text: str) -> bool:
        """Overwrite a note's text."""
        return self._update(
            "UPDATE notes SET text = ? WHERE id = ?",
            (new_text, note_id), "Changed text of", note_id,
        )
