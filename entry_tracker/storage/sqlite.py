# entry_tracker/storage/sqlite.py
import logging
import sqlite3
from dataclasses import replace
from pathlib import Path
from typing import List

from entry_tracker.core.models import TransactionRecord
from entry_tracker.errors import NotFound, PersistenceError
from entry_tracker.storage.base import BaseRepository, build_record

logger = logging.getLogger(__name__)


def _init_db(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS entries (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            txn_day INTEGER NOT NULL,
            txn_month INTEGER NOT NULL,
            txn_year INTEGER NOT NULL,
            description TEXT NOT NULL,
            amount REAL NOT NULL,
            expense INTEGER NOT NULL DEFAULT 0
        )
        """
    )
    conn.commit()


def _row_to_record(row) -> TransactionRecord:
    return TransactionRecord(
        id=int(row[0]),
        day=int(row[1]),
        month=int(row[2]),
        year=int(row[3]),
        description=row[4],
        amount=float(row[5]),
        is_expense=bool(row[6]),
    )


class SQLiteRepository(BaseRepository):
    """Entries stored in a single SQLite table.

    The table is created on first use. Every call opens and closes its own
    connection so the repository can be handed to a worker thread.
    """

    def __init__(self, db_path: str):
        self.db_path = str(db_path)

    @classmethod
    def from_config(cls, config):
        return cls(config['db_path'])

    def _connect(self) -> sqlite3.Connection:
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(f"Cannot open database {self.db_path}: {exc}") from exc
        try:
            _init_db(conn)
        except sqlite3.Error as exc:
            conn.close()
            raise PersistenceError(f"Cannot open database {self.db_path}: {exc}") from exc
        return conn

    def create(self, data) -> TransactionRecord:
        record = build_record(data)
        conn = self._connect()
        try:
            cur = conn.execute(
                """
                INSERT INTO entries
                (txn_day, txn_month, txn_year, description, amount, expense)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    record.day,
                    record.month,
                    record.year,
                    record.description,
                    float(record.amount),
                    int(record.is_expense),
                ),
            )
            conn.commit()
            entry_id = cur.lastrowid
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to save entry: {exc}") from exc
        finally:
            conn.close()
        logger.debug("Stored entry %s in %s", entry_id, self.db_path)
        return replace(record, id=entry_id)

    def list(self) -> List[TransactionRecord]:
        conn = self._connect()
        try:
            rows = conn.execute(
                """
                SELECT id, txn_day, txn_month, txn_year, description, amount, expense
                FROM entries
                ORDER BY id
                """
            ).fetchall()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to read entries: {exc}") from exc
        finally:
            conn.close()
        return [_row_to_record(r) for r in rows]

    def get(self, entry_id: int) -> TransactionRecord:
        conn = self._connect()
        try:
            row = conn.execute(
                """
                SELECT id, txn_day, txn_month, txn_year, description, amount, expense
                FROM entries
                WHERE id = ?
                """,
                (entry_id,),
            ).fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to read entry {entry_id}: {exc}") from exc
        finally:
            conn.close()
        if row is None:
            raise NotFound(entry_id)
        return _row_to_record(row)

    def delete_by_id(self, entry_id: int) -> bool:
        conn = self._connect()
        try:
            cur = conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
            conn.commit()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Failed to delete entry {entry_id}: {exc}") from exc
        finally:
            conn.close()
        return cur.rowcount > 0
