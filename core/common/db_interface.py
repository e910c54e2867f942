"""
core/common/db_interface.py
===========================

Shared helpers for SQLite-backed repositories.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional
import sqlite3


def create_sqlite_connection(db_path: Path, *, check_same_thread: bool = False) -> sqlite3.Connection:
    """Create a sqlite3 connection with row access by column name."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=check_same_thread)
    conn.row_factory = sqlite3.Row
    return conn


class SQLiteRepository:
    """Base class holding one lazily opened connection."""

    def __init__(self, db_path: Path, *, check_same_thread: bool = False) -> None:
        self._db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._check_same_thread = check_same_thread

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = create_sqlite_connection(
                self._db_path, check_same_thread=self._check_same_thread
            )
        return self._conn

    def close(self) -> None:
        if self._conn is not None:
            try:
                self._conn.close()
            finally:
                self._conn = None
