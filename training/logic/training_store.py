"""
training/logic/training_store.py
================================

Key-value store for the training feature: one JSON document per collection
key (``instructor``, ``companies``, ``trainings``, ``assignments``,
``attendances``) in a single SQLite table.
"""
from __future__ import annotations

import json
from pathlib import Path
from threading import RLock
from typing import Any, Optional

from core.common.db_interface import SQLiteRepository

KEY_INSTRUCTOR = "instructor"
KEY_COMPANIES = "companies"
KEY_TRAININGS = "trainings"
KEY_ASSIGNMENTS = "assignments"
KEY_ATTENDANCES = "attendances"


class TrainingStore(SQLiteRepository):
    def __init__(self, db_path: Optional[Path] = None) -> None:
        if db_path is None:
            from core.config.config_service import config_service
            db_path = config_service.database.store
        super().__init__(db_path, check_same_thread=False)
        self._lock = RLock()
        self._ensure_schema()

    # ------------------------- public API --------------------------- #
    def get(self, key: str, fallback: Any = None) -> Any:
        with self._lock:
            row = self.conn.execute("SELECT value FROM kv_store WHERE key=?", (key,)).fetchone()
        if row is None:
            return fallback
        return json.loads(row["value"])

    def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        with self._lock, self.conn:
            self.conn.execute(
                """
                INSERT INTO kv_store (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value=excluded.value
                """,
                (key, payload),
            )

    def get_list(self, key: str) -> list:
        value = self.get(key, [])
        return value if isinstance(value, list) else []

    # ------------------------- schema ------------------------------- #
    def _ensure_schema(self) -> None:
        with self._lock:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store(
                    key   TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            self.conn.commit()
