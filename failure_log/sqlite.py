"""
SQLite-backed failure log store.

Pure plumbing: SQLite is an implementation detail. The sink only sees the
FailureLogStore interface.

Design:
- One table: generation_failures
- Columns: id, timestamp (ISO-8601 UTC), user_input, error_source,
  error_message, raw_response (JSON), created_at
- Indexes: timestamp DESC (recency queries), error_source (category queries)
- Append-only: no UPDATE or DELETE statements
"""

import json
import logging
import sqlite3
from datetime import datetime
from typing import List, Optional

from extraction.classifier import ErrorSource
from failure_log.base import FailureLogStore
from failure_log.types import FailureRecord

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "timestamp, user_input, error_source, error_message, raw_response"


class SQLiteFailureLogStore(FailureLogStore):
    """
    Durable failure log in a single SQLite file.

    A connection is opened per operation, so no connection state is shared
    between requests. Readiness is a flag set by connect() and cleared by
    close(); it is not re-checked per request.
    """

    def __init__(self, db_path: Optional[str] = None):
        """
        Args:
            db_path: Path to SQLite database file.
                    If None, uses './generation_failures.db'.
        """
        self.db_path = db_path or "./generation_failures.db"
        self._ready = False

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path, timeout=5.0)

    def connect(self) -> None:
        """
        Create the schema if needed and mark the store ready.

        Called once at startup. Raises sqlite3.Error when the file cannot be
        opened; the store then stays not ready.
        """
        self._ready = False
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS generation_failures (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    user_input TEXT NOT NULL,
                    error_source TEXT NOT NULL,
                    error_message TEXT NOT NULL,
                    raw_response TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_failures_timestamp
                ON generation_failures(timestamp DESC)
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_failures_error_source
                ON generation_failures(error_source)
            """)
            conn.commit()
        finally:
            conn.close()

        self._ready = True
        logger.debug(f"SQLite failure log initialized: {self.db_path}")

    def close(self) -> None:
        self._ready = False

    def is_ready(self) -> bool:
        return self._ready

    def insert(self, record: FailureRecord) -> None:
        raw = json.dumps(record.raw_response) if record.raw_response is not None else None

        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO generation_failures
                    (timestamp, user_input, error_source, error_message, raw_response)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    record.timestamp.isoformat(),
                    record.user_input,
                    record.error_source.value,
                    record.error_message,
                    raw,
                ),
            )
            conn.commit()
        finally:
            conn.close()

        logger.debug(f"Failure record stored: error_source={record.error_source.value}")

    def recent(self, limit: int = 100) -> List[FailureRecord]:
        return self._query(
            f"SELECT {_SELECT_COLUMNS} FROM generation_failures "
            "ORDER BY timestamp DESC, id DESC LIMIT ?",
            (limit,),
        )

    def by_source(self, source: str, limit: int = 50) -> List[FailureRecord]:
        return self._query(
            f"SELECT {_SELECT_COLUMNS} FROM generation_failures "
            "WHERE error_source = ? ORDER BY timestamp DESC, id DESC LIMIT ?",
            (str(getattr(source, "value", source)), limit),
        )

    def _query(self, sql: str, params: tuple) -> List[FailureRecord]:
        conn = self._connect()
        try:
            rows = conn.execute(sql, params).fetchall()
        finally:
            conn.close()

        return [
            FailureRecord(
                timestamp=datetime.fromisoformat(ts),
                user_input=user_input,
                error_source=ErrorSource(source),
                error_message=message,
                raw_response=json.loads(raw) if raw is not None else None,
            )
            for ts, user_input, source, message, raw in rows
        ]
