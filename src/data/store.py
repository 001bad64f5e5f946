"""
src/data/store.py
─────────────────
SQLite store for visitor preferences.

Plays the part of each visitor's browser local storage: a string → string
table scoped by visitor id, holding among other things the persisted
language choice. One visitor's writes never show up for another.

Provides:
  - initialize_db()                  : Create the preferences table
  - get_item(key, visitor_id)        : Read one preference (None when unset)
  - set_item(key, value, visitor_id) : Insert or overwrite one preference
  - remove_item(key, visitor_id)     : Delete one preference
  - new_visitor_id()                 : Fresh id for a first-time visitor
  - PreferenceStorage                : Per-visitor wrapper handed to LanguageStore

Thread safety: uses check_same_thread=False + a module-level lock.
"""
from __future__ import annotations

import sqlite3
import threading
import uuid
from datetime import UTC, datetime

from config.settings import settings

# Visitor id for single-user callers (scripts, CLI rendering)
LOCAL_VISITOR = "local"

_lock = threading.RLock()
_DB: sqlite3.Connection | None = None


# ── Connection ────────────────────────────────────────────────────────────────

def _get_conn() -> sqlite3.Connection:
    global _DB
    if _DB is None:
        _DB = sqlite3.connect(settings.DATABASE_URL, check_same_thread=False)
        _DB.row_factory = sqlite3.Row
        _create_tables(_DB)
    return _DB


def close_db() -> None:
    """Close the shared connection; the next call reopens it."""
    global _DB
    with _lock:
        if _DB is not None:
            _DB.close()
            _DB = None


# ── Schema ────────────────────────────────────────────────────────────────────

_CREATE_PREFERENCES = """
CREATE TABLE IF NOT EXISTS preferences (
    visitor_id  TEXT NOT NULL,
    key         TEXT NOT NULL,
    value       TEXT NOT NULL,
    updated_at  TEXT NOT NULL,
    PRIMARY KEY (visitor_id, key)
);
"""


def _create_tables(conn: sqlite3.Connection) -> None:
    with conn:
        conn.executescript(_CREATE_PREFERENCES)


# ── Public API ────────────────────────────────────────────────────────────────

def initialize_db() -> None:
    """Create tables. Safe to call multiple times (idempotent)."""
    _create_tables(_get_conn())


def new_visitor_id() -> str:
    return uuid.uuid4().hex


def get_item(key: str, visitor_id: str = LOCAL_VISITOR) -> str | None:
    conn = _get_conn()
    with _lock:
        row = conn.execute(
            "SELECT value FROM preferences WHERE visitor_id = ? AND key = ?",
            (visitor_id, key),
        ).fetchone()
    return row["value"] if row else None


def set_item(key: str, value: str, visitor_id: str = LOCAL_VISITOR) -> None:
    conn = _get_conn()
    with _lock, conn:
        conn.execute(
            """INSERT INTO preferences (visitor_id, key, value, updated_at) VALUES (?,?,?,?)
               ON CONFLICT(visitor_id, key) DO UPDATE SET
                   value = excluded.value,
                   updated_at = excluded.updated_at""",
            (visitor_id, key, value, datetime.now(tz=UTC).isoformat()),
        )


def remove_item(key: str, visitor_id: str = LOCAL_VISITOR) -> None:
    conn = _get_conn()
    with _lock, conn:
        conn.execute(
            "DELETE FROM preferences WHERE visitor_id = ? AND key = ?", (visitor_id, key)
        )


class PreferenceStorage:
    """get_item / set_item facade over this module for one visitor."""

    def __init__(self, visitor_id: str = LOCAL_VISITOR) -> None:
        self.visitor_id = visitor_id

    def get_item(self, key: str) -> str | None:
        return get_item(key, self.visitor_id)

    def set_item(self, key: str, value: str) -> None:
        set_item(key, value, self.visitor_id)
