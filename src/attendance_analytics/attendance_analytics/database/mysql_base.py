from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import EventStoreUnavailableError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Read-only cursor; driver failures surface as EventStoreUnavailableError."""
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise EventStoreUnavailableError(f"Cannot connect to attendance store: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error as e:
        raise EventStoreUnavailableError(f"Attendance store query failed: {e}") from e
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
