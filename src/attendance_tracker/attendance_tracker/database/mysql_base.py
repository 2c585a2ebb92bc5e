from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Connection + cursor for one unit of work; commits on success, rolls back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_payload(cur, column: str = "payload") -> Optional[Any]:
    """Decode the JSON column of the next row, None when there is no row."""
    row = cur.fetchone()
    if not row:
        return None
    return json.loads(row[column])


def encode_payload(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
