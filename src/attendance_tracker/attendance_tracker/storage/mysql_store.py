from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.enums import RecordType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, encode_payload, fetch_payload


class MySQLKeyValueStore:
    """Documents live in ``kv_records`` (see database/schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, scope: str, record_type: RecordType) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payload
                FROM kv_records
                WHERE scope=%s AND record_type=%s
                """,
                (str(scope), RecordType(record_type).value),
            )
            return fetch_payload(cur)

    def put(self, scope: str, record_type: RecordType, value: Any) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_records(scope, record_type, payload)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (str(scope), RecordType(record_type).value, encode_payload(value)),
            )

    def put_many(self, scope: str, values: Mapping[RecordType, Any]) -> None:
        """One transaction for all documents."""
        with db_cursor(self._conn_factory) as (_, cur):
            for record_type, value in values.items():
                cur.execute(
                    """
                    INSERT INTO kv_records(scope, record_type, payload)
                    VALUES(%s,%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (str(scope), RecordType(record_type).value, encode_payload(value)),
                )
