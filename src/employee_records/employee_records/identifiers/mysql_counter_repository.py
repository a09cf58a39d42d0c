from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import CounterRepository


class MySQLCounterRepository(CounterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def next_value(self, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # LAST_INSERT_ID(expr) makes the new value visible to this connection only.
            cur.execute(
                """
                INSERT INTO id_counters(name, value)
                VALUES(%s, LAST_INSERT_ID(1))
                ON DUPLICATE KEY UPDATE value = LAST_INSERT_ID(value + 1)
                """,
                (name,),
            )
            cur.execute("SELECT LAST_INSERT_ID() AS value")
            row = fetchone(cur)
            return int(row["value"])

    def current_value(self, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT value FROM id_counters WHERE name=%s", (name,))
            row = fetchone(cur)
            return int(row["value"]) if row else 0
