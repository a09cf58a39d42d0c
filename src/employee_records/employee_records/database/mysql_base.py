from __future__ import annotations

import re
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional, Tuple

import mysql.connector
from mysql.connector import errorcode

from .connection import DatabaseConnection
from .errors import DuplicateKeyError, StoreConnectionError, StoreError

_DUP_KEY_RE = re.compile(r"for key '([^']+)'")


def translate_error(exc: mysql.connector.Error) -> StoreError:
    """Map a mysql-connector error onto the store error hierarchy."""

    if getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY:
        match = _DUP_KEY_RE.search(str(exc))
        key = match.group(1).split(".")[-1] if match else ""
        return DuplicateKeyError(str(exc), key=key)
    if isinstance(exc, (mysql.connector.InterfaceError, mysql.connector.OperationalError)):
        return StoreConnectionError(str(exc))
    return StoreError(str(exc))


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise translate_error(exc) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise translate_error(exc) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def escape_like(fragment: str) -> str:
    """Escape LIKE wildcards so the fragment is matched literally."""
    return fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def in_clause(column: str, values: List[Any]) -> Tuple[str, List[Any]]:
    placeholders = ",".join(["%s"] * len(values))
    return f"{column} IN ({placeholders})", list(values)


def to_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))
