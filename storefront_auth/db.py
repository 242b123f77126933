from __future__ import annotations

import re
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Sequence
from urllib.parse import urlparse

from storefront_auth.schema import get_schema_sql


_PG_UNIQUE_VIOLATION = "23505"

# Quoted literals are copied through untouched; bare ? becomes %s.
_PLACEHOLDER_RE = re.compile(r"('(?:[^']|'')*'|\"(?:[^\"]|\"\")*\"|\?)")


def _debug(msg: str) -> None:
    print(f"[db] {msg}")


def detect_dialect(dsn: str) -> str:
    """Return 'postgres' or 'sqlite'."""
    s = (dsn or "").strip()
    if not s:
        return "sqlite"
    scheme = urlparse(s).scheme.lower()
    if scheme in ("postgres", "postgresql"):
        return "postgres"
    return "sqlite"


def qmark_to_pct(sql: str) -> str:
    """Convert SQLite qmark placeholders (?) to psycopg2 placeholders (%s).

    Question marks inside single/double-quoted literals are left alone.
    """
    return _PLACEHOLDER_RE.sub(lambda m: "%s" if m.group(0) == "?" else m.group(0), sql)


def is_unique_violation(exc: BaseException) -> bool:
    """True when `exc` is a UNIQUE constraint failure from either engine."""
    if isinstance(exc, sqlite3.IntegrityError):
        return "UNIQUE constraint failed" in str(exc)
    return getattr(exc, "pgcode", None) == _PG_UNIQUE_VIOLATION


class PGCursor:
    def __init__(self, cur: Any):
        self._cur = cur

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> "PGCursor":
        self._cur.execute(qmark_to_pct(sql), tuple(params or ()))
        return self

    def fetchone(self) -> Any:
        return self._cur.fetchone()

    def fetchall(self) -> Any:
        return self._cur.fetchall()

    def close(self) -> None:
        self._cur.close()


class PGConnection:
    """Makes a psycopg2 connection answer the sqlite3 `execute()` shortcut."""

    dialect = "postgres"

    def __init__(self, conn: Any):
        self._conn = conn

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> PGCursor:
        return PGCursor(self._conn.cursor()).execute(sql, params)

    def commit(self) -> None:
        self._conn.commit()

    def rollback(self) -> None:
        self._conn.rollback()

    def close(self) -> None:
        self._conn.close()


@contextmanager
def connect(db_dsn: str) -> Iterator[Any]:
    """Open a connection, commit on success and roll back on error.

    - SQLite: WAL journal, dict-like `sqlite3.Row` rows.
    - Postgres: psycopg2 with RealDictCursor so rows behave like dicts.
    """
    dsn = (db_dsn or "").strip()

    if detect_dialect(dsn) == "postgres":
        try:
            import psycopg2
            import psycopg2.extras
        except ImportError as e:
            raise RuntimeError(
                "Postgres selected but psycopg2 is not installed. "
                "Install psycopg2-binary and try again."
            ) from e

        conn: Any = PGConnection(psycopg2.connect(dsn, cursor_factory=psycopg2.extras.RealDictCursor))
    else:
        if dsn.lower().startswith("sqlite:///"):
            dsn = dsn[len("sqlite:///") :]
        Path(dsn).parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(dsn, timeout=30, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA busy_timeout=5000;")  # 5s
        conn.execute("PRAGMA foreign_keys = ON;")

    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_dsn: str) -> None:
    """Create all tables (idempotent)."""
    dialect = detect_dialect(db_dsn)
    _debug(f"Initializing DB ({dialect}) at {db_dsn}")
    ddl = get_schema_sql(dialect)
    with connect(db_dsn) as conn:
        if dialect == "postgres":
            # Naive split is fine: the schema has no semicolons inside literals.
            for stmt in (s.strip() for s in ddl.split(";")):
                if stmt:
                    conn.execute(stmt)
            return
        conn.executescript(ddl)
