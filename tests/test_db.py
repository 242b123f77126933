"""Tests for the SQL wrapper and schema."""

import sqlite3

import pytest

from storefront_auth.db import connect, detect_dialect, init_db, is_unique_violation, qmark_to_pct
from storefront_auth.schema import SCHEMA_POSTGRES, get_schema_sql


@pytest.mark.parametrize(
    "dsn,dialect",
    [
        ("", "sqlite"),
        ("./storefront.sqlite", "sqlite"),
        ("sqlite:///tmp/x.sqlite", "sqlite"),
        ("postgres://u:p@h/db", "postgres"),
        ("postgresql://u:p@h/db", "postgres"),
    ],
)
def test_detect_dialect(dsn, dialect):
    assert detect_dialect(dsn) == dialect


def test_qmark_to_pct_skips_quoted_literals():
    sql = "SELECT '?' AS q, \"a?b\" FROM t WHERE x=? AND y='it''s ?' AND z=?"

    assert qmark_to_pct(sql) == "SELECT '?' AS q, \"a?b\" FROM t WHERE x=%s AND y='it''s ?' AND z=%s"


def test_postgres_schema_uses_bigserial():
    assert "AUTOINCREMENT" not in SCHEMA_POSTGRES
    assert "PRAGMA" not in SCHEMA_POSTGRES
    assert "BIGSERIAL PRIMARY KEY" in SCHEMA_POSTGRES
    assert get_schema_sql("postgres") == SCHEMA_POSTGRES


def test_init_db_is_idempotent(tmp_path):
    dsn = str(tmp_path / "db.sqlite")
    init_db(dsn)
    init_db(dsn)

    with connect(dsn) as conn:
        tables = {r["name"] for r in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}

    assert {"users", "wishlist"} <= tables


def test_connect_rolls_back_on_error(tmp_path):
    dsn = str(tmp_path / "db.sqlite")
    init_db(dsn)

    with pytest.raises(RuntimeError):
        with connect(dsn) as conn:
            conn.execute(
                "INSERT INTO users (name, email, password_hash, created_at) VALUES (?,?,?,?)",
                ("A", "a@example.com", "h", "2024-01-01T00:00:00Z"),
            )
            raise RuntimeError("boom")

    with connect(dsn) as conn:
        assert conn.execute("SELECT COUNT(*) AS n FROM users").fetchone()["n"] == 0


def test_duplicate_email_is_a_unique_violation(tmp_path):
    dsn = str(tmp_path / "db.sqlite")
    init_db(dsn)
    sql = "INSERT INTO users (name, email, password_hash, created_at) VALUES (?,?,?,?)"

    with pytest.raises(sqlite3.IntegrityError) as exc:
        with connect(dsn) as conn:
            conn.execute(sql, ("A", "a@example.com", "h", "t"))
            conn.execute(sql, ("B", "a@example.com", "h", "t"))

    assert is_unique_violation(exc.value)


def test_not_null_failure_is_not_a_unique_violation():
    assert not is_unique_violation(sqlite3.IntegrityError("NOT NULL constraint failed: wishlist.product_id"))
    assert not is_unique_violation(RuntimeError("UNIQUE constraint failed"))


def test_postgres_unique_violation_detected_by_sqlstate():
    class FakePgError(Exception):
        pgcode = "23505"

    assert is_unique_violation(FakePgError("duplicate key value violates unique constraint"))
