"""Database schema for the storefront auth backend.

SQLite is the default engine; Postgres is supported by rewriting the SQLite DDL
(autoincrement keys, pragmas). Timestamps are ISO-8601 TEXT (UTC, 'Z').
"""

from __future__ import annotations

import re


SCHEMA_SQLITE = r"""
PRAGMA foreign_keys = ON;

-- Users / Auth
-- Email is the login identifier; the UNIQUE constraint is the real duplicate guard.
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL UNIQUE,
    password_hash TEXT NOT NULL,
    created_at TEXT NOT NULL
);

-- Wishlist (no catalog FK: products live in another service)
CREATE TABLE IF NOT EXISTS wishlist (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    product_id TEXT NOT NULL,
    created_at TEXT NOT NULL,
    FOREIGN KEY (user_id) REFERENCES users(id)
);
CREATE INDEX IF NOT EXISTS idx_wishlist_user ON wishlist (user_id, created_at);
"""


def _sqlite_to_postgres(ddl: str) -> str:
    lines = [line for line in ddl.splitlines() if not line.strip().upper().startswith("PRAGMA ")]
    out = "\n".join(lines)
    out = re.sub(
        r"INTEGER\s+PRIMARY\s+KEY\s+AUTOINCREMENT",
        "BIGSERIAL PRIMARY KEY",
        out,
        flags=re.IGNORECASE,
    )
    # FK columns must match BIGSERIAL width.
    out = re.sub(r"user_id INTEGER", "user_id BIGINT", out)
    return out


SCHEMA_POSTGRES = _sqlite_to_postgres(SCHEMA_SQLITE)


def get_schema_sql(dialect: str) -> str:
    if (dialect or "").lower().startswith("post"):
        return SCHEMA_POSTGRES
    return SCHEMA_SQLITE
