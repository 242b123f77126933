from __future__ import annotations

from typing import Any, Dict, Optional

from storefront_auth.util.time import utcnow_iso


def public_user(row: Any | Dict[str, Any]) -> Dict[str, Any]:
    """Client-facing user fields. The password hash never leaves this module."""
    d = dict(row)
    return {"userId": int(d["id"]), "name": d["name"], "email": d["email"]}


def get_user_by_email(conn: Any, email: str) -> Optional[Any]:
    if not email:
        return None
    return conn.execute(
        "SELECT id, name, email, password_hash FROM users WHERE email=?",
        (email,),
    ).fetchone()


def insert_user(conn: Any, *, name: str, email: str, password_hash: str) -> int:
    """Insert a user row and return its id.

    Raises the driver's integrity error when the email is already taken.
    """
    conn.execute(
        "INSERT INTO users (name, email, password_hash, created_at) VALUES (?,?,?,?)",
        (name, email, password_hash, utcnow_iso()),
    )
    # Re-read by the unique key so sqlite and postgres take the same path.
    row = get_user_by_email(conn, email)
    assert row is not None
    return int(row["id"])


def insert_wishlist_item(conn: Any, *, user_id: int, product_id: Any) -> None:
    conn.execute(
        "INSERT INTO wishlist (user_id, product_id, created_at) VALUES (?,?,?)",
        (int(user_id), product_id, utcnow_iso()),
    )
