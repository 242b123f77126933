"""Registration, login and the wishlist action.

Each function opens its own connection, so the duplicate-email pre-check and
the insert are not atomic. The UNIQUE constraint catches the race.
"""

from __future__ import annotations

from typing import Any, Dict

from storefront_auth.config import Config
from storefront_auth.db import connect, is_unique_violation
from storefront_auth.errors import (
    AuthError,
    DuplicateEmail,
    InternalError,
    InvalidCredentials,
    ValidationError,
)

from .crud import get_user_by_email, insert_user, insert_wishlist_item, public_user
from .security import create_access_token, hash_password, verify_password


def _debug(msg: str) -> None:
    print(f"[auth] {msg}")


def register_user(cfg: Config, *, name: str | None, email: str | None, password: str | None) -> int:
    """Create a user and return the new id."""
    if not name or not email or not password:
        raise ValidationError("Please provide name, email, and password.")

    try:
        with connect(cfg.DB_DSN) as conn:
            if get_user_by_email(conn, email) is not None:
                raise DuplicateEmail()
            user_id = insert_user(
                conn,
                name=name,
                email=email,
                password_hash=hash_password(password),
            )
    except AuthError:
        raise
    except Exception as e:
        if is_unique_violation(e):
            _debug("Registration raced on duplicate email")
            raise DuplicateEmail() from e
        _debug(f"Registration error: {e}")
        # NOTE: raw driver message is returned to the client (existing API contract).
        raise InternalError(detail=str(e)) from e

    _debug(f"User registered - id={user_id}")
    return user_id


def login_user(cfg: Config, *, email: str | None, password: str | None) -> Dict[str, Any]:
    """Check credentials and issue a token.

    Returns `{"token": ..., "user": {userId, name, email}}`.
    """
    if not email or not password:
        raise ValidationError("Please provide email and password.")

    try:
        with connect(cfg.DB_DSN) as conn:
            row = get_user_by_email(conn, email)
    except Exception as e:
        _debug(f"Login error: {e}")
        raise InternalError(detail=str(e)) from e

    # Unknown email and wrong password must look identical to the caller.
    if row is None or not verify_password(password, str(row["password_hash"])):
        raise InvalidCredentials()

    user = public_user(row)
    token = create_access_token(
        secret=str(cfg.JWT_SECRET),
        user_id=user["userId"],
        email=user["email"],
        expires_seconds=cfg.JWT_EXPIRES_SECONDS,
    )
    _debug(f"Login successful - user={user['email']}")
    return {"token": token, "user": user}


def add_wishlist_item(cfg: Config, *, user_id: int, product_id: Any) -> None:
    # No duplicate guard: repeated adds create repeated rows.
    try:
        with connect(cfg.DB_DSN) as conn:
            insert_wishlist_item(conn, user_id=user_id, product_id=product_id)
    except Exception as e:
        _debug(f"Wishlist error: {e}")
        raise InternalError("Error adding to wishlist") from e
