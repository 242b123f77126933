from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from passlib.context import CryptContext


BCRYPT_ROUNDS = 12
DEFAULT_TOKEN_TTL_SECONDS = 2 * 60 * 60

_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)
_JWT_ALG = "HS256"

TOKEN_OK = "ok"
TOKEN_EXPIRED = "expired"
TOKEN_INVALID = "invalid"


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except (ValueError, TypeError):
        # Malformed or foreign hash format.
        return False


@dataclass(frozen=True)
class TokenVerification:
    """Outcome of `verify_access_token`: ok (with claims), expired or invalid."""

    status: str
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == TOKEN_OK


def create_access_token(
    *,
    secret: str,
    user_id: int,
    email: str,
    expires_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
) -> str:
    """Sign `{userId, email}` with an expiry.

    A negative `expires_seconds` produces a token that is already expired.
    """
    if not secret:
        raise ValueError("jwt_secret_blank")

    now = datetime.now(timezone.utc)
    exp = now + timedelta(seconds=int(expires_seconds))

    payload: Dict[str, Any] = {
        "userId": int(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=_JWT_ALG)


def verify_access_token(*, token: str, secret: str) -> TokenVerification:
    if not secret:
        raise ValueError("jwt_secret_blank")
    if not token:
        return TokenVerification(TOKEN_INVALID)

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[_JWT_ALG],
            options={"require": ["exp", "userId"]},
        )
    except jwt.ExpiredSignatureError:
        return TokenVerification(TOKEN_EXPIRED)
    except jwt.InvalidTokenError:
        return TokenVerification(TOKEN_INVALID)

    return TokenVerification(TOKEN_OK, dict(payload))
