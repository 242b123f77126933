from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront_auth.errors import InternalError, NoToken, TokenExpired, TokenInvalid

from .security import TOKEN_EXPIRED, verify_access_token


_bearer = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
) -> Dict[str, Any]:
    """Authenticate a request from `Authorization: Bearer <jwt>`.

    Returns the decoded claims (`userId`, `email`, `iat`, `exp`). Nothing is
    looked up in the database; the signed token is the whole session.
    """
    cfg = getattr(request.app.state, "cfg", None)
    if cfg is None:
        raise InternalError(detail="server_config_missing")

    # HTTPBearer yields None for a missing header or a non-Bearer scheme.
    if credentials is None or not credentials.credentials:
        raise NoToken()

    result = verify_access_token(token=credentials.credentials, secret=cfg.JWT_SECRET)
    if result.status == TOKEN_EXPIRED:
        raise TokenExpired()
    if not result.ok:
        raise TokenInvalid()

    claims = dict(result.claims)
    # A correctly signed token can still carry a junk user id.
    try:
        claims["userId"] = int(claims["userId"])
    except (TypeError, ValueError):
        raise TokenInvalid()
    return claims
