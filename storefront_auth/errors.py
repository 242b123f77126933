"""Error taxonomy shared by the auth components and the HTTP layer.

Every failure a request can hit maps to exactly one subclass of `AuthError`;
the API renders it as `{"message": ...}` (plus `"error"` when a raw detail
is attached) with the class's status code.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AuthError(Exception):
    """Base class for request-terminating failures."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.detail is not None:
            body["error"] = self.detail
        return body


class ValidationError(AuthError):
    status_code = 400
    default_message = "Invalid request body."


class DuplicateEmail(AuthError):
    status_code = 400
    default_message = "Email already registered. Use a different email."


class InvalidCredentials(AuthError):
    # Same message for unknown email and wrong password.
    status_code = 401
    default_message = "Invalid email or password"


class NoToken(AuthError):
    status_code = 403
    default_message = "Access denied, no token provided."


class TokenExpired(AuthError):
    status_code = 401
    default_message = "Token expired"


class TokenInvalid(AuthError):
    status_code = 401
    default_message = "Invalid token"


class InternalError(AuthError):
    status_code = 500
    default_message = "Internal Server Error"


class ConfigError(Exception):
    """Startup configuration is unusable; the process must not serve."""
