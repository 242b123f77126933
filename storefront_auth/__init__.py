"""Storefront authentication backend.

A deliberately small slice of the shop backend:
- Users register with name/email/password (bcrypt hashes only).
- Login issues a short-lived JWT.
- The JWT guards the wishlist endpoint.

See SPEC_FULL.md for the request/response contract.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
