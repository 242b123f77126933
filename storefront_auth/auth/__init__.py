"""Authentication helpers.

- Users table (name/email + bcrypt password hash)
- Stateless JWT access tokens sent as `Authorization: Bearer <token>`
"""

from .deps import get_current_claims
from .sessions import add_wishlist_item, login_user, register_user

__all__ = [
    "get_current_claims",
    "add_wishlist_item",
    "login_user",
    "register_user",
]
