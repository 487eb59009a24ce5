"""Account Enforcement — pure validation rules for registration and login.

Invariants:
    - Checks run in a fixed order: username, then password; first failure wins
    - A blank username is one that is None or whitespace-only
    - Passwords are compared by exact value (no hashing, no normalization)
"""

from socialmedia.core.domain_types import MIN_PASSWORD_LENGTH
from socialmedia.core.errors import RegistrationError


def validate_registration(username: str | None, password: str | None) -> None:
    """Raise RegistrationError for a blank username or a short password."""
    if username is None or not username.strip():
        raise RegistrationError("Username cannot be blank", field="username")
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        raise RegistrationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            field="password",
        )


def password_matches(stored: str, supplied: str | None) -> bool:
    """Plain-text comparison. Swap for a salted-hash check without changing callers."""
    return supplied is not None and stored == supplied
