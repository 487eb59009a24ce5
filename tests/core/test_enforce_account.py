"""Account Enforcement — tests for pure registration and password rules.

Tests cover:
    - validate_registration rejects None / empty / whitespace usernames
    - validate_registration rejects None and short passwords (boundary at 4)
    - username check runs before password check
    - password_matches is exact and rejects None
"""

import pytest

from socialmedia.core.enforce_account import validate_registration, password_matches
from socialmedia.core.errors import RegistrationError
from socialmedia.core.domain_types import MIN_PASSWORD_LENGTH


# ─── validate_registration ───────────────────────────────────────

@pytest.mark.parametrize("username", [None, "", "   ", "\t\n"])
def test_blank_username_rejected(username):
    with pytest.raises(RegistrationError) as exc:
        validate_registration(username, "secret")
    assert exc.value.field == "username"
    assert exc.value.http_status == 400


@pytest.mark.parametrize("password", [None, "", "a", "abc"])
def test_short_password_rejected(password):
    with pytest.raises(RegistrationError) as exc:
        validate_registration("ann", password)
    assert exc.value.field == "password"


def test_password_at_minimum_length_accepted():
    validate_registration("ann", "x" * MIN_PASSWORD_LENGTH)


def test_username_checked_before_password():
    with pytest.raises(RegistrationError) as exc:
        validate_registration("  ", "a")
    assert exc.value.field == "username"


def test_whitespace_password_counts_toward_length():
    validate_registration("ann", "    ")


# ─── password_matches ────────────────────────────────────────────

def test_password_matches_exact_value():
    assert password_matches("secret", "secret")


def test_password_matches_is_case_sensitive():
    assert not password_matches("secret", "Secret")


def test_password_matches_does_not_trim():
    assert not password_matches("secret", "secret ")


def test_password_matches_rejects_none():
    assert not password_matches("secret", None)
