"""Account Service — registration and credential checks.

Invariants:
    - Registration order: blank username, short password, duplicate username
    - Login never writes; each call re-validates credentials from storage
    - Unknown username and wrong password both raise AuthenticationError
"""

import logging

from socialmedia.core.enforce_account import password_matches, validate_registration
from socialmedia.core.errors import AuthenticationError, DuplicateUsernameError
from socialmedia.core.repository_protocols import AccountLike, AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Registers and authenticates accounts."""

    def __init__(self, accounts: AccountRepository):
        self.accounts = accounts

    async def register_account(
        self, username: str | None, password: str | None,
    ) -> AccountLike:
        """Validate and persist a new account. Returns the stored record."""
        validate_registration(username, password)
        if await self.account_exists(username):
            raise DuplicateUsernameError(username)

        account = await self.accounts.save(username, password)
        logger.info(
            f"Registered account '{account.username}'",
            extra={"account_id": account.account_id},
        )
        return account

    async def account_exists(self, username: str) -> bool:
        return await self.accounts.find_by_username(username) is not None

    async def login(self, username: str | None, password: str | None) -> AccountLike:
        """Return the stored account when username and password match."""
        account = (
            await self.accounts.find_by_username(username)
            if username is not None else None
        )
        if account is None:
            logger.warning(f"Login failed: no account '{username}'")
            raise AuthenticationError("no such account")
        if not password_matches(account.password, password):
            logger.warning(
                f"Login failed: incorrect password for '{username}'",
                extra={"account_id": account.account_id},
            )
            raise AuthenticationError("incorrect password")
        return account
