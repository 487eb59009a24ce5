"""Account Repository — SQLAlchemy implementation of AccountRepository.

Invariants:
    - save() commits and returns the row with its generated account_id
    - A unique-constraint violation on save() surfaces as DuplicateUsernameError
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialmedia.core.domain_types import AccountId
from socialmedia.core.errors import DuplicateUsernameError
from socialmedia.models.account import Account

logger = logging.getLogger(__name__)


class SqlAlchemyAccountRepository:
    """Account persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, account_id: AccountId) -> Account | None:
        return await self.db.get(Account, account_id)

    async def find_by_username(self, username: str) -> Account | None:
        result = await self.db.execute(
            select(Account).where(Account.username == username),
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, account_id: AccountId) -> bool:
        result = await self.db.execute(
            select(Account.account_id).where(Account.account_id == account_id),
        )
        return result.scalar_one_or_none() is not None

    async def save(self, username: str, password: str) -> Account:
        account = Account(username=username, password=password)
        self.db.add(account)
        try:
            await self.db.commit()
        except IntegrityError:
            # lost a check-then-insert race against a concurrent registration
            await self.db.rollback()
            logger.warning(f"Unique constraint rejected username '{username}'")
            raise DuplicateUsernameError(username)
        await self.db.refresh(account)
        return account
