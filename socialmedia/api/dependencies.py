"""Service Dependencies — builds request-scoped services over the request's DB session.

Invariants:
    - One AsyncSession per request, shared by every repository the request touches
    - Services are rebuilt per request; they hold no state between requests
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from socialmedia.infrastructure.database import get_db
from socialmedia.infrastructure.account_repository import SqlAlchemyAccountRepository
from socialmedia.infrastructure.message_repository import SqlAlchemyMessageRepository
from socialmedia.services.account_service import AccountService
from socialmedia.services.message_service import MessageService


def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    return AccountService(SqlAlchemyAccountRepository(db))


def get_message_service(db: AsyncSession = Depends(get_db)) -> MessageService:
    return MessageService(
        SqlAlchemyMessageRepository(db), SqlAlchemyAccountRepository(db),
    )
