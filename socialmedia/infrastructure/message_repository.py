"""Message Repository — SQLAlchemy implementation of MessageRepository.

Invariants:
    - find_all / find_by_posted_by return rows in ascending message_id order
    - update_text_by_id is a single UPDATE committed in its own transaction
"""

from typing import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from socialmedia.core.domain_types import AccountId, MessageId
from socialmedia.models.message import Message


class SqlAlchemyMessageRepository:
    """Message persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, message_id: MessageId) -> Message | None:
        return await self.db.get(Message, message_id)

    async def find_all(self) -> Sequence[Message]:
        result = await self.db.execute(
            select(Message).order_by(Message.message_id),
        )
        return result.scalars().all()

    async def find_by_posted_by(self, account_id: AccountId) -> Sequence[Message]:
        result = await self.db.execute(
            select(Message)
            .where(Message.posted_by == account_id)
            .order_by(Message.message_id),
        )
        return result.scalars().all()

    async def exists_by_id(self, message_id: MessageId) -> bool:
        result = await self.db.execute(
            select(Message.message_id).where(Message.message_id == message_id),
        )
        return result.scalar_one_or_none() is not None

    async def save(
        self, posted_by: AccountId, message_text: str,
        time_posted_epoch: float | None,
    ) -> Message:
        message = Message(
            posted_by=posted_by,
            message_text=message_text,
            time_posted_epoch=time_posted_epoch,
        )
        self.db.add(message)
        await self.db.commit()
        await self.db.refresh(message)
        return message

    async def delete_by_id(self, message_id: MessageId) -> None:
        await self.db.execute(
            delete(Message).where(Message.message_id == message_id),
        )
        await self.db.commit()

    async def update_text_by_id(
        self, message_id: MessageId, message_text: str,
    ) -> int:
        result = await self.db.execute(
            update(Message)
            .where(Message.message_id == message_id)
            .values(message_text=message_text)
            .execution_options(synchronize_session="fetch"),
        )
        await self.db.commit()
        return result.rowcount
