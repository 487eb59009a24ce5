"""Message Service — create, read, update and delete messages.

Invariants:
    - Create validates text (blank, then length) before checking the poster exists
    - Update validates text exactly like create; postedBy and timestamp never change
    - Read and delete paths report absence as None / False, never as an error
    - Update of a missing id raises MessageNotFoundError (asymmetric with delete)
"""

import logging
from typing import Sequence

from socialmedia.core.domain_types import AccountId, MessageId
from socialmedia.core.enforce_message import validate_message_text
from socialmedia.core.errors import MessageNotFoundError, UserNotFoundError
from socialmedia.core.repository_protocols import (
    AccountRepository, MessageLike, MessageRepository,
)

logger = logging.getLogger(__name__)


class MessageService:
    """Message lifecycle operations."""

    def __init__(self, messages: MessageRepository, accounts: AccountRepository):
        self.messages = messages
        self.accounts = accounts

    async def create_message(
        self,
        posted_by: AccountId | None,
        message_text: str | None,
        time_posted_epoch: float | None,
    ) -> MessageLike:
        """Validate and persist a message. Fields are stored exactly as supplied."""
        text = validate_message_text(message_text)
        if posted_by is None or not await self.accounts.exists_by_id(posted_by):
            raise UserNotFoundError(posted_by)

        message = await self.messages.save(posted_by, text, time_posted_epoch)
        logger.info(
            "Message created",
            extra={"message_id": message.message_id, "account_id": posted_by},
        )
        return message

    async def get_all_messages(self) -> Sequence[MessageLike]:
        return await self.messages.find_all()

    async def get_message_by_id(self, message_id: MessageId) -> MessageLike | None:
        return await self.messages.find_by_id(message_id)

    async def get_messages_by_user(
        self, account_id: AccountId,
    ) -> Sequence[MessageLike]:
        """All messages posted by account_id. No existence check on the account."""
        return await self.messages.find_by_posted_by(account_id)

    async def update_message(
        self, message_id: MessageId, message_text: str | None,
    ) -> int:
        """Replace message_text. Returns rows affected (1)."""
        text = validate_message_text(message_text)
        rows = await self.messages.update_text_by_id(message_id, text)
        if rows == 0:
            raise MessageNotFoundError(message_id)
        logger.info("Message updated", extra={"message_id": message_id})
        return rows

    async def delete_message(self, message_id: MessageId) -> bool:
        """Delete by id. False when there was nothing to delete."""
        if not await self.messages.exists_by_id(message_id):
            return False
        await self.messages.delete_by_id(message_id)
        logger.info("Message deleted", extra={"message_id": message_id})
        return True
