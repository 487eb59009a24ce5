"""Boundary Protocols — contracts between core services and persistence.

Invariants:
    - Services NEVER import SQLAlchemy — all IO goes through these Protocols
    - Repositories return records or None; absence is never an exception here
    - update_text_by_id touches message_text only and reports rows affected

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes satisfy it in tests
    - Async methods: implementations do IO through AsyncSession
"""

from typing import Protocol, Sequence

from socialmedia.core.domain_types import AccountId, MessageId


class AccountLike(Protocol):
    """Structural contract for Account records crossing the boundary."""
    account_id: int | None
    username: str
    password: str


class MessageLike(Protocol):
    """Structural contract for Message records crossing the boundary."""
    message_id: int | None
    posted_by: int
    message_text: str
    time_posted_epoch: float | None


class AccountRepository(Protocol):
    """Contract for account persistence — implemented by infrastructure."""
    async def find_by_id(self, account_id: AccountId) -> AccountLike | None: ...
    async def find_by_username(self, username: str) -> AccountLike | None: ...
    async def exists_by_id(self, account_id: AccountId) -> bool: ...
    async def save(self, username: str, password: str) -> AccountLike: ...


class MessageRepository(Protocol):
    """Contract for message persistence — implemented by infrastructure."""
    async def find_by_id(self, message_id: MessageId) -> MessageLike | None: ...
    async def find_all(self) -> Sequence[MessageLike]: ...
    async def find_by_posted_by(
        self, account_id: AccountId,
    ) -> Sequence[MessageLike]: ...
    async def exists_by_id(self, message_id: MessageId) -> bool: ...
    async def save(
        self, posted_by: AccountId, message_text: str,
        time_posted_epoch: float | None,
    ) -> MessageLike: ...
    async def delete_by_id(self, message_id: MessageId) -> None: ...
    async def update_text_by_id(
        self, message_id: MessageId, message_text: str,
    ) -> int: ...
