"""Message ORM — text posts authored by an account.

Invariants:
    - message_id is an autoincrement integer primary key
    - posted_by references account.account_id
    - message_text is at most 255 characters (validated before every write)
    - time_posted_epoch is any number, stored as supplied, never generated here
"""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from socialmedia.db.base import Base


class Message(Base):
    """Message entity."""
    __tablename__ = "message"

    message_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    posted_by: Mapped[int] = mapped_column(
        Integer, ForeignKey("account.account_id"), nullable=False, index=True,
    )
    message_text: Mapped[str] = mapped_column(String(255), nullable=False)
    time_posted_epoch: Mapped[float | None] = mapped_column(
        Float, nullable=True,
    )
