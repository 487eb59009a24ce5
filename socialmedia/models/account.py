"""Account ORM — registered users.

Invariants:
    - account_id is an autoincrement integer primary key
    - username is unique at the storage level (uq_account_username)
    - password stored as supplied (plain text)
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from socialmedia.db.base import Base


class Account(Base):
    """Account entity."""
    __tablename__ = "account"
    __table_args__ = (
        UniqueConstraint("username", name="uq_account_username"),
    )

    account_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        String(255), nullable=False,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
