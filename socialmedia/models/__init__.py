"""ORM Models — SQLAlchemy declarative models for accounts and messages.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata sees every table
"""

from socialmedia.models.account import Account  # noqa: F401
from socialmedia.models.message import Message  # noqa: F401
