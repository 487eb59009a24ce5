"""Domain Types — identity types and validation limits shared across layers.

Invariants:
    - AccountId and MessageId wrap ints assigned by storage, never by callers
    - MIN_PASSWORD_LENGTH and MAX_MESSAGE_LENGTH are the only validation limits

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", int)
MessageId = NewType("MessageId", int)


# ─── Limits ──────────────────────────────────────────────────────

MIN_PASSWORD_LENGTH = 4
MAX_MESSAGE_LENGTH = 255
