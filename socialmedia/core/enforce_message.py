"""Message Enforcement — text rules shared by message creation and update.

Invariants:
    - Blank check runs on the stripped text, length check on the text as supplied
    - Blank wins over too-long when both would apply
"""

from socialmedia.core.domain_types import MAX_MESSAGE_LENGTH
from socialmedia.core.errors import BlankTextError, TooLongError


def validate_message_text(text: str | None) -> str:
    """Return the text unchanged if valid, else raise BlankTextError / TooLongError."""
    if text is None or not text.strip():
        raise BlankTextError()
    if len(text) > MAX_MESSAGE_LENGTH:
        raise TooLongError(len(text), MAX_MESSAGE_LENGTH)
    return text
