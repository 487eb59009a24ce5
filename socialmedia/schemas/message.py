"""Message Schemas — create/update payloads and the message response.

Invariants:
    - timePostedEpoch accepts any JSON number and is echoed back unchanged
"""

from pydantic import field_serializer

from socialmedia.schemas import CamelModel


class MessageCreate(CamelModel):
    """Body of POST /messages. messageId, if sent, is ignored."""
    posted_by: int | None = None
    message_text: str | None = None
    time_posted_epoch: int | float | None = None


class MessageUpdate(CamelModel):
    """Body of PATCH /messages/{id}. Only messageText is read."""
    message_text: str | None = None


class MessageResponse(CamelModel):
    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int | float | None = None

    @field_serializer("time_posted_epoch")
    def serialize_epoch(self, v: int | float | None) -> int | float | None:
        # float column hands whole seconds back as 1000.0
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v
