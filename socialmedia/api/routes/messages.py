"""Message Routes — message CRUD plus listing by account.

Invariants:
    - Every success is 200
    - GET of a missing message and DELETE of a missing message answer 200 with an empty body
    - PATCH answers with the integer number of rows updated
    - DELETE answers with 1 when a row was removed
"""

from fastapi import APIRouter, Depends, Response

from socialmedia.api.dependencies import get_message_service
from socialmedia.core.domain_types import AccountId, MessageId
from socialmedia.schemas.message import MessageCreate, MessageResponse, MessageUpdate
from socialmedia.services.message_service import MessageService

router = APIRouter(tags=["messages"])


@router.post("/messages", response_model=MessageResponse)
async def create_message(
    body: MessageCreate,
    service: MessageService = Depends(get_message_service),
):
    message = await service.create_message(
        body.posted_by, body.message_text, body.time_posted_epoch,
    )
    return MessageResponse.model_validate(message)


@router.get("/messages", response_model=list[MessageResponse])
async def get_all_messages(
    service: MessageService = Depends(get_message_service),
):
    messages = await service.get_all_messages()
    return [MessageResponse.model_validate(m) for m in messages]


@router.get("/messages/{message_id}", response_model=MessageResponse)
async def get_message_by_id(
    message_id: int,
    service: MessageService = Depends(get_message_service),
):
    """Return the message, or an empty 200 when it does not exist."""
    message = await service.get_message_by_id(MessageId(message_id))
    if message is None:
        return Response()
    return MessageResponse.model_validate(message)


@router.patch("/messages/{message_id}", response_model=int)
async def update_message(
    message_id: int,
    body: MessageUpdate,
    service: MessageService = Depends(get_message_service),
):
    return await service.update_message(MessageId(message_id), body.message_text)


@router.delete("/messages/{message_id}", response_model=int)
async def delete_message(
    message_id: int,
    service: MessageService = Depends(get_message_service),
):
    """Delete the message. Body is 1 when something was deleted, else empty."""
    if await service.delete_message(MessageId(message_id)):
        return 1
    return Response()


@router.get(
    "/accounts/{account_id}/messages", response_model=list[MessageResponse],
)
async def get_messages_by_user(
    account_id: int,
    service: MessageService = Depends(get_message_service),
):
    messages = await service.get_messages_by_user(AccountId(account_id))
    return [MessageResponse.model_validate(m) for m in messages]
