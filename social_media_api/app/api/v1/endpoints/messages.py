"""
Message endpoints.

Anyone may read messages.  Posting, editing and deleting require HTTP
Basic credentials of the message's author; the ownership rule itself
lives in ``MessageService``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from social_media_api.app.api.deps import get_acting_account, get_message_service
from social_media_api.app.schemas.account import Account
from social_media_api.app.schemas.message import Message, MessageCreate, MessageUpdate
from social_media_api.app.services.message_service import MessageService


router = APIRouter()


@router.post("/messages", response_model=Message, status_code=status.HTTP_201_CREATED)
def create_message(
    body: MessageCreate,
    service: MessageService = Depends(get_message_service),
    account: Optional[Account] = Depends(get_acting_account),
) -> Message:
    """Post a message as the authenticated account."""
    return service.create(Message(**body.model_dump()), account)


@router.get("/messages", response_model=List[Message])
def list_messages(service: MessageService = Depends(get_message_service)) -> List[Message]:
    return service.get_all()


@router.get("/messages/{message_id}", response_model=Message)
def get_message(
    message_id: int,
    service: MessageService = Depends(get_message_service),
) -> Message:
    return service.get_by_id(message_id)


@router.patch("/messages/{message_id}", response_model=Message)
def update_message(
    message_id: int,
    body: MessageUpdate,
    service: MessageService = Depends(get_message_service),
    account: Optional[Account] = Depends(get_acting_account),
) -> Message:
    """Replace the text of a message.  Only its author may do this."""
    existing = service.get_by_id(message_id)
    return service.update(existing.model_copy(update={"message_text": body.message_text}), account)


@router.delete("/messages/{message_id}", response_model=Message)
def delete_message(
    message_id: int,
    service: MessageService = Depends(get_message_service),
    account: Optional[Account] = Depends(get_acting_account),
) -> Message:
    """Delete a message and return it.  Only its author may do this."""
    return service.delete(service.get_by_id(message_id), account)


@router.get("/accounts/{account_id}/messages", response_model=List[Message])
def list_account_messages(
    account_id: int,
    service: MessageService = Depends(get_message_service),
) -> List[Message]:
    """All messages posted by an account; empty if it has none."""
    return service.get_by_account_id(account_id)
