"""
Business logic for messages.

``MessageService`` validates message text, enforces that only the author
of a message may create, change or delete it, and persists through an
injected ``MessageGateway``.  The acting account is always passed in
explicitly by the caller; the service keeps no session state.
"""

import logging
from typing import List, Optional

from ..core.errors import AuthorizationError, NotFoundError, ValidationError
from ..gateways.base import AccountGateway, MessageGateway
from ..schemas.account import Account
from ..schemas.message import Message


logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 254


def validate_message_text(text: Optional[str]) -> None:
    """Reject blank, over-long or non-UTF-8-encodable text."""
    if text is None or not text.strip():
        raise ValidationError("Message text must not be blank")
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValidationError(f"Message text must be at most {MAX_MESSAGE_LENGTH} characters")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValidationError("Message text must be valid UTF-8") from exc


class MessageService:
    """Service for posting and managing messages."""

    def __init__(self, gateway: MessageGateway, account_gateway: AccountGateway):
        self._gateway = gateway
        self._accounts = account_gateway

    def _require_owner(self, message: Message, account: Optional[Account], action: str) -> None:
        if account is None or account.account_id != message.posted_by:
            logger.warning(
                "Account %s may not %s message %s owned by %s",
                account.account_id if account else None,
                action,
                message.message_id,
                message.posted_by,
            )
            raise AuthorizationError(f"Only the author may {action} this message")

    def create(self, message: Message, account: Optional[Account]) -> Message:
        """Post a new message on behalf of ``account``.

        Raises ``ValidationError`` if there is no acting account (or it no
        longer exists) or the text is invalid, and ``AuthorizationError``
        if ``message.posted_by`` names a different account.
        """
        if account is None or self._accounts.get_by_id(account.account_id) is None:
            raise ValidationError("A valid posting account is required")
        validate_message_text(message.message_text)
        self._require_owner(message, account, "post")
        created = self._gateway.insert(message.model_copy(update={"message_id": 0}))
        logger.info(
            "Account %s posted message %s", account.account_id, created.message_id
        )
        return created

    def get_by_id(self, message_id: int) -> Message:
        message = self._gateway.get_by_id(message_id)
        if message is None:
            raise NotFoundError(f"Message {message_id} not found")
        return message

    def get_all(self) -> List[Message]:
        return self._gateway.get_all()

    def get_by_account_id(self, account_id: int) -> List[Message]:
        return self._gateway.find_by_account_id(account_id)

    def update(self, message: Message, account: Optional[Account]) -> Message:
        """Replace the text of an existing message.

        Only ``message.message_text`` is taken from the argument; every
        other field comes from the stored record.  Raises
        ``NotFoundError``, ``AuthorizationError`` or ``ValidationError``,
        checked in that order.
        """
        existing = self.get_by_id(message.message_id)
        self._require_owner(existing, account, "update")
        validate_message_text(message.message_text)
        merged = existing.model_copy(update={"message_text": message.message_text})
        if not self._gateway.update(merged):
            # Deleted between the read above and this write.
            raise NotFoundError(f"Message {message.message_id} not found")
        logger.info("Updated message %s", merged.message_id)
        return merged

    def delete(self, message: Message, account: Optional[Account]) -> Message:
        """Delete a message by id and return the record that was removed."""
        existing = self.get_by_id(message.message_id)
        self._require_owner(existing, account, "delete")
        if not self._gateway.delete(existing):
            raise NotFoundError(f"Message {message.message_id} not found")
        logger.info("Deleted message %s", existing.message_id)
        return existing
