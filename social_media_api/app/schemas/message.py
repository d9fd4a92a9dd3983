"""
Pydantic models for messages.
"""

from pydantic import BaseModel, Field


# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1


class MessageBase(BaseModel):
    posted_by: int = Field(..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX, examples=[1])
    message_text: str = Field(..., examples=["Hello, world"])
    # Opaque timestamp supplied by the client and stored verbatim.
    time_posted_epoch: int = Field(
        ..., ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX, examples=[1669947792]
    )


class MessageCreate(MessageBase):
    """Schema for posting a new message."""


class MessageUpdate(BaseModel):
    """Only the text of a message can change."""

    message_text: str


class Message(MessageBase):
    """A message as stored in the ``message`` table.

    ``message_id`` is ``0`` until the gateway assigns one.
    """

    message_id: int = 0

    model_config = {
        "from_attributes": True,
    }
