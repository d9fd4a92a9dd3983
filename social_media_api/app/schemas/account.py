"""
Pydantic models for account data.

``Account`` is the persisted record, including the password hash, and is
what services and gateways pass around.  ``AccountRead`` is the shape
returned over HTTP; it never includes the password.  Field constraints
are deliberately absent here: the service layer owns validation so the
same rules apply no matter how a request arrives.
"""

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    """Username/password pair used for registration and login."""

    username: str = Field(..., examples=["alice"])
    password: str = Field(..., examples=["s3cret"])


class Account(BaseModel):
    """An account as stored in the ``account`` table.

    ``account_id`` is ``0`` until the gateway assigns one.
    """

    account_id: int = 0
    username: str
    password: str

    model_config = {
        "from_attributes": True,
    }


class AccountRead(BaseModel):
    """Schema for reading an account from the API."""

    account_id: int
    username: str

    model_config = {
        "from_attributes": True,
    }
