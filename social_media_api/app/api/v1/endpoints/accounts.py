"""
Account endpoints.

Registration and login.  Responses never include the password hash.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from social_media_api.app.api.deps import get_account_service
from social_media_api.app.schemas.account import AccountCredentials, AccountRead
from social_media_api.app.services.account_service import AccountService


router = APIRouter()


@router.post("/register", response_model=AccountRead, status_code=status.HTTP_201_CREATED)
def register(
    candidate: AccountCredentials,
    service: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Register a new account.

    Returns 400 for a blank username or a password shorter than four
    characters and 409 if the username is already taken.
    """
    account = service.register(candidate)
    return AccountRead(account_id=account.account_id, username=account.username)


@router.post("/login", response_model=AccountRead)
def login(
    credentials: AccountCredentials,
    service: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Check a username/password pair and return the account on success."""
    account = service.login(credentials)
    if account is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return AccountRead(account_id=account.account_id, username=account.username)
