"""
Business logic for accounts.

``AccountService`` validates registration and update input, hashes
passwords before they reach storage and checks login credentials
against the stored hash.  Persistence goes through an injected
``AccountGateway``; the service never opens a connection itself.
"""

import logging
from typing import List, Optional

from ..core.errors import ConflictError, ValidationError
from ..core.security import hash_password, verify_password
from ..gateways.base import AccountGateway
from ..schemas.account import Account, AccountCredentials


logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4
MAX_USERNAME_LENGTH = 255


def _validate_credentials(username: Optional[str], password: Optional[str]) -> None:
    if not username or not username.strip():
        raise ValidationError("Username must not be blank")
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(f"Username must be at most {MAX_USERNAME_LENGTH} characters")
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    try:
        username.encode("utf-8")
        password.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValidationError("Username and password must be valid UTF-8") from exc


class AccountService:
    """Account registration, login and lifecycle operations."""

    def __init__(self, gateway: AccountGateway):
        self._gateway = gateway

    def register(self, candidate: AccountCredentials) -> Account:
        """Create a new account.

        Raises ``ValidationError`` for a blank username or a short
        password and ``ConflictError`` if the username is taken.  The
        password is stored as a salted hash.  The ``username_exists``
        check only gives an early, clear error; the UNIQUE constraint
        behind ``insert`` is what actually prevents duplicates.
        """
        _validate_credentials(candidate.username, candidate.password)
        if self._gateway.username_exists(candidate.username):
            logger.info("Registration refused, username %s is taken", candidate.username)
            raise ConflictError("Username already exists")
        account = self._gateway.insert(
            Account(username=candidate.username, password=hash_password(candidate.password))
        )
        logger.info("Registered account %s (%s)", account.account_id, account.username)
        return account

    def login(self, credentials: AccountCredentials) -> Optional[Account]:
        """Return the matching account, or ``None`` when credentials do not match.

        An unknown username and a wrong password give the same result.
        """
        account = self._gateway.find_by_username(credentials.username)
        if account is None or not verify_password(credentials.password, account.password):
            logger.info("Failed login for %s", credentials.username)
            return None
        logger.info("Account %s logged in", account.account_id)
        return account

    def get_by_id(self, account_id: int) -> Optional[Account]:
        return self._gateway.get_by_id(account_id)

    def get_all(self) -> List[Account]:
        return self._gateway.get_all()

    def update(self, account: Account) -> bool:
        """Persist a new username and/or password for an existing account.

        ``account.password`` is always treated as plaintext and hashed
        exactly once, as in ``register``.  Returns ``False`` if no account
        has ``account.account_id``.  Renaming to a username that belongs
        to another account raises ``ConflictError``.
        """
        if not account.account_id:
            raise ValidationError("Account id is required")
        _validate_credentials(account.username, account.password)
        changed = self._gateway.update(
            account.model_copy(update={"password": hash_password(account.password)})
        )
        if changed:
            logger.info("Updated account %s", account.account_id)
        return changed

    def delete(self, account: Account) -> bool:
        """Delete an account by id.  Its messages are left untouched."""
        if not account.account_id:
            raise ValidationError("Account id is required")
        removed = self._gateway.delete(account)
        if removed:
            logger.info("Deleted account %s", account.account_id)
        return removed
