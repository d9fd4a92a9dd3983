"""
Security helpers for password hashing and acting-account resolution.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a fresh 16-byte salt
per call.  The stored string records the algorithm, the iteration
count, the salt and the digest, separated by ``$``::

    pbkdf2_sha256$100000$<salt hex>$<digest hex>

so the work factor can be raised later without invalidating existing
hashes.

The acting account of a request is identified with HTTP Basic
credentials checked against the stored hash.  There are no tokens or
sessions; every mutating request carries its own credentials.
"""

import hashlib
import hmac
import logging
import os
from typing import TYPE_CHECKING, Optional

from fastapi import HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from .config import settings
from ..schemas.account import Account, AccountCredentials

if TYPE_CHECKING:
    from ..services.account_service import AccountService


logger = logging.getLogger(__name__)

HASH_ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : Optional[int]
        Work factor.  Defaults to ``settings.password_hash_iterations``.

    Returns
    -------
    str
        ``algorithm$iterations$salt$digest`` with salt and digest in hex.
    """
    rounds = iterations or settings.password_hash_iterations
    salt = os.urandom(SALT_BYTES)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return f"{HASH_ALGORITHM}${rounds}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a string produced by ``hash_password``.

    The digest is recomputed with the stored salt and iteration count and
    compared in constant time.  Anything that does not parse as a hash
    (including a plaintext value) never verifies.
    """
    try:
        algorithm, rounds, salt_hex, hash_hex = hashed_password.split("$")
        if algorithm != HASH_ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, int(rounds))
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(dk, stored_hash)


security = HTTPBasic(auto_error=False)


def resolve_acting_account(
    credentials: Optional[HTTPBasicCredentials],
    account_service: "AccountService",
) -> Optional[Account]:
    """Resolve the account performing a request from HTTP Basic credentials.

    Returns ``None`` when no credentials were sent; the service layer
    then decides whether the operation needs an account.  Credentials
    that do not match any account raise HTTP 401.
    """
    if credentials is None:
        return None
    account = account_service.login(
        AccountCredentials(username=credentials.username, password=credentials.password)
    )
    if account is None:
        logger.warning("Rejected credentials for %s", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return account
