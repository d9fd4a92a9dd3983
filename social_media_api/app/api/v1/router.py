"""
Top-level router for version 1 of the API.

Aggregates the account and message routers.  Paths are defined in the
endpoint modules themselves (``/register``, ``/messages``,
``/accounts/{id}/messages``), so no prefixes are added here.
"""

from fastapi import APIRouter

from .endpoints import accounts, health, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, tags=["messages"])
router.include_router(health.router, tags=["health"])
