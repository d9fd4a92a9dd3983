"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one area (accounts, messages,
health).  The routers are aggregated in ``router.py``.
"""
