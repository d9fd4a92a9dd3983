"""
Pydantic schema definitions for records and API payloads.

Accounts and messages each have their own module.  Persisted records
(``Account``, ``Message``) are separated from the request and response
bodies so the API representation can differ from what is stored.
"""
