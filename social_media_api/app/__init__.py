"""
Application package.

``core`` holds configuration, logging, database access, security helpers
and the error taxonomy; ``gateways`` the storage adapters; ``services``
the business rules; ``api`` the FastAPI boundary.  ``main`` assembles
them into the ASGI app.
"""
