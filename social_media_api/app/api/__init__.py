"""
API package: dependency wiring, error handlers and versioned routes.

Version subpackages such as ``v1`` expose a top-level ``router`` that
includes all of their endpoints.
"""
