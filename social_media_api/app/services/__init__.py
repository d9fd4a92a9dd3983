"""
Service layer.

Each service encapsulates the business rules for one record type and
receives its persistence gateway through the constructor, so API
handlers and tests can supply whichever storage they need.
"""
