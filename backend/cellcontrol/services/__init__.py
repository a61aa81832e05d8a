"""Services Layer — business rules between the HTTP handlers and repositories.

Invariants:
    - Services receive their repositories by constructor
    - Services never choose HTTP status codes
"""
