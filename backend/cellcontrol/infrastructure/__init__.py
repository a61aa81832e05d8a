"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Store errors are mapped to core/errors.py types here and nowhere else

Design Decisions:
    - Concrete implementations of core/repository_protocols.py live here
"""
