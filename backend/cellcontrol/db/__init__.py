"""Database Infrastructure — declarative Base for ORM models.

Invariants:
    - Single Base; its metadata drives auto-migration at startup
"""
