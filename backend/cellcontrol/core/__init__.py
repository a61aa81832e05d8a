"""Core Layer — pure domain logic and contracts, no IO.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
