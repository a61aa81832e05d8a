"""Route Modules — one file per resource/concern.

Invariants:
    - Routes never contain business logic (delegate to services)
"""
