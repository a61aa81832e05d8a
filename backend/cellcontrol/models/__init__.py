"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model imported here so Base.metadata is complete before create_all
"""

from cellcontrol.models.user import User  # noqa: F401
