"""ORM Models — SQLAlchemy declarative models for applications and preferences.

Invariants:
    - All models inherit from Base (db/base.py)
    - Application rows convert to core Application records at the repository boundary

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from pursuit.models.application import ApplicationRow  # noqa: F401
from pursuit.models.preference import Preference  # noqa: F401
