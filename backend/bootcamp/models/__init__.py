"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Track → User → Enrollment ← Cohort, every FK ON DELETE CASCADE

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bootcamp.models.admin import Admin  # noqa: F401
from bootcamp.models.track import Track  # noqa: F401
from bootcamp.models.user import User  # noqa: F401
from bootcamp.models.cohort import Cohort  # noqa: F401
from bootcamp.models.enrollment import Enrollment  # noqa: F401
