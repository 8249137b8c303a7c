"""Enrollment ORM — one applicant's application to one cohort.

Invariants:
    - (user_id, cohort_id) is unique: one application per user per cohort
    - user_id and cohort_id cascade on delete
    - admitted / confirmed are tri-state: NULL means no decision yet
    - deadline is set only on admission

Design Decisions:
    - No status column: status is derived (core/enrollment_state.py) so the
      flags can never disagree with it
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bootcamp.db.base import Base, TimestampMixin


class Enrollment(TimestampMixin, Base):
    """Application record carrying the admission decision."""
    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "cohort_id", name="uq_enrollments_user_cohort"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
    )
    cohort_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cohorts.id", ondelete="CASCADE"), nullable=False,
    )
    admitted: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    confirmed: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    deadline: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    user: Mapped["User"] = relationship("User", back_populates="enrollments")
    cohort: Mapped["Cohort"] = relationship("Cohort", back_populates="enrollments")
