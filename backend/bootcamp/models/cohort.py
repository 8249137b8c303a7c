"""Cohort ORM — a scheduled intake window.

Invariants:
    - start_date is required; orientation_date and duration are optional
    - Deleting a cohort deletes its enrollments

Design Decisions:
    - duration is free text ("12 weeks"): it is only ever displayed
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bootcamp.db.base import Base, TimestampMixin


class Cohort(TimestampMixin, Base):
    """Bootcamp intake."""
    __tablename__ = "cohorts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    orientation_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    duration: Mapped[str | None] = mapped_column(Text, nullable=True)

    enrollments: Mapped[list["Enrollment"]] = relationship(
        "Enrollment", back_populates="cohort", passive_deletes=True,
    )
