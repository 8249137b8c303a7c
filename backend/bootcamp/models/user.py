"""User ORM — an applicant; always belongs to exactly one track.

Invariants:
    - email and phone_number are globally unique
    - track_id is required; ON DELETE CASCADE from tracks
"""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bootcamp.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """Applicant."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    track_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tracks.id", ondelete="CASCADE"), nullable=False,
    )

    track: Mapped["Track"] = relationship("Track", back_populates="users")
    enrollments: Mapped[list["Enrollment"]] = relationship(
        "Enrollment", back_populates="user", passive_deletes=True,
    )
