"""Track ORM — a curriculum an applicant is assigned to at registration.

Invariants:
    - Deleting a track deletes its users (and, transitively, their enrollments)

Design Decisions:
    - passive_deletes=True: the database cascade does the work, the ORM does not
      load children just to delete them
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bootcamp.db.base import Base, TimestampMixin


class Track(TimestampMixin, Base):
    """Curriculum / specialization."""
    __tablename__ = "tracks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    users: Mapped[list["User"]] = relationship(
        "User", back_populates="track", passive_deletes=True,
    )
