"""Admin ORM — staff operators who authenticate and manage the catalogue.

Invariants:
    - username is unique
    - password holds a bcrypt hash, never the plain text
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from bootcamp.db.base import Base, TimestampMixin


class Admin(TimestampMixin, Base):
    """Staff account."""
    __tablename__ = "admins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
