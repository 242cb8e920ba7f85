"""
Noteful API: Folder SQLAlchemy Model
======================================

What:  ORM model representing the `folders` table.
Who:   Used by the folder ResourceService and by Alembic (001 migration).
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """A named container that notes belong to."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name={self.name!r})>"
