"""
Noteful API: Note SQLAlchemy Model
====================================

What:  ORM model representing the `notes` table.
Who:   Used by the note ResourceService and by Alembic (002 migration).

Table Design:
    - id: integer primary key assigned by the store
    - name, content: free text; escaped on output, stored verbatim
    - modified: timestamp with time zone, defaults to CURRENT_TIMESTAMP
    - folder_id: required reference to folders.id, ON DELETE CASCADE

    Index on folder_id: the foreign key column is what the cascade delete
    scans when a folder is removed.
"""

from datetime import datetime

from sqlalchemy import TIMESTAMP, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Note(Base):
    """
    A note stored inside exactly one folder.

    Lifecycle:
        1. Inserted with name, content, folder_id (modified defaults to now)
        2. Partially updated: only supplied columns change
        3. Deleted by id, or removed with its folder
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    modified: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, name={self.name!r}, "
            f"folder_id={self.folder_id})>"
        )
