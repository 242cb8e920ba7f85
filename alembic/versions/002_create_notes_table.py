"""Create notes table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table, each row owned by a folder.
How:   folder_id references folders.id with ON DELETE CASCADE, so removing
       a folder removes its notes. `modified` defaults to CURRENT_TIMESTAMP.

Rollback: downgrade() drops the table and its index (all notes are lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "modified",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("folder_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["folder_id"],
            ["folders.id"],
            name="fk_notes_folder_id",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Backs the cascade delete and "notes in folder" lookups
    op.create_index("idx_notes_folder_id", "notes", ["folder_id"])


def downgrade() -> None:
    op.drop_index("idx_notes_folder_id", table_name="notes")
    op.drop_table("notes")
