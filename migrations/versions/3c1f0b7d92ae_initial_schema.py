"""initial_schema

Create the schema for Polly:
- Polls (question plus an ordered JSONB list of options)
- Votes (one per user per poll; anonymous votes have a NULL voter)

Users live in the auth platform, so owner and voter IDs are plain UUIDs
without foreign keys.

Revision ID: 3c1f0b7d92ae
Revises:
Create Date: 2026-10-16 09:12:40.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7d92ae"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # POLLS table
    # ========================================================================
    op.create_table(
        "polls",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("options", postgresql.JSONB(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "jsonb_array_length(options) BETWEEN 2 AND 10", name="ck_polls_options"
        ),
    )

    op.create_index("idx_polls_owner_id", "polls", ["owner_id"])
    op.create_index("idx_polls_created_at", "polls", ["created_at"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("poll_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=True),
        sa.Column("option_index", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["poll_id"], ["polls.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("option_index >= 0", name="ck_votes_option_index"),
        sa.UniqueConstraint("poll_id", "voter_id", name="uq_votes_poll_voter"),
    )

    op.create_index("idx_votes_poll_id", "votes", ["poll_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_poll_id", table_name="votes")
    op.drop_table("votes")

    op.drop_index("idx_polls_created_at", table_name="polls")
    op.drop_index("idx_polls_owner_id", table_name="polls")
    op.drop_table("polls")
