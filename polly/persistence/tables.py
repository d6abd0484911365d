"""SQLAlchemy table definitions for polly.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# POLLS TABLE
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("owner_id", UUID(as_uuid=True), nullable=False),  # auth.users id
    Column("question", Text, nullable=False),
    Column("options", JSONB, nullable=False),  # ordered list of strings
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_polls_owner_id", polls_table.c.owner_id)
Index("idx_polls_created_at", polls_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "poll_id",
        UUID(as_uuid=True),
        ForeignKey("polls.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", UUID(as_uuid=True), nullable=True),  # NULL for anonymous
    Column("option_index", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("option_index >= 0", name="ck_votes_option_index"),
    # NULL voters never collide, so anonymous votes are not deduplicated
    UniqueConstraint("poll_id", "voter_id", name="uq_votes_poll_voter"),
)

Index("idx_votes_poll_id", votes_table.c.poll_id)
