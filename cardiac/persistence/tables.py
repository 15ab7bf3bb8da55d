"""SQLAlchemy table definitions for Crypto Cardiac.

These table definitions are used for Core queries and manual mapping.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from cardiac.domain.repository.constraint import (
    UNIQUE_DAILY_SHARE,
    UNIQUE_DAILY_VOTE,
    UNIQUE_USER_EMAIL,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("share_points", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name=UNIQUE_USER_EMAIL),
    CheckConstraint("share_points >= 0", name="ck_users_share_points_non_negative"),
)

# ============================================================================
# VOTES TABLE (append-only ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("coin_id", String(255), nullable=False),
    Column("coin_name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Reference-timezone calendar date of created_at
    Column("vote_day", Date, nullable=False),
    # coin_id under the per-coin scope, "*" under the global scope
    Column("eligibility_key", String(255), nullable=False),
    UniqueConstraint(
        "user_id", "eligibility_key", "vote_day", name=UNIQUE_DAILY_VOTE
    ),
)

Index("idx_votes_user_created", votes_table.c.user_id, votes_table.c.created_at.desc())
Index("idx_votes_coin_id", votes_table.c.coin_id)
Index("idx_votes_created_at", votes_table.c.created_at)
Index("idx_votes_vote_day", votes_table.c.vote_day)

# ============================================================================
# SHARE LOGS TABLE (append-only ledger)
# ============================================================================
share_logs_table = Table(
    "share_logs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("coin_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("share_day", Date, nullable=False),
    UniqueConstraint(
        "user_id", "coin_id", "share_day", name=UNIQUE_DAILY_SHARE
    ),
)

Index("idx_share_logs_user_id", share_logs_table.c.user_id)
