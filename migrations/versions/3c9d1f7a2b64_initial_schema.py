"""initial_schema

Create the schema for Crypto Cardiac:
- Users (email/password accounts with denormalized share points)
- Votes (append-only ledger, one row per user per coin per day)
- Share logs (append-only ledger, source of truth for share points)

Revision ID: 3c9d1f7a2b64
Revises:
Create Date: 2026-10-17 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9d1f7a2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("share_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint(
            "share_points >= 0", name="ck_users_share_points_non_negative"
        ),
    )

    # ========================================================================
    # VOTES
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("coin_id", sa.String(255), nullable=False),
        sa.Column("coin_name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("vote_day", sa.Date(), nullable=False),  # America/New_York date
        sa.Column("eligibility_key", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        # Closes the check-then-insert race between concurrent votes
        sa.UniqueConstraint(
            "user_id", "eligibility_key", "vote_day", name="uq_votes_user_key_day"
        ),
    )
    op.create_index(
        "idx_votes_user_created",
        "votes",
        ["user_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_votes_coin_id", "votes", ["coin_id"])
    op.create_index("idx_votes_created_at", "votes", ["created_at"])
    op.create_index("idx_votes_vote_day", "votes", ["vote_day"])

    # ========================================================================
    # SHARE LOGS
    # ========================================================================
    op.create_table(
        "share_logs",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("coin_id", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("share_day", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_id", "coin_id", "share_day", name="uq_share_logs_user_coin_day"
        ),
    )
    op.create_index("idx_share_logs_user_id", "share_logs", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_share_logs_user_id", table_name="share_logs")
    op.drop_table("share_logs")

    op.drop_index("idx_votes_vote_day", table_name="votes")
    op.drop_index("idx_votes_created_at", table_name="votes")
    op.drop_index("idx_votes_coin_id", table_name="votes")
    op.drop_index("idx_votes_user_created", table_name="votes")
    op.drop_table("votes")

    op.drop_table("users")
