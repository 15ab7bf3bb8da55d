"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict
from uuid import UUID

from cardiac.domain.model import ShareLog, User, Vote
from cardiac.domain.value import CoinId, Email, ShareLogId, UserId, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _utc(value: datetime) -> datetime:
    # Some drivers hand back naive timestamps; storage is always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        share_points=row.get("share_points") or 0,
        created_at=_utc(row["created_at"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "share_points": user.share_points,
        "created_at": user.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        coin_id=CoinId(row["coin_id"]),
        coin_name=row["coin_name"],
        created_at=_utc(row["created_at"]),
        vote_day=row["vote_day"],
        eligibility_key=row["eligibility_key"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()


def row_to_share_log(row: Dict[str, Any]) -> ShareLog:
    """Convert database row to ShareLog domain model."""
    return ShareLog(
        id=ShareLogId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        coin_id=CoinId(row["coin_id"]),
        created_at=_utc(row["created_at"]),
        share_day=row["share_day"],
    )


def share_log_to_dict(share_log: ShareLog) -> Dict[str, Any]:
    """Convert ShareLog domain model to database dict."""
    return share_log.model_dump()
