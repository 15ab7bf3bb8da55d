"""Shared auth response models."""

from datetime import datetime

from pydantic import BaseModel

from cardiac.domain.model import User


class UserInfo(BaseModel):
    """Public view of a user."""

    id: str
    email: str
    share_points: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            email=user.email.root,
            share_points=user.share_points,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Session token plus the authenticated user."""

    token: str
    user: UserInfo
