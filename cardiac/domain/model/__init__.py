"""Domain model entities."""

from cardiac.domain.model.share_log import ShareLog
from cardiac.domain.model.user import User
from cardiac.domain.model.vote import Vote

__all__ = [
    "User",
    "Vote",
    "ShareLog",
]
