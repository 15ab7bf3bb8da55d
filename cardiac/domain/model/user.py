"""User aggregate root.

Users sign up with an email and password and accumulate share points by
sharing coins on social networks.
"""

from datetime import datetime, timezone

from pydantic import Field

from cardiac.domain.model.common import DomainModel
from cardiac.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root.

    ``share_points`` only ever grows through ShareService.award_share; the
    recompute tool may rewrite it from the share log.
    """

    id: UserId
    email: Email
    password_hash: str = Field(repr=False)
    share_points: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
