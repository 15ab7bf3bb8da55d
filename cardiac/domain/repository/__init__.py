"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from cardiac.domain.repository.share_log import ShareLogRepository
from cardiac.domain.repository.unit_of_work import UnitOfWork
from cardiac.domain.repository.user import UserRepository
from cardiac.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "VoteRepository",
    "ShareLogRepository",
    "UnitOfWork",
]
