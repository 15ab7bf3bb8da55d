"""PostgreSQL repository implementations."""

from cardiac.persistence.repository.share_log import PostgresShareLogRepository
from cardiac.persistence.repository.unit_of_work import PostgresUnitOfWork
from cardiac.persistence.repository.user import PostgresUserRepository
from cardiac.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresVoteRepository",
    "PostgresShareLogRepository",
    "PostgresUnitOfWork",
]
