"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .check_vote import CheckVoteRequest, CheckVoteResponse, CheckVoteUseCase
from .get_vote_status import (
    GetVoteStatusRequest,
    GetVoteStatusResponse,
    GetVoteStatusUseCase,
    VotedCoin,
)
from .get_voting_history import (
    GetVotingHistoryRequest,
    GetVotingHistoryResponse,
    GetVotingHistoryUseCase,
    VotingHistoryEntry,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "CheckVoteRequest",
    "CheckVoteResponse",
    "CheckVoteUseCase",
    "GetVoteStatusRequest",
    "GetVoteStatusResponse",
    "GetVoteStatusUseCase",
    "GetVotingHistoryRequest",
    "GetVotingHistoryResponse",
    "GetVotingHistoryUseCase",
    "VotedCoin",
    "VotingHistoryEntry",
]
