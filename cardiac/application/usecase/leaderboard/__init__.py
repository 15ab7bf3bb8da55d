"""Leaderboard use cases."""

from .get_time_based_votes import (
    GetTimeBasedVotesUseCase,
    TimeBasedVotesResponse,
    WindowCounts,
)
from .get_vote_totals import GetVoteTotalsUseCase, VoteTotalsResponse

__all__ = [
    "GetTimeBasedVotesUseCase",
    "GetVoteTotalsUseCase",
    "TimeBasedVotesResponse",
    "VoteTotalsResponse",
    "WindowCounts",
]
