"""Domain services."""

from .auth_service import AuthService, CaptchaVerifier
from .base import Service
from .day_boundary import DayBoundary
from .jwt_service import JWTService
from .leaderboard_service import LeaderboardService, TimeBasedVotes
from .market_service import MarketDataClient, MarketService
from .share_service import ShareAward, ShareService
from .user_service import UserService
from .voting_service import VoteReceipt, VotingService

__all__ = [
    "AuthService",
    "CaptchaVerifier",
    "DayBoundary",
    "JWTService",
    "LeaderboardService",
    "MarketDataClient",
    "MarketService",
    "Service",
    "ShareAward",
    "ShareService",
    "TimeBasedVotes",
    "UserService",
    "VoteReceipt",
    "VotingService",
]
