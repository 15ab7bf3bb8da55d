"""Strongly typed identifiers for domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
VoteId = NewType("VoteId", UUID)
ShareLogId = NewType("ShareLogId", UUID)

# CoinGecko coin id, e.g. "bitcoin"
CoinId = NewType("CoinId", str)
