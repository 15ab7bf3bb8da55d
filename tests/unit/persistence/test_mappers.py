"""Unit tests for row/model mappers."""

from datetime import date, datetime, timezone
from uuid import uuid4

from cardiac.persistence.mappers import (
    row_to_share_log,
    row_to_user,
    row_to_vote,
    user_to_dict,
    vote_to_dict,
)
from tests.conftest import make_user


class TestUserMapping:
    """Tests for user rows."""

    def test_user_round_trip(self):
        user = make_user("Frank@Example.com", share_points=4)

        row = user_to_dict(user)

        assert row["email"] == "frank@example.com"
        assert row_to_user(row) == user

    def test_string_id_and_naive_timestamp_accepted(self):
        user_id = uuid4()

        user = row_to_user(
            {
                "id": str(user_id),
                "email": "gina@example.com",
                "password_hash": "$2b$10$hash",
                "share_points": None,
                "created_at": datetime(2025, 1, 1, 12),
            }
        )

        assert user.id == user_id
        assert user.share_points == 0
        assert user.created_at.tzinfo == timezone.utc


class TestVoteMapping:
    """Tests for vote and share log rows."""

    def test_vote_row(self):
        row = {
            "id": uuid4(),
            "user_id": uuid4(),
            "coin_id": "bitcoin",
            "coin_name": "Bitcoin",
            "created_at": datetime(2025, 1, 16, 4, 30, tzinfo=timezone.utc),
            "vote_day": date(2025, 1, 15),
            "eligibility_key": "bitcoin",
        }

        vote = row_to_vote(row)

        assert vote.vote_day == date(2025, 1, 15)
        assert vote_to_dict(vote) == row

    def test_share_log_row(self):
        share_log = row_to_share_log(
            {
                "id": uuid4(),
                "user_id": uuid4(),
                "coin_id": "ethereum",
                "created_at": datetime(2025, 1, 15, 17, tzinfo=timezone.utc),
                "share_day": date(2025, 1, 15),
            }
        )

        assert share_log.coin_id == "ethereum"
        assert share_log.share_day == date(2025, 1, 15)
