"""Unit tests for session token extraction."""

import pytest

from cardiac.config import AuthSettings
from cardiac.domain.error import AuthenticationError
from cardiac.domain.service import JWTService
from cardiac.interface.api.session import authenticate, extract_token
from tests.conftest import make_user

SETTINGS = AuthSettings(jwt_secret="session-test-secret-long-enough-for-hs256")


class TestExtractToken:
    """Tests for header and cookie precedence."""

    def test_bearer_header(self):
        assert extract_token("Bearer abc.def", None) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc.def", None) == "abc.def"

    def test_header_wins_over_cookie(self):
        assert extract_token("Bearer from-header", "from-cookie") == "from-header"

    def test_cookie_used_without_header(self):
        assert extract_token(None, "from-cookie") == "from-cookie"

    def test_non_bearer_header_falls_back_to_cookie(self):
        assert extract_token("Basic dXNlcjpwYXNz", "from-cookie") == "from-cookie"

    def test_nothing_sent(self):
        assert extract_token(None, None) is None
        assert extract_token("Bearer ", "") is None


class TestAuthenticate:
    """Tests for 401 vs 403 classification."""

    def test_valid_token(self):
        jwt_service = JWTService(SETTINGS)
        user = make_user()
        token = jwt_service.create_token(user)

        payload = authenticate(jwt_service, f"Bearer {token}", None)

        assert payload.user_id == str(user.id)

    def test_missing_token(self):
        with pytest.raises(AuthenticationError) as exc_info:
            authenticate(JWTService(SETTINGS), None, None)

        assert exc_info.value.missing

    def test_invalid_token(self):
        with pytest.raises(AuthenticationError) as exc_info:
            authenticate(JWTService(SETTINGS), None, "not-a-jwt")

        assert not exc_info.value.missing
