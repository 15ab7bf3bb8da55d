"""Cloudflare Turnstile siteverify client."""

import httpx
import logfire

from cardiac.adapter.error import TurnstileError
from cardiac.domain.service.auth_service import CaptchaVerifier


class TurnstileVerifier(CaptchaVerifier):
    """Base class for Turnstile verifiers.

    Provides type distinction for dependency injection.
    """

    pass


class RealTurnstileVerifier(TurnstileVerifier):
    """Verifies tokens against Cloudflare's siteverify endpoint.

    Fails closed: if Cloudflare cannot be reached the token is rejected.
    """

    def __init__(
        self, secret_key: str, verify_url: str, timeout_seconds: float = 10.0
    ) -> None:
        self.secret_key = secret_key
        self.verify_url = verify_url
        self.timeout_seconds = timeout_seconds

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        try:
            result = await self._siteverify(token, remote_ip)
        except TurnstileError as e:
            logfire.error("Turnstile verification unavailable", error=str(e))
            return False

        success = bool(result.get("success"))
        if not success:
            logfire.info(
                "Turnstile rejected token", error_codes=result.get("error-codes", [])
            )
        return success

    async def _siteverify(self, token: str, remote_ip: str | None) -> dict:
        data = {"secret": self.secret_key, "response": token}
        if remote_ip:
            data["remoteip"] = remote_ip

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(self.verify_url, data=data)
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise TurnstileError(f"Turnstile siteverify failed: {e}") from e


# Mock implementation for testing
class MockTurnstileVerifier(TurnstileVerifier):
    """Mock verifier: accepts every token except "invalid"."""

    REJECTED_TOKEN = "invalid"

    async def verify(self, token: str, remote_ip: str | None = None) -> bool:
        return token != self.REJECTED_TOKEN
