"""Turnstile infrastructure providers."""

from dishka import Scope, provide

from cardiac.adapter.turnstile import RealTurnstileVerifier
from cardiac.config import Settings
from cardiac.domain.service import CaptchaVerifier
from cardiac.util.di.base import ProviderBase


class TurnstileProvider(ProviderBase):
    """Turnstile component base."""

    __mock_component__ = "turnstile"


class ProdTurnstileProvider(TurnstileProvider):
    """Production Turnstile provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_captcha_verifier(self, settings: Settings) -> CaptchaVerifier:
        """Provide Cloudflare Turnstile verifier.

        Raises:
            ValueError: If captcha is enabled in production without a secret key
        """
        captcha = settings.captcha
        if (
            captcha.enabled
            and settings.environment == "production"
            and captcha.secret_key == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ValueError("CAPTCHA__SECRET_KEY must be configured in production")

        return RealTurnstileVerifier(
            secret_key=captcha.secret_key,
            verify_url=captcha.verify_url,
            timeout_seconds=captcha.timeout_seconds,
        )
