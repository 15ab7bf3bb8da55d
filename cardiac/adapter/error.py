"""Infrastructure layer errors."""

from cardiac.domain.error import UpstreamUnavailableError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class CoinGeckoError(ProviderError, UpstreamUnavailableError):
    """CoinGecko request failed, timed out or returned an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        UpstreamUnavailableError.__init__(self, message, status_code=status_code)


class TurnstileError(ProviderError):
    """Turnstile siteverify could not be reached or returned an error status."""

    pass
