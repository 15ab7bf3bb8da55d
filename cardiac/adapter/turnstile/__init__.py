"""Cloudflare Turnstile verification adapter."""

from .client import MockTurnstileVerifier, RealTurnstileVerifier, TurnstileVerifier

__all__ = ["MockTurnstileVerifier", "RealTurnstileVerifier", "TurnstileVerifier"]
