"""Shared rate limiter instance.

The limiter is process-wide: route decorators bind to it at import time.
``configure_limiter`` applies the settings of the app being built, so the
most recently created app decides whether limiting is on and what the
login limit is.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from traininghub.core.config import Settings

limiter = Limiter(key_func=get_remote_address)

_login_limit = "5/minute"


def configure_limiter(settings: Settings) -> Limiter:
    global _login_limit

    limiter.enabled = settings.RATE_LIMIT_ENABLED
    _login_limit = settings.LOGIN_RATE_LIMIT
    return limiter


def login_rate_limit() -> str:
    """Limit string for the login route, read on every request."""
    return _login_limit
