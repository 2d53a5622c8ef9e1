# stockapp/core/rate_limiter.py

from slowapi import Limiter
from slowapi.util import get_remote_address

from stockapp.core.config import Settings, settings


limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)

_write_limit = settings.WRITE_RATE_LIMIT


def configure_limiter(app_settings: Settings):
    """Point the shared limiter at the settings of the app being built."""
    global _write_limit

    limiter.enabled = app_settings.RATE_LIMIT_ENABLED
    _write_limit = app_settings.WRITE_RATE_LIMIT
    limiter.reset()


def write_limit() -> str:
    # Resolved per request, so the latest configure_limiter call wins
    return _write_limit
