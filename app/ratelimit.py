from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings, get_settings

_settings = get_settings()
_process_rate_limit = _settings.rate_limit_process

limiter = Limiter(key_func=get_remote_address, enabled=_settings.rate_limit_enabled)


def process_rate_limit() -> str:
    """Limit for POST /receipts/process; read on every request."""
    return _process_rate_limit


def configure_limiter(settings: Settings) -> None:
    """Apply settings to the shared limiter and forget previous hits."""
    global _process_rate_limit
    limiter.enabled = settings.rate_limit_enabled
    _process_rate_limit = settings.rate_limit_process
    limiter.reset()
