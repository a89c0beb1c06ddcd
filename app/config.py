import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)
    sentry_dsn: str | None = None
    rate_limit_enabled: bool = False
    rate_limit_process: str = "120/minute"


def get_settings() -> Settings:
    """Read settings from the environment (and .env, if present).

    Nothing here is required; every value has a default that serves the API
    on port 3000 of all interfaces.
    """
    port_str = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(port_str)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {port_str!r}")

    origins = os.getenv("CORS_ORIGINS", "*").split(",")

    return Settings(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=tuple(o.strip() for o in origins if o.strip()),
        sentry_dsn=os.getenv("SENTRY_DSN") or None,
        rate_limit_enabled=_get_bool("RATE_LIMIT_ENABLED"),
        rate_limit_process=os.getenv("RATE_LIMIT_PROCESS", "120/minute"),
    )
