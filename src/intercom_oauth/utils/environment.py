"""Environment-driven configuration for the OAuth demo service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final, Tuple

logger = logging.getLogger("intercom-oauth.utils.environment")

_TRUTHY: Final[Tuple[str, ...]] = ("true", "1", "yes", "y", "on")

DEFAULT_APP_URL: Final[str] = "http://localhost:8000"
DEFAULT_AUTHORIZE_URL: Final[str] = "https://app.intercom.com/oauth"
DEFAULT_TOKEN_URL: Final[str] = "https://api.intercom.io/auth/eagle/token"
DEFAULT_API_URL: Final[str] = "https://api.intercom.io"


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def _is_production(app_env: str | None, force_secure: str | None) -> bool:
    """
    Return True when cookies must carry the ``Secure`` flag.

    ``APP_ENV=production`` is the normal switch; ``COOKIE_SECURE`` may force
    the flag on for staging setups that also run behind TLS.
    """
    if _truthy(force_secure):
        return True
    return (app_env or "").strip().lower() == "production"


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric INTERCOM_HTTP_TIMEOUT=%r", raw)
        return None
    if timeout <= 0:
        logger.warning("Ignoring non-positive INTERCOM_HTTP_TIMEOUT=%r", raw)
        return None
    return timeout


@dataclass(frozen=True)
class AppSettings:
    """
    Settings for the OAuth demo, normally loaded with :meth:`from_env`.

    The two credentials may be empty; :meth:`is_oauth_configured` tells the
    server whether the login flow can actually start.
    """

    client_id: str = ""
    client_secret: str = ""
    app_url: str = DEFAULT_APP_URL
    production: bool = False
    authorize_url: str = DEFAULT_AUTHORIZE_URL
    token_url: str = DEFAULT_TOKEN_URL
    api_base_url: str = DEFAULT_API_URL
    http_timeout: float | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppSettings":
        return cls(
            client_id=os.getenv("INTERCOM_CLIENT_ID", "").strip(),
            client_secret=os.getenv("INTERCOM_CLIENT_SECRET", "").strip(),
            app_url=(os.getenv("APP_URL") or DEFAULT_APP_URL).strip().rstrip("/"),
            production=_is_production(
                os.getenv("APP_ENV"), os.getenv("COOKIE_SECURE")
            ),
            authorize_url=(
                os.getenv("INTERCOM_AUTHORIZE_URL") or DEFAULT_AUTHORIZE_URL
            ).strip(),
            token_url=(os.getenv("INTERCOM_TOKEN_URL") or DEFAULT_TOKEN_URL).strip(),
            api_base_url=(os.getenv("INTERCOM_API_URL") or DEFAULT_API_URL)
            .strip()
            .rstrip("/"),
            http_timeout=_parse_timeout(os.getenv("INTERCOM_HTTP_TIMEOUT")),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        )

    def is_oauth_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @property
    def dashboard_url(self) -> str:
        return f"{self.app_url}/dashboard"
