from __future__ import annotations

from dataclasses import dataclass

from intercom_oauth.oauth.client import IntercomClient
from intercom_oauth.utils.environment import AppSettings


@dataclass(frozen=True)
class AppContext:
    """
    Context holding the settings loaded at startup and the provider client
    built from them. Shared read-only by every request handler.
    """

    settings: AppSettings
    client: IntercomClient
    auth_base_path: str = ""

    @property
    def secure_cookies(self) -> bool:
        return self.settings.production

    def auth_path(self, suffix: str) -> str:
        return f"{self.auth_base_path}{suffix}"
