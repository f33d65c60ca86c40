"""Shared fixtures for the unit test-suite (no network access)."""

from __future__ import annotations

import pytest

from intercom_oauth.oauth.client import IntercomClient
from intercom_oauth.oauth.cookies import CookieSpec
from intercom_oauth.utils.environment import AppSettings

APP_URL = "http://localhost:8000"


class DictCookieJar:
    """In-memory ``CookieJar`` recording every mutation."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.set_calls: list[tuple[CookieSpec, str]] = []
        self.deleted: list[CookieSpec] = []

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, spec: CookieSpec, value: str) -> None:
        self.values[spec.name] = value
        self.set_calls.append((spec, value))

    def delete(self, spec: CookieSpec) -> None:
        self.values.pop(spec.name, None)
        self.deleted.append(spec)


@pytest.fixture()
def settings() -> AppSettings:
    return AppSettings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        app_url=APP_URL,
    )


@pytest.fixture()
def intercom_client(settings: AppSettings) -> IntercomClient:
    return IntercomClient.from_settings(settings)


@pytest.fixture()
def cookie_jar() -> DictCookieJar:
    return DictCookieJar()


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
