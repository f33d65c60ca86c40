"""Tests for the landing page and dashboard."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from intercom_oauth.oauth.client import IntercomClient
from intercom_oauth.oauth.errors import ProviderApiError
from intercom_oauth.servers.main import create_app
from intercom_oauth.utils.environment import AppSettings

APP_URL = "http://localhost:8000"


@pytest.fixture()
def http(settings: AppSettings, intercom_client: IntercomClient) -> TestClient:
    with TestClient(create_app(settings, client=intercom_client)) as client:
        yield client


def test_index_shows_escaped_error_and_login_link(http: TestClient) -> None:
    resp = http.get("/", params={"error": "<b>Invalid state parameter</b>"})
    assert resp.status_code == 200
    assert "&lt;b&gt;Invalid state parameter&lt;/b&gt;" in resp.text
    assert "href='/login'" in resp.text


def test_dashboard_redirects_home_without_session(
    http: TestClient, intercom_client: IntercomClient
) -> None:
    with patch.object(intercom_client, "fetch_profile") as fetch:
        resp = http.get("/dashboard", follow_redirects=False)
    fetch.assert_not_called()
    assert resp.status_code == 303
    assert resp.headers["location"] == f"{APP_URL}/"


def test_dashboard_renders_profile(
    http: TestClient, intercom_client: IntercomClient
) -> None:
    admin = {
        "type": "admin",
        "id": "123",
        "name": "Test <Admin>",
        "email": "admin@test.com",
        "app": {"name": "Acme", "timezone": "UTC"},
    }
    with patch.object(intercom_client, "fetch_profile", return_value=admin):
        resp = http.get("/dashboard", headers={"Cookie": "session_token=tok1"})

    assert resp.status_code == 200
    assert "Test &lt;Admin&gt;" in resp.text
    assert "admin@test.com" in resp.text
    assert "Acme" in resp.text
    assert "action='/logout'" in resp.text


def test_dashboard_revoked_token_clears_cookie(
    http: TestClient, intercom_client: IntercomClient
) -> None:
    with patch.object(
        intercom_client, "fetch_profile", side_effect=ProviderApiError(status=401)
    ):
        resp = http.get(
            "/dashboard",
            headers={"Cookie": "session_token=revoked"},
            follow_redirects=False,
        )
    assert resp.status_code == 303
    assert any(
        h.startswith("session_token=") and "Max-Age=0" in h
        for h in resp.headers.get_list("set-cookie")
    )
