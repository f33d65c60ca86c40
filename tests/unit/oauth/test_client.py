"""Unit tests for IntercomClient request/response mapping.

Coverage:
* Authorization URL shape
* Token exchange: request body, token extraction, failure statuses
* Profile fetch: bearer header, pass-through body, failure statuses
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
import requests

from intercom_oauth.oauth.client import IntercomClient
from intercom_oauth.oauth.errors import ProviderApiError, TokenExchangeError


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #
def _fake_response(status: int, body: Any = None, *, bad_json: bool = False) -> object:
    resp = SimpleNamespace()
    resp.ok = 200 <= status < 300
    resp.status_code = status
    resp.text = "" if body is None else str(body)

    def _json() -> Any:
        if bad_json:
            raise ValueError("not json")
        return body

    resp.json = _json
    return resp


# --------------------------------------------------------------------------- #
# Authorization URL                                                           #
# --------------------------------------------------------------------------- #
def test_authorization_url_embeds_client_id_and_state(
    intercom_client: IntercomClient,
) -> None:
    url = intercom_client.authorization_url("test-state")
    assert url == (
        "https://app.intercom.com/oauth?client_id=test-client-id&state=test-state"
    )


def test_authorization_url_has_no_side_effects(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    def _boom(*args, **kwargs):  # noqa: ANN001, ANN002, ANN003
        raise AssertionError("no HTTP call expected")

    monkeypatch.setattr(requests, "get", _boom)
    monkeypatch.setattr(requests, "post", _boom)
    assert intercom_client.authorization_url("a") != intercom_client.authorization_url(
        "b"
    )


# --------------------------------------------------------------------------- #
# Token exchange                                                              #
# --------------------------------------------------------------------------- #
def test_exchange_posts_code_and_returns_access_token(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    captured: dict[str, Any] = {}

    def fake_post(url: str, *, json: dict, headers: dict, timeout: Any) -> object:
        captured.update(url=url, json=json, headers=headers, timeout=timeout)
        return _fake_response(
            200,
            {
                "token_type": "Bearer",
                "token": "test-token-123",
                "access_token": "test-token-123",
            },
        )

    monkeypatch.setattr(requests, "post", fake_post)

    token = intercom_client.exchange_code_for_token("auth-code-123")

    assert token == "test-token-123"
    assert captured["url"] == "https://api.intercom.io/auth/eagle/token"
    assert captured["json"] == {
        "code": "auth-code-123",
        "client_id": "test-client-id",
        "client_secret": "test-client-secret",
    }
    assert captured["headers"] == {"Content-Type": "application/json"}
    assert captured["timeout"] is None


def test_exchange_non_success_raises_with_status(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    calls: list[str] = []

    def fake_post(url: str, **kwargs: Any) -> object:
        calls.append(url)
        return _fake_response(400, "Bad Request")

    monkeypatch.setattr(requests, "post", fake_post)

    with pytest.raises(TokenExchangeError) as excinfo:
        intercom_client.exchange_code_for_token("bad-code")

    assert excinfo.value.status == 400
    assert "Token exchange failed" in str(excinfo.value)
    assert len(calls) == 1, "exchange must not be retried"


def test_exchange_without_access_token_field_raises(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    monkeypatch.setattr(
        requests, "post", lambda url, **kw: _fake_response(200, {"token_type": "Bearer"})
    )
    with pytest.raises(TokenExchangeError, match="missing access_token"):
        intercom_client.exchange_code_for_token("code")


def test_exchange_transport_error_is_wrapped(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    def fake_post(url: str, **kwargs: Any) -> object:
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "post", fake_post)

    with pytest.raises(TokenExchangeError) as excinfo:
        intercom_client.exchange_code_for_token("code")
    assert excinfo.value.status is None


def test_exchange_never_leaks_secret_in_error(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    monkeypatch.setattr(
        requests, "post", lambda url, **kw: _fake_response(401, "test-client-secret")
    )
    with pytest.raises(TokenExchangeError) as excinfo:
        intercom_client.exchange_code_for_token("code")
    assert "test-client-secret" not in str(excinfo.value)
    assert "test-client-secret" not in str(excinfo.value.to_payload())


# --------------------------------------------------------------------------- #
# Profile                                                                     #
# --------------------------------------------------------------------------- #
def test_fetch_profile_sends_bearer_token_and_returns_body(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    admin = {"type": "admin", "id": "123", "name": "Test Admin", "email": "a@test.com"}
    captured: dict[str, Any] = {}

    def fake_get(url: str, *, headers: dict, timeout: Any) -> object:
        captured.update(url=url, headers=headers)
        return _fake_response(200, admin)

    monkeypatch.setattr(requests, "get", fake_get)

    assert intercom_client.fetch_profile("my-token") == admin
    assert captured["url"] == "https://api.intercom.io/me"
    assert captured["headers"] == {
        "Authorization": "Bearer my-token",
        "Accept": "application/json",
    }


def test_fetch_profile_unauthorized_raises_provider_error(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    monkeypatch.setattr(
        requests, "get", lambda url, **kw: _fake_response(401, "Unauthorized")
    )
    with pytest.raises(ProviderApiError, match="Intercom API error") as excinfo:
        intercom_client.fetch_profile("bad-token")
    assert excinfo.value.status == 401


def test_fetch_profile_invalid_json_raises(
    intercom_client: IntercomClient, monkeypatch
) -> None:
    monkeypatch.setattr(
        requests, "get", lambda url, **kw: _fake_response(200, "<html>", bad_json=True)
    )
    with pytest.raises(ProviderApiError):
        intercom_client.fetch_profile("token")


def test_custom_endpoints_and_timeout(monkeypatch) -> None:
    client = IntercomClient(
        client_id="cid",
        client_secret="secret",
        authorize_url="https://sandbox.example/oauth",
        token_url="https://sandbox.example/token",
        api_base_url="https://sandbox.example/api/",
        timeout=3.5,
    )
    captured: dict[str, Any] = {}

    def fake_get(url: str, *, headers: dict, timeout: Any) -> object:
        captured.update(url=url, timeout=timeout)
        return _fake_response(200, {})

    monkeypatch.setattr(requests, "get", fake_get)
    client.fetch_profile("t")

    assert client.authorization_url("s").startswith("https://sandbox.example/oauth?")
    assert captured == {"url": "https://sandbox.example/api/me", "timeout": 3.5}
