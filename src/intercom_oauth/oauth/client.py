"""Intercom provider client.

Builds the authorization URL and performs the two server-to-server calls of
the flow:

* ``POST <token_url>``  – authorization code → access token
* ``GET  <api>/me``     – access token → admin profile

The client holds no state besides its configuration.  Calls are made once;
nothing is retried.  Tokens, codes and the client secret are never logged.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import requests

from intercom_oauth.oauth.errors import ProviderApiError, TokenExchangeError
from intercom_oauth.utils.environment import AppSettings

_LOG = logging.getLogger("intercom-oauth.oauth.client")


class IntercomClient:
    """Stateless request/response mapping for the Intercom OAuth endpoints."""

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        authorize_url: str,
        token_url: str,
        api_base_url: str,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.client_id = client_id
        self._client_secret = client_secret
        self.authorize_base = authorize_url
        self.token_url = token_url
        self.api_base_url = api_base_url.rstrip("/")
        self.timeout = timeout
        self._http = session or requests

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "IntercomClient":
        return cls(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            authorize_url=settings.authorize_url,
            token_url=settings.token_url,
            api_base_url=settings.api_base_url,
            timeout=settings.http_timeout,
        )

    @property
    def profile_url(self) -> str:
        return f"{self.api_base_url}/me"

    # ------------------------------------------------------------------ #
    # Authorization URL                                                  #
    # ------------------------------------------------------------------ #
    def authorization_url(self, state: str) -> str:
        """Return the provider URL the browser is redirected to."""
        query = urlencode({"client_id": self.client_id, "state": state})
        return f"{self.authorize_base}?{query}"

    # ------------------------------------------------------------------ #
    # Token exchange                                                     #
    # ------------------------------------------------------------------ #
    def exchange_code_for_token(self, code: str) -> str:
        """Exchange *code* for an access token.

        Raises
        ------
        TokenExchangeError
            On transport failure, a non-2xx status, or a response without
            ``access_token``.
        """
        payload = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self._client_secret,
        }
        try:
            resp = self._http.post(
                self.token_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TokenExchangeError(f"Token request failed: {exc}") from exc

        if not resp.ok:
            raise TokenExchangeError(
                f"Token exchange failed: {resp.status_code}", status=resp.status_code
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise TokenExchangeError(
                "Token response is not valid JSON", status=resp.status_code
            ) from exc

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise TokenExchangeError(
                "Token response missing access_token", status=resp.status_code
            )

        _LOG.info("Exchanged authorization code for access token")
        return str(access_token)

    # ------------------------------------------------------------------ #
    # Profile                                                            #
    # ------------------------------------------------------------------ #
    def fetch_profile(self, access_token: str) -> Any:
        """Return the authenticated admin's profile document, unmodified.

        Raises
        ------
        ProviderApiError
            On transport failure, a non-2xx status, or an unparseable body.
        """
        try:
            resp = self._http.get(
                self.profile_url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ProviderApiError(f"Intercom API request failed: {exc}") from exc

        if not resp.ok:
            raise ProviderApiError(
                f"Intercom API error: {resp.status_code}", status=resp.status_code
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise ProviderApiError(
                "Intercom API returned invalid JSON", status=resp.status_code
            ) from exc
