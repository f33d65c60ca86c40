"""Browser-based OAuth endpoints.

Handlers are intentionally thin:

1. Read HTTP-layer parameters and wrap the request cookies in a
   :class:`~intercom_oauth.servers.cookie_jar.StarletteCookieJar`.
2. Delegate to :mod:`intercom_oauth.oauth.flow`.
3. Return a Starlette ``Response`` and replay the queued cookie changes on it.

The base path is configurable (default: empty, i.e. ``/login``,
``/callback``...) so that the routes can be mounted under a prefix.

SECURITY NOTE
-------------
• No raw secrets (state, code, access token, client secret) are ever logged.
• Correlation IDs from ``request.state.correlation_id`` are passed to the flow
  loggers.

This module is HTTP-only and MUST remain free from flow logic.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response

from intercom_oauth.oauth.errors import NotAuthenticatedError, OAuthFlowError
from intercom_oauth.oauth.flow import (
    complete_callback,
    load_profile,
    logout,
    start_login,
)
from intercom_oauth.servers.context import AppContext
from intercom_oauth.servers.cookie_jar import StarletteCookieJar
from intercom_oauth.servers.correlation import correlation_id_of

_LOG = logging.getLogger("intercom-oauth.auth.routes")


def error_redirect_url(app_url: str, message: str) -> str:
    """Return the app root URL carrying *message* as the ``error`` parameter."""
    return f"{app_url}/?error={quote(message, safe='')}"


def _redirect(url: str, status: int = 302) -> RedirectResponse:
    resp = RedirectResponse(url, status_code=status)
    resp.headers["Cache-Control"] = "no-store"
    return resp


# --------------------------------------------------------------------------- #
# Public API                                                                  #
# --------------------------------------------------------------------------- #
def register_auth_routes(app: Starlette, ctx: AppContext) -> None:
    """Attach the OAuth endpoints to *app* under ``ctx.auth_base_path``."""
    settings = ctx.settings
    client = ctx.client

    # ----- GET /login ---------------------------------------------------- #
    async def _login(request: Request) -> Response:
        if not settings.is_oauth_configured():
            _LOG.error("Login requested but INTERCOM_CLIENT_ID/SECRET are not set")
            return JSONResponse(
                {"error": "Intercom OAuth is not configured"}, status_code=500
            )

        jar = StarletteCookieJar(request)
        authorize_url = start_login(
            jar,
            client,
            secure=ctx.secure_cookies,
            correlation_id=correlation_id_of(request),
        )
        return jar.apply(_redirect(authorize_url))

    # ----- GET /callback ------------------------------------------------- #
    async def _callback(request: Request) -> Response:
        jar = StarletteCookieJar(request)
        try:
            await run_in_threadpool(
                complete_callback,
                jar,
                client,
                code=request.query_params.get("code"),
                state=request.query_params.get("state"),
                provider_error=request.query_params.get("error"),
                secure=ctx.secure_cookies,
                correlation_id=correlation_id_of(request),
            )
        except OAuthFlowError as exc:
            _LOG.info(
                "OAuth callback failed error=%s correlation_id=%s",
                exc.code,
                correlation_id_of(request) or "-",
            )
            return jar.apply(
                _redirect(error_redirect_url(settings.app_url, exc.user_message))
            )

        _LOG.info(
            "OAuth success correlation_id=%s", correlation_id_of(request) or "-"
        )
        return jar.apply(_redirect(settings.dashboard_url))

    # ----- POST /logout -------------------------------------------------- #
    async def _logout(request: Request) -> Response:
        jar = StarletteCookieJar(request)
        logout(jar, secure=ctx.secure_cookies, correlation_id=correlation_id_of(request))
        # 303 so the browser follows with GET
        return jar.apply(_redirect(f"{settings.app_url}/", status=303))

    # ----- GET /me ------------------------------------------------------- #
    async def _me(request: Request) -> Response:
        jar = StarletteCookieJar(request)
        try:
            profile = await run_in_threadpool(
                load_profile,
                jar,
                client,
                secure=ctx.secure_cookies,
                correlation_id=correlation_id_of(request),
            )
        except NotAuthenticatedError as exc:
            return jar.apply(JSONResponse(exc.to_payload(), status_code=401))
        return jar.apply(JSONResponse(profile))

    app.add_route(ctx.auth_path("/login"), _login, methods=["GET"], name="login")
    app.add_route(
        ctx.auth_path("/callback"), _callback, methods=["GET"], name="callback"
    )
    app.add_route(ctx.auth_path("/logout"), _logout, methods=["POST"], name="logout")
    app.add_route(ctx.auth_path("/me"), _me, methods=["GET"], name="me")
