"""Minimal HTML pages: the landing page and the dashboard.

They exist so the redirects issued by the auth routes land somewhere useful;
styling is deliberately absent.
"""

from __future__ import annotations

import html
import json

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse, Response

from intercom_oauth.oauth.errors import NotAuthenticatedError
from intercom_oauth.oauth.flow import load_profile
from intercom_oauth.servers.context import AppContext
from intercom_oauth.servers.cookie_jar import StarletteCookieJar
from intercom_oauth.servers.correlation import correlation_id_of

_TITLE = "Intercom OAuth Demo"


def _html_page(title: str, body: str, status: int = 200) -> HTMLResponse:
    """Return a tiny HTML page; *body* must already be escaped."""
    content = (
        "<!doctype html><html lang='en'>"
        "<head><meta charset='utf-8'><title>"
        f"{html.escape(title)}</title></head><body><h1>{html.escape(title)}</h1>"
        f"{body}</body></html>"
    )
    return HTMLResponse(content, status_code=status)


def _profile_summary(profile: object) -> str:
    if not isinstance(profile, dict):
        return ""
    rows = []
    for key in ("name", "email", "id", "type"):
        if profile.get(key) is not None:
            rows.append(
                f"<dt>{key}</dt><dd>{html.escape(str(profile[key]))}</dd>"
            )
    app_info = profile.get("app")
    if isinstance(app_info, dict) and app_info.get("name"):
        rows.append(f"<dt>workspace</dt><dd>{html.escape(str(app_info['name']))}</dd>")
    return f"<dl>{''.join(rows)}</dl>" if rows else ""


def register_page_routes(app: Starlette, ctx: AppContext) -> None:
    """Attach ``/`` and ``/dashboard`` to *app*."""

    async def _index(request: Request) -> Response:
        error = request.query_params.get("error")
        parts = []
        if error:
            parts.append(f"<p role='alert'>{html.escape(error)}</p>")
        parts.append(
            f"<p><a href='{html.escape(ctx.auth_path('/login'))}'>"
            "Connect with Intercom</a></p>"
        )
        return _html_page(_TITLE, "".join(parts))

    async def _dashboard(request: Request) -> Response:
        jar = StarletteCookieJar(request)
        try:
            profile = await run_in_threadpool(
                load_profile,
                jar,
                ctx.client,
                secure=ctx.secure_cookies,
                correlation_id=correlation_id_of(request),
            )
        except NotAuthenticatedError:
            return jar.apply(
                RedirectResponse(f"{ctx.settings.app_url}/", status_code=303)
            )

        raw = html.escape(json.dumps(profile, indent=2, sort_keys=True))
        body = (
            _profile_summary(profile)
            + f"<form method='post' action='{html.escape(ctx.auth_path('/logout'))}'>"
            "<button type='submit'>Log out</button></form>"
            f"<details><summary>Raw /me response</summary><pre>{raw}</pre></details>"
        )
        return jar.apply(_html_page(_TITLE, body))

    app.add_route("/", _index, methods=["GET"], name="index")
    app.add_route("/dashboard", _dashboard, methods=["GET"], name="dashboard")
