"""Starlette application setup for the Intercom OAuth demo."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from intercom_oauth.oauth.client import IntercomClient
from intercom_oauth.utils.environment import AppSettings

from .auth import register_auth_routes
from .context import AppContext
from .correlation import CorrelationIdMiddleware
from .pages import register_page_routes

logger = logging.getLogger("intercom-oauth.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def _make_lifespan(ctx: AppContext):
    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        logger.info("Intercom OAuth demo starting (app_url=%s)", ctx.settings.app_url)
        if not ctx.settings.is_oauth_configured():
            logger.warning(
                "INTERCOM_CLIENT_ID / INTERCOM_CLIENT_SECRET not set. "
                "/login will answer 500 until they are configured."
            )
        logger.info(
            "Secure cookies: %s", "ENABLED" if ctx.secure_cookies else "DISABLED"
        )
        try:
            yield
        finally:
            logger.info("Intercom OAuth demo shutdown complete.")

    return lifespan


def create_app(
    settings: AppSettings | None = None,
    *,
    client: IntercomClient | None = None,
    auth_base_path: str = "",
) -> Starlette:
    """Build the ASGI application.

    *settings* default to :meth:`AppSettings.from_env`; *client* defaults to a
    client built from those settings.
    """
    settings = settings or AppSettings.from_env()
    ctx = AppContext(
        settings=settings,
        client=client or IntercomClient.from_settings(settings),
        auth_base_path=auth_base_path.rstrip("/"),
    )

    app = Starlette(
        middleware=[Middleware(CorrelationIdMiddleware)],
        lifespan=_make_lifespan(ctx),
    )
    app.state.context = ctx
    app.add_route("/healthz", health_check, methods=["GET"], name="healthz")
    register_auth_routes(app, ctx)
    register_page_routes(app, ctx)
    return app
