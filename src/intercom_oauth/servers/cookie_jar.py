"""Starlette implementation of the OAuth core's ``CookieJar`` protocol.

Reads come from the incoming request.  Writes are queued and replayed onto
whichever response the handler finally returns, so the flow functions can run
before the handler knows which response type it needs.
"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from intercom_oauth.oauth.cookies import CookieSpec


class StarletteCookieJar:
    """Request-scoped cookie view with deferred response mutations."""

    def __init__(self, request: Request) -> None:
        self._values: dict[str, str] = dict(request.cookies)
        self._pending: list[tuple[CookieSpec, str | None]] = []

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, spec: CookieSpec, value: str) -> None:
        self._values[spec.name] = value
        self._pending.append((spec, value))

    def delete(self, spec: CookieSpec) -> None:
        self._values.pop(spec.name, None)
        self._pending.append((spec, None))

    def apply(self, response: Response) -> Response:
        """Write queued cookie changes onto *response* and return it."""
        for spec, value in self._pending:
            if value is None:
                response.delete_cookie(**spec.delete_kwargs())
            else:
                response.set_cookie(**spec.set_kwargs(value))
        self._pending.clear()
        return response
