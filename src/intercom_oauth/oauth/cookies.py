"""Cookie definitions and the cookie-jar abstraction used by the flow core.

The flow functions in :mod:`intercom_oauth.oauth.flow` never touch an HTTP
framework directly.  They read and write cookies through a :class:`CookieJar`,
which the web layer implements on top of Starlette requests/responses and
tests implement with a plain dictionary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Literal, Protocol

STATE_COOKIE: Final[str] = "oauth_state"
SESSION_COOKIE: Final[str] = "session_token"

STATE_TTL_SECONDS: Final[int] = 600


@dataclass(frozen=True, slots=True)
class CookieSpec:
    """Attributes of a cookie, independent of its value."""

    name: str
    max_age: int | None = None
    httponly: bool = True
    secure: bool = False
    samesite: Literal["lax", "strict", "none"] = "lax"
    path: str = "/"

    def set_kwargs(self, value: str) -> dict[str, Any]:
        """Keyword arguments for ``Response.set_cookie``."""
        return {
            "key": self.name,
            "value": value,
            "max_age": self.max_age,
            "httponly": self.httponly,
            "secure": self.secure,
            "samesite": self.samesite,
            "path": self.path,
        }

    def delete_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``Response.delete_cookie``."""
        return {
            "key": self.name,
            "path": self.path,
            "secure": self.secure,
            "httponly": self.httponly,
            "samesite": self.samesite,
        }


def state_cookie(*, secure: bool) -> CookieSpec:
    return CookieSpec(name=STATE_COOKIE, max_age=STATE_TTL_SECONDS, secure=secure)


def session_cookie(*, secure: bool) -> CookieSpec:
    # No max_age: the token lives for the browser session only.
    return CookieSpec(name=SESSION_COOKIE, secure=secure)


class CookieJar(Protocol):
    """Key-value view over the cookies of one request/response pair."""

    def get(self, name: str) -> str | None: ...

    def set(self, spec: CookieSpec, value: str) -> None: ...

    def delete(self, spec: CookieSpec) -> None: ...
