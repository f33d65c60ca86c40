"""OAuth core package.

This namespace hosts the **HTTP-agnostic** building blocks of the Intercom
authorization-code flow.

Sub-modules
-----------
client
    Intercom provider client (authorize URL, token exchange, profile fetch).
state
    CSRF ``state`` generation and comparison.
cookies
    Cookie names/attributes and the :class:`CookieJar` protocol.
flow
    Login, callback, profile and logout orchestration.
errors
    Exception types raised by the flow.
log_utils
    Structured logging helpers (thin wrapper around :pymod:`logging`).

All public objects are re-exported here for convenience.
"""

from __future__ import annotations

from .client import IntercomClient  # noqa: F401
from .cookies import (  # noqa: F401
    SESSION_COOKIE,
    STATE_COOKIE,
    CookieJar,
    CookieSpec,
)
from .errors import (  # noqa: F401
    InvalidStateError,
    MissingCodeError,
    NotAuthenticatedError,
    OAuthFlowError,
    ProviderApiError,
    TokenExchangeError,
)
from .flow import complete_callback, load_profile, logout, start_login  # noqa: F401
from .log_utils import get_auth_logger  # noqa: F401
from .state import generate_state, states_match  # noqa: F401

__all__ = [
    # client
    "IntercomClient",
    # cookies
    "SESSION_COOKIE",
    "STATE_COOKIE",
    "CookieJar",
    "CookieSpec",
    # errors
    "OAuthFlowError",
    "InvalidStateError",
    "MissingCodeError",
    "TokenExchangeError",
    "ProviderApiError",
    "NotAuthenticatedError",
    # flow
    "start_login",
    "complete_callback",
    "load_profile",
    "logout",
    # state
    "generate_state",
    "states_match",
    # logging helpers
    "get_auth_logger",
]
