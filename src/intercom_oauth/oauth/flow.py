"""HTTP-agnostic orchestration of the OAuth authorization-code flow.

Four entry points, one per route:

``start_login``        create the CSRF state cookie, return the authorize URL
``complete_callback``  validate state and code, exchange the code, set session
``load_profile``       read the session, fetch the profile, drop rejected tokens
``logout``             delete the session cookie

Each function works on an injected :class:`~intercom_oauth.oauth.cookies.CookieJar`
and raises :class:`~intercom_oauth.oauth.errors.OAuthFlowError` subclasses on
failure.  The web layer decides how those failures look to the user.
"""

from __future__ import annotations

from typing import Any

from intercom_oauth.oauth.client import IntercomClient
from intercom_oauth.oauth.cookies import (
    CookieJar,
    SESSION_COOKIE,
    STATE_COOKIE,
    session_cookie,
    state_cookie,
)
from intercom_oauth.oauth.errors import (
    InvalidStateError,
    MissingCodeError,
    NotAuthenticatedError,
    ProviderApiError,
    TokenExchangeError,
)
from intercom_oauth.oauth.log_utils import get_auth_logger
from intercom_oauth.oauth.state import generate_state, states_match


def start_login(
    cookies: CookieJar,
    client: IntercomClient,
    *,
    secure: bool,
    correlation_id: str | None = None,
) -> str:
    """Store a new CSRF state in *cookies* and return the authorize URL."""
    state = generate_state()
    cookies.set(state_cookie(secure=secure), state)
    get_auth_logger(step="login", state=state, correlation_id=correlation_id).info(
        "Starting OAuth login"
    )
    return client.authorization_url(state)


def complete_callback(
    cookies: CookieJar,
    client: IntercomClient,
    *,
    code: str | None,
    state: str | None,
    secure: bool,
    provider_error: str | None = None,
    correlation_id: str | None = None,
) -> str:
    """Validate the callback and store the resulting access token.

    The state cookie is deleted before anything else, so a state value can be
    used at most once whatever the outcome.

    Returns
    -------
    str
        The access token now stored in the session cookie.

    Raises
    ------
    InvalidStateError
        Stored or received state missing, or the two differ.
    MissingCodeError
        No ``code`` parameter; a provider ``error`` is only logged.
    TokenExchangeError
        The provider did not return an access token.
    """
    log = get_auth_logger(step="callback", state=state, correlation_id=correlation_id)

    stored_state = cookies.get(STATE_COOKIE)
    cookies.delete(state_cookie(secure=secure))

    if not states_match(stored_state, state):
        log.warning(
            "Rejected callback: state %s",
            "cookie missing" if not stored_state else "mismatch",
        )
        raise InvalidStateError()

    if not code:
        if provider_error:
            log.warning("Provider returned error instead of code: %s", provider_error)
        else:
            log.warning("Rejected callback: no authorization code")
        raise MissingCodeError()

    try:
        token = client.exchange_code_for_token(code)
    except TokenExchangeError as exc:
        log.warning("Token exchange failed: %s", exc)
        raise

    cookies.set(session_cookie(secure=secure), token)
    log.info("OAuth callback completed; session cookie set")
    return token


def load_profile(
    cookies: CookieJar,
    client: IntercomClient,
    *,
    secure: bool,
    correlation_id: str | None = None,
) -> Any:
    """Return the profile for the session token held in *cookies*.

    Raises
    ------
    NotAuthenticatedError
        No session cookie (no outbound call is made), or the provider rejected
        the token.  In the latter case the session cookie is deleted.
    """
    token = cookies.get(SESSION_COOKIE)
    if not token:
        raise NotAuthenticatedError()

    log = get_auth_logger(step="profile", correlation_id=correlation_id)
    try:
        return client.fetch_profile(token)
    except ProviderApiError as exc:
        log.warning("Profile fetch failed, dropping session: %s", exc)
        cookies.delete(session_cookie(secure=secure))
        raise NotAuthenticatedError(user_message="Token invalid or revoked") from exc


def logout(
    cookies: CookieJar, *, secure: bool, correlation_id: str | None = None
) -> None:
    """Delete the session cookie. Safe to call without a session."""
    cookies.delete(session_cookie(secure=secure))
    get_auth_logger(step="logout", correlation_id=correlation_id).info("Logged out")
