"""Exception types raised by the OAuth flow core.

Only lightweight, **data-carrying** exceptions live here so that the HTTP layer
can transform them into redirects or JSON error responses.  Every exception
exposes a ``user_message`` that is safe to show in a browser; HTTP statuses are
kept for logs but never tokens, codes or secrets.
"""

from __future__ import annotations


class OAuthFlowError(RuntimeError):
    """Base class for every terminal failure of the OAuth flow."""

    code: str = "oauth_error"
    user_message: str = "OAuth flow failed"

    def __init__(
        self, message: str | None = None, *, user_message: str | None = None
    ) -> None:
        if user_message:
            self.user_message = user_message
        super().__init__(message or self.user_message)

    def to_payload(self) -> dict[str, str]:
        """Return a JSON-serialisable payload **without secrets**.

        ``error`` holds the user-facing message, ``code`` the stable identifier.
        """
        return {"error": self.user_message, "code": self.code}


class InvalidStateError(OAuthFlowError):
    """Raised when the CSRF state cookie is missing or does not match."""

    code = "invalid_state"
    user_message = "Invalid state parameter"


class MissingCodeError(OAuthFlowError):
    """Raised when the callback carries no authorization code."""

    code = "missing_code"
    user_message = "No authorization code received"


class _UpstreamError(OAuthFlowError):
    def __init__(
        self,
        message: str | None = None,
        *,
        status: int | None = None,
        user_message: str | None = None,
    ) -> None:
        super().__init__(message, user_message=user_message)
        self.status: int | None = status

    def to_payload(self) -> dict[str, str]:
        payload = super().to_payload()
        if self.status is not None:
            payload["status"] = str(self.status)
        return payload


class TokenExchangeError(_UpstreamError):
    """Raised when the provider rejects (or fails) the code-for-token exchange."""

    code = "token_exchange_failed"
    user_message = "Failed to exchange authorization code"


class ProviderApiError(_UpstreamError):
    """Raised when an authenticated provider API call does not succeed."""

    code = "provider_api_error"
    user_message = "Intercom API error"


class NotAuthenticatedError(OAuthFlowError):
    """Raised when a request has no usable session token."""

    code = "not_authenticated"
    user_message = "Not authenticated"
