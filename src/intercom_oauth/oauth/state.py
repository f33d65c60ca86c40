"""State parameter helpers for the OAuth 2.0 web-flow.

The *state* parameter protects the user against CSRF on the callback.  The
value itself is an opaque UUID4 string: it is handed to the browser in a
short-lived cookie and echoed back by the provider as the ``state`` query
parameter.  The callback accepts the request only when both copies are present
and identical.

Logging
-------
Only the first characters of a state value are ever logged.
"""

from __future__ import annotations

import hmac
import logging
import uuid

from intercom_oauth.utils.logging import mask_sensitive

_LOG = logging.getLogger("intercom-oauth.oauth.state")


def generate_state() -> str:
    """Return a fresh, unpredictable state value."""
    state = str(uuid.uuid4())
    _LOG.debug("Generated state=%s", mask_sensitive(state, 6))
    return state


def states_match(stored: str | None, received: str | None) -> bool:
    """Return *True* if both values are present and identical.

    The comparison runs in constant time so the stored value cannot be
    recovered through response timing.
    """
    if not stored or not received:
        return False
    return hmac.compare_digest(stored.encode("utf-8"), received.encode("utf-8"))
