"""Structured logging helpers for the OAuth flow.

This module restricts **which** contextual attributes are attached to log
records so that secrets cannot leak through ``extra``.  Only these fields are
ever injected:

- ``correlation_id`` – Per-request identifier set by the correlation middleware
- ``step``           – Flow step (``login``, ``callback``, ``profile``, ``logout``)
- ``state``          – CSRF state value, truncated to its first 6 characters

Usage
-----
>>> from intercom_oauth.oauth.log_utils import get_auth_logger
>>> log = get_auth_logger(step="callback", state="3f2b8e0c-...")
>>> log.info("State validated")
INFO intercom-oauth.oauth step=callback state=3f2b8e ...
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping


class _AuthLoggerAdapter(logging.LoggerAdapter):
    """Inject whitelisted auth context into log records."""

    extra_keys = ("correlation_id", "step", "state")

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        extra_clean: MutableMapping[str, Any] = {}
        for k in self.extra_keys:
            if not extra or extra.get(k) is None:
                continue
            if k == "state":
                extra_clean[k] = str(extra[k])[:6]
            else:
                extra_clean[k] = extra[k]
        super().__init__(logger, extra_clean)

    def process(self, msg: str, kwargs: MutableMapping[str, Any]):
        if "extra" not in kwargs or kwargs["extra"] is None:
            kwargs["extra"] = {}
        # call-site extras win
        for k, v in self.extra.items():
            kwargs["extra"].setdefault(k, v)
        if self.extra:
            context = " ".join(f"{k}={v}" for k, v in self.extra.items())
            msg = f"{msg} [{context}]"
        return msg, kwargs


def get_auth_logger(
    *,
    base_logger_name: str = "intercom-oauth.oauth",
    correlation_id: str | None = None,
    step: str | None = None,
    state: str | None = None,
) -> logging.LoggerAdapter:
    """Return a LoggerAdapter pre-filled with auth context."""
    logger = logging.getLogger(base_logger_name)
    return _AuthLoggerAdapter(
        logger,
        {"correlation_id": correlation_id, "step": step, "state": state},
    )
