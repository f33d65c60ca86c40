"""Intercom OAuth2 authorization-code demo.

``intercom_oauth.oauth`` holds the HTTP-agnostic flow; ``intercom_oauth.servers``
exposes it as a Starlette application.
"""

__version__ = "0.1.0"
