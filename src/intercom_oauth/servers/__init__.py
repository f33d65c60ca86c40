"""HTTP layer: Starlette app factory, routes and middleware."""

from .main import create_app

__all__ = ["create_app"]
