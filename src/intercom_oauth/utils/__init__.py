"""Utility helpers: environment configuration and logging."""

from .environment import AppSettings
from .logging import mask_sensitive, setup_logging

__all__ = ["AppSettings", "mask_sensitive", "setup_logging"]
