"""Command line interface for emojigen."""

from .app import app

__all__ = ["app"]
