"""JSON API for forgefit."""

from .app import create_app

__all__ = ["create_app"]
