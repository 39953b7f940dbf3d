"""HTTP surface: app factory, routes and error rendering."""

from .app import create_app

__all__ = ["create_app"]
