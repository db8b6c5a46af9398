"""ASGI application factory and dependencies for the food-log server."""

from foodlog.server.app import app, create_app

__all__ = ["app", "create_app"]
