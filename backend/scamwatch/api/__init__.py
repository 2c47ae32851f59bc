"""HTTP API for the dashboard, entry table and research form."""

from scamwatch.api.server import create_app

__all__ = ["create_app"]
