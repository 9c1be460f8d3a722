"""HTTP API for Pulseboard.

Run with:
    uvicorn pulseboard.interfaces.api:create_app --factory
"""

from pulseboard.interfaces.api.routes import create_app, router

__all__ = ["create_app", "router"]
