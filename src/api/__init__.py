"""FastAPI host for the chat assistant.

Endpoints:
    - GET /health: Service health status
    - GET /: NiceGUI chat page (mounted at startup)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
