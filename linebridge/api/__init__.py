"""
API Module — FastAPI Host

Public API:
- create_app: Application factory
- app: Default application instance (uvicorn linebridge.api.main:app)
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
