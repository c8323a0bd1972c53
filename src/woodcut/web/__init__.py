"""FastAPI REST API for cut layout planning.

Usage:
    uvicorn woodcut.web:app --reload
"""

from woodcut.web.app import app, create_app

__all__ = ["app", "create_app"]
