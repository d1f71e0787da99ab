"""
Auth API package.

Contains the registration and user listing routes, mounted at /api/auth.
"""

from src.api.auth.routes import router

__all__ = ["router"]
