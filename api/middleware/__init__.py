"""Middleware module"""

from .security import SecurityMiddleware

__all__ = [
    "SecurityMiddleware"
]
