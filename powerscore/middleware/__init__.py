"""
Middleware package for the application.
"""

from powerscore.middleware.request_context import RequestContextMiddleware

__all__ = [
    "RequestContextMiddleware",
]
