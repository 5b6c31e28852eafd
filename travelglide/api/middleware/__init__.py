"""
API middleware modules.
"""

from .logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
