"""
API routes.
"""

from .bookings import BookingsRouter

__all__ = [
    "BookingsRouter",
]
