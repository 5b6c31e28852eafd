"""
Reservation HTTP API for the TravelGlide booking system.
"""

from .app import create_app

__all__ = [
    "create_app",
]
