"""
Utility modules for the TravelGlide booking system.
"""

from .ids import BookingIdGenerator
from .logging import configure_logging, get_logger
from .validation import ValidationUtils

__all__ = [
    "BookingIdGenerator",
    "configure_logging",
    "get_logger",
    "ValidationUtils",
]
