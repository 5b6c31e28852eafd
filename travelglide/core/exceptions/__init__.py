"""
Custom exceptions for the TravelGlide booking system.
"""

from .booking import (
    BookingFlowError,
    InvalidSearchError,
    ValidationFailedError,
    SeatUnavailableError,
    BookingPersistFailedError,
    CancelFailedError,
    AuthRequiredError,
)
from .store import ReservationStoreError, ReservationNotFoundError, InvalidStatusTransitionError

__all__ = [
    "BookingFlowError",
    "InvalidSearchError",
    "ValidationFailedError",
    "SeatUnavailableError",
    "BookingPersistFailedError",
    "CancelFailedError",
    "AuthRequiredError",
    "ReservationStoreError",
    "ReservationNotFoundError",
    "InvalidStatusTransitionError",
]
