"""
Booking-related exceptions.
"""

from typing import Dict, Optional


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class InvalidSearchError(BookingFlowError):
    """Raised when origin, destination or travel date is missing."""
    pass


class ValidationFailedError(BookingFlowError):
    """Raised when the passenger form has field violations."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or "Passenger details are invalid: " + ", ".join(sorted(self.errors)))


class SeatUnavailableError(BookingFlowError):
    """Raised when a seat is not offered on the selected bus."""
    pass


class BookingPersistFailedError(BookingFlowError):
    """Raised when the reservation could not be saved. The booking may be retried."""
    pass


class CancelFailedError(BookingFlowError):
    """Raised when the cancellation could not be saved. Local state is unchanged."""
    pass


class AuthRequiredError(BookingFlowError):
    """Raised when a booking action is attempted without a signed-in user."""
    pass
