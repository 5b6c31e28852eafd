"""
Enums for the TravelGlide booking system.
"""

from .booking import BookingStep, ReservationStatus, PaymentMethod

__all__ = [
    "BookingStep",
    "ReservationStatus",
    "PaymentMethod",
]
