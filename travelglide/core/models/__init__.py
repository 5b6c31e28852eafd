"""
Core data models for the TravelGlide booking system.
"""

from .booking import Seat, Bus, Passenger, BookingDraft, Reservation, Offer
from .user import User
from .notification import Notification

__all__ = [
    "Seat",
    "Bus",
    "Passenger",
    "BookingDraft",
    "Reservation",
    "Offer",
    "User",
    "Notification",
]
