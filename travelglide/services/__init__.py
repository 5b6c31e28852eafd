"""
Service layer for the TravelGlide booking system.
"""

from .auth import AuthGate, LocalAuthGate
from .booking import BookingSession, CatalogProvider
from .store import (
    ReservationStore,
    HttpReservationStore,
    SQLiteReservationStore,
    get_reservation_store,
)

__all__ = [
    "AuthGate",
    "LocalAuthGate",
    "BookingSession",
    "CatalogProvider",
    "ReservationStore",
    "HttpReservationStore",
    "SQLiteReservationStore",
    "get_reservation_store",
]
