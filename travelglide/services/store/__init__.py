"""
Reservation persistence backends.
"""

from .base import ReservationStore
from .http import HttpReservationStore
from .sqlite import SQLiteReservationStore
from .factory import get_reservation_store

__all__ = [
    "ReservationStore",
    "HttpReservationStore",
    "SQLiteReservationStore",
    "get_reservation_store",
]
