"""
Reservation store exceptions.
"""


class ReservationStoreError(Exception):
    """Base exception for reservation store failures."""
    pass


class ReservationNotFoundError(ReservationStoreError):
    """Raised when a reservation id is unknown to the store."""
    pass


class InvalidStatusTransitionError(ReservationStoreError):
    """Raised when a status change would reopen a cancelled reservation."""
    pass
