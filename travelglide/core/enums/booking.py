"""
Booking-related enums.
"""

from enum import Enum, IntEnum


class BookingStep(IntEnum):
    """Wizard steps, numbered the way the booking screens are."""

    SEARCH = 1
    SELECT_BUS = 2
    SELECT_SEATS = 3
    PASSENGER_INFO = 4
    PAYMENT = 5


class ReservationStatus(str, Enum):
    """Lifecycle status of a persisted reservation."""

    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    PENDING = "Pending"


class PaymentMethod(str, Enum):
    """Payment method chosen at checkout."""

    ONLINE = "online"
    CASH = "cash"

    @classmethod
    def from_value(cls, value: "PaymentMethod | str") -> "PaymentMethod":
        """Normalize a payment method given as enum or string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError(f"Unsupported payment method: {value!r}")

