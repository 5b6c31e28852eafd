"""
Fare rules.

The draft total is the plain sum of seat prices. The service fee is only added
on checkout and confirmation screens.
"""

from typing import Iterable

from ...core.models import Seat

SERVICE_FEE = 50.0


def seats_total(seats: Iterable[Seat]) -> float:
    """Sum of seat prices."""
    return sum((seat.price for seat in seats), 0.0)


def display_total(total_price: float, service_fee: float = SERVICE_FEE) -> float:
    """Total shown at checkout: seat total plus the service fee."""
    return total_price + service_fee


def format_amount(amount: float, symbol: str = "") -> str:
    return f"{symbol}{amount:.2f}"
