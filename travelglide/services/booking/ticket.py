"""
Plain-text e-ticket rendering and export.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from ...core.models import Reservation
from ...utils.logging import get_logger
from .pricing import format_amount

logger = get_logger("ticket")

TICKET_TEMPLATE = """===== {banner} E-TICKET =====

BOOKING ID: {booking_id}

FROM: {origin}
TO: {destination}
DATE: {travel_date}
TIME: {departure} - {arrival}

PASSENGER: {passenger}
SEAT(S): {seats}

TOTAL PAID: {total}
PAYMENT METHOD: {payment_method}

==== Thank you for choosing {app_name} ====
"""


class TicketExporter(Protocol):
    """Receives the rendered ticket and saves it somewhere."""

    def save(self, filename: str, content: str) -> Any:
        ...


class FileTicketExporter:
    """Writes tickets into a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def save(self, filename: str, content: str) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_text(content, encoding="utf-8")
        logger.info("ticket written to %s", path)
        return path


def ticket_filename(booking_id: str, app_name: str = "TravelGlide") -> str:
    return f"{app_name}-Ticket-{booking_id}.txt"


def render_ticket(reservation: Reservation, app_name: str = "TravelGlide", currency: str = "₹") -> str:
    """Render the fixed-format ticket for ``reservation``."""
    bus = reservation.selected_bus
    return TICKET_TEMPLATE.format(
        banner=app_name.upper(),
        booking_id=reservation.booking_id or reservation.id,
        origin=reservation.origin,
        destination=reservation.destination,
        travel_date=reservation.travel_date.isoformat() if reservation.travel_date else "N/A",
        departure=(bus.departure_time if bus else "") or "N/A",
        arrival=(bus.arrival_time if bus else "") or "N/A",
        passenger=reservation.passenger.name,
        seats=", ".join(reservation.seat_numbers),
        total=format_amount(reservation.total_price, currency),
        payment_method=reservation.payment_method.value,
        app_name=app_name,
    )
