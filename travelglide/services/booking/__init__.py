"""
Booking service module.
"""

from .session import BookingSession
from .data import CatalogProvider
from .pricing import SERVICE_FEE, display_total, seats_total
from .ticket import FileTicketExporter, TicketExporter, render_ticket, ticket_filename

__all__ = [
    "BookingSession",
    "CatalogProvider",
    "SERVICE_FEE",
    "display_total",
    "seats_total",
    "FileTicketExporter",
    "TicketExporter",
    "render_ticket",
    "ticket_filename",
]
