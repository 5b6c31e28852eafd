"""
Pick the reservation store configured for this deployment.
"""

from typing import Optional

from ...config import Settings, get_settings
from .base import ReservationStore
from .http import HttpReservationStore
from .sqlite import SQLiteReservationStore


def get_reservation_store(settings: Optional[Settings] = None) -> ReservationStore:
    """Build the single store backing this deployment."""
    settings = settings or get_settings()
    backend = settings.reservation_backend.strip().lower()
    if backend == "api":
        return HttpReservationStore(
            settings.reservation_api_base,
            token=settings.reservation_api_token,
            timeout=settings.reservation_api_timeout,
        )
    if backend == "sqlite":
        return SQLiteReservationStore(settings.reservation_db_path)
    raise ValueError(f"Unknown reservation backend: {settings.reservation_backend!r}")
