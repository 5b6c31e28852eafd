"""
Reservation store interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ...core.enums import ReservationStatus
from ...core.models import Reservation


class ReservationStore(ABC):
    """Remote or local persistence for finalized reservations.

    Implementations raise ``ReservationStoreError`` (or its subclass
    ``ReservationNotFoundError``) on failure. Calls are single-attempt.
    """

    @abstractmethod
    async def list(self, user_id: str) -> List[Reservation]:
        """Return every reservation belonging to ``user_id``."""

    @abstractmethod
    async def create(self, reservation: Reservation) -> Reservation:
        """Persist a new reservation and return the stored copy."""

    @abstractmethod
    async def update_status(self, reservation_id: str, status: ReservationStatus) -> Reservation:
        """Change only the status of ``reservation_id`` and return the stored copy."""
