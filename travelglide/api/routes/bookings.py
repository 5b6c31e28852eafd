"""
Reservation endpoints: fetch-all-for-user, create-one, update-status-by-id.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, status
from pydantic import BaseModel, ValidationError

from ...config import Settings
from ...core.enums import ReservationStatus
from ...core.exceptions import (
    InvalidStatusTransitionError,
    ReservationNotFoundError,
    ReservationStoreError,
)
from ...core.models import Reservation
from ...services.store import SQLiteReservationStore
from ...utils.logging import get_logger

logger = get_logger("api.bookings")


class StatusUpdate(BaseModel):
    """Body of a status update."""
    status: ReservationStatus


class BookingsRouter:
    """Token-authenticated reservation CRUD backed by the SQLite store."""

    def __init__(self, store: SQLiteReservationStore, settings: Settings):
        self.store = store
        self.settings = settings
        self.router = APIRouter()
        self._setup_routes()

    def current_user_id(self, x_auth_token: Optional[str] = Header(default=None)) -> str:
        """Resolve the ``x-auth-token`` header to a user id."""
        if not x_auth_token:
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "No token, authorization denied")
        user_id = self.settings.api_tokens.get(x_auth_token)
        if user_id is None:
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Token is not valid")
        return user_id

    def _setup_routes(self):
        """Setup reservation routes."""

        @self.router.get("")
        async def list_bookings(user_id: str = Depends(self.current_user_id)) -> List[Dict[str, Any]]:
            """Get all bookings for the caller."""
            try:
                reservations = await self.store.list(user_id)
            except ReservationStoreError as e:
                logger.error("list failed for %s: %s", user_id, e)
                raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")
            return [r.to_wire() for r in reservations]

        @self.router.post("", status_code=status.HTTP_201_CREATED)
        async def create_booking(
            payload: Dict[str, Any] = Body(...),
            user_id: str = Depends(self.current_user_id),
        ) -> Dict[str, Any]:
            """Create a booking owned by the caller."""
            data = {k: v for k, v in payload.items() if k not in ("userId", "user_id")}
            try:
                reservation = Reservation.model_validate({**data, "userId": user_id})
            except ValidationError as e:
                detail = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
                raise HTTPException(422, detail)
            try:
                stored = await self.store.create(reservation)
            except ReservationStoreError as e:
                logger.error("create failed for %s: %s", reservation.id, e)
                raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")
            return stored.to_wire()

        @self.router.patch("/{reservation_id}")
        async def update_booking_status(
            reservation_id: str,
            update: StatusUpdate,
            user_id: str = Depends(self.current_user_id),
        ) -> Dict[str, Any]:
            """Update only the status of one of the caller's bookings."""
            try:
                existing = await self.store.get(reservation_id)
                if existing is None or existing.user_id != user_id:
                    raise HTTPException(status.HTTP_404_NOT_FOUND, "Booking not found")
                updated = await self.store.update_status(reservation_id, update.status)
            except ReservationNotFoundError:
                raise HTTPException(status.HTTP_404_NOT_FOUND, "Booking not found")
            except InvalidStatusTransitionError as e:
                raise HTTPException(status.HTTP_409_CONFLICT, str(e))
            except ReservationStoreError as e:
                logger.error("status update failed for %s: %s", reservation_id, e)
                raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")
            return updated.to_wire()
