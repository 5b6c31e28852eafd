"""
Reservation store backed by the reservation HTTP API.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ...core.enums import ReservationStatus
from ...core.exceptions import ReservationNotFoundError, ReservationStoreError
from ...core.models import Reservation
from ...utils.logging import get_logger
from .base import ReservationStore

logger = get_logger("store.http")


class HttpReservationStore(ReservationStore):
    """Talks to ``/bookings`` on the reservation API.

    The auth token scopes every call to its owner, so ``list`` does not send
    ``user_id``.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["x-auth-token"] = self.token
        return headers

    async def _make_request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make HTTP request with error handling."""
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=json, headers=self._headers())
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException:
            logger.warning("%s %s timed out", method, url)
            raise ReservationStoreError("Request timed out")
        except httpx.HTTPStatusError as e:
            logger.warning("%s %s failed with %s", method, url, e.response.status_code)
            if e.response.status_code == 404:
                raise ReservationNotFoundError("Reservation not found")
            raise ReservationStoreError(f"HTTP error {e.response.status_code}")
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ReservationStoreError(f"Request failed: {str(e)}")

    @staticmethod
    def _parse(payload: Any) -> Reservation:
        try:
            return Reservation.model_validate(payload)
        except ValidationError as e:
            raise ReservationStoreError(f"Malformed reservation payload: {e.error_count()} errors")

    async def list(self, user_id: str) -> List[Reservation]:
        payload = await self._make_request("GET", "/bookings")
        if not isinstance(payload, list):
            raise ReservationStoreError("Expected a list of reservations")
        return [self._parse(item) for item in payload]

    async def create(self, reservation: Reservation) -> Reservation:
        payload = await self._make_request("POST", "/bookings", json=reservation.to_wire())
        return self._parse(payload)

    async def update_status(self, reservation_id: str, status: ReservationStatus) -> Reservation:
        payload = await self._make_request(
            "PATCH", f"/bookings/{reservation_id}", json={"status": ReservationStatus(status).value}
        )
        return self._parse(payload)
