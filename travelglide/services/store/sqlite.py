"""Reservation store backed by a local SQLite file.

All helpers are asynchronous and use ``asyncio.Lock`` together with
``asyncio.to_thread`` to perform the blocking SQLite operations without
blocking the event loop.
"""

from __future__ import annotations

import asyncio
import json
import sqlite3
from typing import List, Optional

from pydantic import ValidationError

from ...core.enums import ReservationStatus
from ...core.exceptions import (
    InvalidStatusTransitionError,
    ReservationNotFoundError,
    ReservationStoreError,
)
from ...core.models import Reservation
from ...utils.logging import get_logger
from .base import ReservationStore

logger = get_logger("store.sqlite")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS reservations (
    id TEXT PRIMARY KEY,
    user_id TEXT,
    status TEXT NOT NULL,
    payload TEXT NOT NULL
)
"""


def _load(payload: str) -> Reservation:
    try:
        return _load(payload)
    except (ValueError, ValidationError) as e:
        raise ReservationStoreError(f"Corrupt reservation row: {e}")


class SQLiteReservationStore(ReservationStore):
    """Keeps reservations as JSON documents keyed by id."""

    def __init__(self, path: str = "travelglide_reservations.db") -> None:
        self.path = path
        # Single lock protects concurrent access to the database
        self._lock = asyncio.Lock()
        self._ready = False

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.path)

    def _ensure_table_sync(self) -> None:
        conn = self._connect()
        try:
            conn.execute(_SCHEMA)
            conn.commit()
        finally:
            conn.close()

    async def _ensure_table(self) -> None:
        if not self._ready:
            await asyncio.to_thread(self._ensure_table_sync)
            self._ready = True

    async def list(self, user_id: str) -> List[Reservation]:
        await self._ensure_table()

        async with self._lock:
            def _fetch() -> List[str]:
                conn = self._connect()
                try:
                    cur = conn.execute(
                        "SELECT payload FROM reservations WHERE user_id = ? ORDER BY rowid",
                        (user_id,),
                    )
                    return [row[0] for row in cur.fetchall()]
                finally:
                    conn.close()

            try:
                rows = await asyncio.to_thread(_fetch)
            except sqlite3.Error as e:
                raise ReservationStoreError(f"Failed to list reservations: {e}")

        return [_load(row) for row in rows]

    async def get(self, reservation_id: str) -> Optional[Reservation]:
        """Return a single reservation or None."""
        await self._ensure_table()

        async with self._lock:
            def _fetch() -> Optional[str]:
                conn = self._connect()
                try:
                    cur = conn.execute(
                        "SELECT payload FROM reservations WHERE id = ?", (reservation_id,)
                    )
                    row = cur.fetchone()
                finally:
                    conn.close()
                return row[0] if row else None

            try:
                payload = await asyncio.to_thread(_fetch)
            except sqlite3.Error as e:
                raise ReservationStoreError(f"Failed to read reservation: {e}")

        if payload is None:
            return None
        return _load(payload)

    async def create(self, reservation: Reservation) -> Reservation:
        await self._ensure_table()
        payload = json.dumps(reservation.to_wire(), ensure_ascii=False)

        async with self._lock:
            def _write() -> None:
                conn = self._connect()
                try:
                    conn.execute(
                        "INSERT INTO reservations (id, user_id, status, payload) VALUES (?, ?, ?, ?)",
                        (reservation.id, reservation.user_id, reservation.status.value, payload),
                    )
                    conn.commit()
                finally:
                    conn.close()

            try:
                await asyncio.to_thread(_write)
            except sqlite3.IntegrityError:
                raise ReservationStoreError(f"Reservation {reservation.id} already exists")
            except sqlite3.Error as e:
                raise ReservationStoreError(f"Failed to save reservation: {e}")

        logger.debug("stored reservation %s", reservation.id)
        return reservation

    async def update_status(self, reservation_id: str, status: ReservationStatus) -> Reservation:
        await self._ensure_table()
        status = ReservationStatus(status)

        async with self._lock:
            def _update() -> Optional[str]:
                conn = self._connect()
                try:
                    cur = conn.execute(
                        "SELECT payload FROM reservations WHERE id = ?", (reservation_id,)
                    )
                    row = cur.fetchone()
                    if row is None:
                        return None
                    current = _load(row[0])
                    if current.status == ReservationStatus.CANCELLED and status != ReservationStatus.CANCELLED:
                        raise InvalidStatusTransitionError(
                            f"Reservation {reservation_id} is cancelled and cannot become {status.value}"
                        )
                    updated = current.with_status(status)
                    new_payload = json.dumps(updated.to_wire(), ensure_ascii=False)
                    conn.execute(
                        "UPDATE reservations SET status = ?, payload = ? WHERE id = ?",
                        (status.value, new_payload, reservation_id),
                    )
                    conn.commit()
                    return new_payload
                finally:
                    conn.close()

            try:
                payload = await asyncio.to_thread(_update)
            except sqlite3.Error as e:
                raise ReservationStoreError(f"Failed to update reservation: {e}")

        if payload is None:
            raise ReservationNotFoundError(f"Reservation {reservation_id} not found")
        return _load(payload)
