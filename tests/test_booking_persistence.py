import asyncio
import json
import re
from datetime import date
from unittest.mock import AsyncMock

import pytest

from travelglide.core.enums import BookingStep, PaymentMethod, ReservationStatus
from travelglide.core.exceptions import (
    AuthRequiredError,
    BookingFlowError,
    BookingPersistFailedError,
    CancelFailedError,
    ReservationStoreError,
)
from travelglide.core.models import Reservation, User


def _reservation(reservation_id="BK-111111", status=ReservationStatus.CONFIRMED, bus=None):
    return Reservation(
        id=reservation_id,
        user_id="user-1",
        origin="New York",
        destination="Boston",
        travel_date=date(2025, 5, 20),
        selected_bus=bus,
        selected_seats=list(bus.seats[:2]) if bus else [],
        total_price=950,
        booking_id=reservation_id,
        status=status,
    )


@pytest.mark.asyncio
async def test_complete_booking_persists_and_assigns_id(payment_session, mock_store, notifications):
    reservation = await payment_session.complete_booking()

    assert re.fullmatch(r"BK-\d{6}", reservation.id)
    assert 100000 <= int(reservation.id[3:]) <= 999999
    assert reservation.booking_id == reservation.id
    assert reservation.status == ReservationStatus.CONFIRMED
    assert reservation.user_id == "user-1"
    assert reservation.total_price == 950
    assert [s.number for s in reservation.selected_seats] == ["01", "02"]

    mock_store.create.assert_awaited_once()
    assert payment_session.draft.booking_id == reservation.id
    assert payment_session.is_confirmed
    assert payment_session.reservations == (reservation,)
    assert notifications[-1].title == "Booking Completed"


@pytest.mark.asyncio
async def test_complete_booking_uses_injected_generator(payment_session):
    payment_session.id_generator = lambda: "BK-123456"
    reservation = await payment_session.complete_booking()
    assert reservation.id == "BK-123456"


@pytest.mark.asyncio
async def test_failed_create_leaves_draft_untouched(payment_session, mock_store, notifications):
    mock_store.create.side_effect = ReservationStoreError("HTTP error 500")
    before = json.dumps(payment_session.summary())

    with pytest.raises(BookingPersistFailedError):
        await payment_session.complete_booking()

    assert payment_session.draft.booking_id is None
    assert json.dumps(payment_session.summary()) == before
    assert payment_session.step == BookingStep.PAYMENT
    assert payment_session.reservations == ()
    assert notifications[-1].title == "Booking Error"
    assert notifications[-1].is_error


@pytest.mark.asyncio
async def test_complete_booking_can_be_retried_after_failure(payment_session, mock_store):
    calls = []

    async def flaky(reservation):
        calls.append(reservation.id)
        if len(calls) == 1:
            raise ReservationStoreError("Request timed out")
        return reservation

    mock_store.create = AsyncMock(side_effect=flaky)

    with pytest.raises(BookingPersistFailedError):
        await payment_session.complete_booking()
    reservation = await payment_session.complete_booking()

    assert len(calls) == 2
    assert payment_session.draft.booking_id == reservation.id == calls[1]


@pytest.mark.asyncio
async def test_complete_booking_twice_is_rejected(payment_session, mock_store):
    await payment_session.complete_booking()
    with pytest.raises(BookingFlowError):
        await payment_session.complete_booking()
    assert mock_store.create.await_count == 1


@pytest.mark.asyncio
async def test_complete_booking_requires_payment_step(session, bus, mock_store):
    session.set_search_params("New York", "Boston", date(2025, 5, 20))
    session.select_bus(bus)
    session.toggle_seat_selection(bus.seats[0])
    with pytest.raises(BookingFlowError):
        await session.complete_booking()
    mock_store.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_complete_booking_records_payment_method(payment_session, mock_store):
    payment_session.set_payment_method("cash")
    reservation = await payment_session.complete_booking()
    assert reservation.payment_method == PaymentMethod.CASH


@pytest.mark.asyncio
async def test_cancel_booking_changes_only_status(session, mock_store, bus, notifications):
    original = _reservation(bus=bus)
    mock_store.list.return_value = [original]
    await session.refresh_reservations()

    cancelled = await session.cancel_booking(original.id)

    mock_store.update_status.assert_awaited_once_with(original.id, ReservationStatus.CANCELLED)
    assert cancelled.status == ReservationStatus.CANCELLED
    assert cancelled.model_dump(exclude={"status"}) == original.model_dump(exclude={"status"})
    assert session.find_reservation(original.id) == cancelled
    assert notifications[-1].title == "Booking Cancelled"


@pytest.mark.asyncio
async def test_cancel_already_cancelled_is_noop(session, mock_store):
    mock_store.list.return_value = [_reservation(status=ReservationStatus.CANCELLED)]
    await session.refresh_reservations()

    assert await session.cancel_booking("BK-111111") is None
    assert await session.cancel_booking("BK-999999") is None
    mock_store.update_status.assert_not_awaited()


@pytest.mark.asyncio
async def test_cancel_twice_second_call_is_noop(session, mock_store):
    mock_store.list.return_value = [_reservation()]
    await session.refresh_reservations()

    assert await session.cancel_booking("BK-111111") is not None
    assert await session.cancel_booking("BK-111111") is None
    assert mock_store.update_status.await_count == 1


@pytest.mark.asyncio
async def test_failed_cancel_keeps_cached_status(session, mock_store, notifications):
    mock_store.list.return_value = [_reservation()]
    mock_store.update_status.side_effect = ReservationStoreError("HTTP error 500")
    await session.refresh_reservations()

    with pytest.raises(CancelFailedError):
        await session.cancel_booking("BK-111111")

    assert session.find_reservation("BK-111111").status == ReservationStatus.CONFIRMED
    assert notifications[-1].is_error

    # still usable afterwards
    mock_store.update_status.side_effect = None
    assert (await session.cancel_booking("BK-111111")).status == ReservationStatus.CANCELLED


@pytest.mark.asyncio
async def test_refresh_replaces_cache(session, mock_store, user):
    mock_store.list.return_value = [_reservation("BK-111111"), _reservation("BK-222222")]
    result = await session.refresh_reservations()
    mock_store.list.assert_awaited_once_with(user.id)
    assert [r.id for r in result] == ["BK-111111", "BK-222222"]


@pytest.mark.asyncio
async def test_refresh_failure_keeps_cache_and_notifies(session, mock_store, notifications):
    mock_store.list.return_value = [_reservation()]
    await session.refresh_reservations()
    mock_store.list.side_effect = ReservationStoreError("down")

    result = await session.refresh_reservations()

    assert [r.id for r in result] == ["BK-111111"]
    assert notifications[-1].description == "Failed to fetch your bookings"


@pytest.mark.asyncio
async def test_only_one_fetch_in_flight(session, mock_store):
    release = asyncio.Event()

    async def slow_list(user_id):
        await release.wait()
        return [_reservation()]

    mock_store.list = AsyncMock(side_effect=slow_list)

    first = asyncio.create_task(session.refresh_reservations())
    await asyncio.sleep(0)
    second = await session.refresh_reservations()
    release.set()
    first_result = await first

    assert second == ()
    assert [r.id for r in first_result] == ["BK-111111"]
    assert mock_store.list.await_count == 1


@pytest.mark.asyncio
async def test_auth_change_fetches_then_clears(session, auth, mock_store, user):
    mock_store.list.return_value = [_reservation()]
    await session.on_auth_changed()
    assert len(session.reservations) == 1

    auth.sign_out()
    await session.on_auth_changed()
    assert session.reservations == ()
    assert mock_store.list.await_count == 1


@pytest.mark.asyncio
async def test_fetch_finishing_after_sign_out_is_discarded(session, auth, mock_store):
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow_list(user_id):
        started.set()
        await release.wait()
        return [_reservation()]

    mock_store.list.side_effect = slow_list
    pending = asyncio.create_task(session.on_auth_changed())
    await started.wait()

    auth.sign_out()
    await session.on_auth_changed()
    release.set()
    await pending

    assert session.reservations == ()


@pytest.mark.asyncio
async def test_fetch_finishing_after_user_switch_is_discarded(session, auth, mock_store):
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow_list(user_id):
        started.set()
        await release.wait()
        return [_reservation()]

    mock_store.list.side_effect = slow_list
    pending = asyncio.create_task(session.refresh_reservations())
    await started.wait()

    auth.sign_in(User(id="user-2", email="other@example.com", name="Other User"))
    release.set()
    await pending

    assert session.reservations == ()


@pytest.mark.asyncio
async def test_listing_requires_sign_in(session, auth, mock_store):
    auth.sign_out()
    with pytest.raises(AuthRequiredError):
        await session.refresh_reservations()
    mock_store.list.assert_not_awaited()


@pytest.mark.asyncio
async def test_reset_after_booking_keeps_reservations(payment_session):
    reservation = await payment_session.complete_booking()
    payment_session.reset_booking()
    assert payment_session.step == BookingStep.SEARCH
    assert payment_session.draft.booking_id is None
    assert payment_session.reservations == (reservation,)


@pytest.mark.asyncio
async def test_download_ticket_writes_text_file(payment_session, settings, notifications):
    payment_session.set_payment_method("cash")
    reservation = await payment_session.complete_booking()

    path = payment_session.download_ticket(reservation.id)

    assert path.name == f"TravelGlide-Ticket-{reservation.id}.txt"
    assert str(path).startswith(settings.tickets_dir)
    content = path.read_text(encoding="utf-8")
    assert f"BOOKING ID: {reservation.id}" in content
    assert "FROM: New York" in content
    assert "TO: Boston" in content
    assert "DATE: 2025-05-20" in content
    assert "TIME: 07:00 - 11:30" in content
    assert "PASSENGER: Jane Doe" in content
    assert "SEAT(S): 01, 02" in content
    assert "TOTAL PAID: ₹950.00" in content
    assert "PAYMENT METHOD: cash" in content
    assert notifications[-1].title == "Ticket Downloaded"


def test_download_unknown_ticket_is_noop(session, tmp_path):
    assert session.download_ticket("BK-000000") is None
    assert not (tmp_path / "tickets").exists()
