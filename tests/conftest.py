"""
Pytest configuration and fixtures.
"""

from datetime import date
from unittest.mock import AsyncMock, Mock

import pytest

from travelglide.config import Settings
from travelglide.core.models import Bus, Seat, User
from travelglide.services.auth import LocalAuthGate
from travelglide.services.booking import BookingSession
from travelglide.services.store import ReservationStore
from travelglide.utils.event_log import set_log_path
from travelglide.utils.ids import BookingIdGenerator


@pytest.fixture(autouse=True)
def event_log_path(tmp_path):
    """Keep event log writes inside the test's temp dir."""
    path = tmp_path / "events.jsonl"
    set_log_path(path)
    return path


@pytest.fixture
def settings(tmp_path):
    return Settings(
        tickets_dir=str(tmp_path / "tickets"),
        reservation_db_path=str(tmp_path / "reservations.db"),
        api_tokens={"token-1": "user-1", "token-2": "user-2"},
    )


@pytest.fixture
def user():
    return User(id="user-1", email="user@example.com", name="Demo User")


@pytest.fixture
def auth(user):
    return LocalAuthGate(user)


@pytest.fixture
def bus():
    """Express bus with two free seats (450, 500) and one booked seat."""
    return Bus(
        id="bus-001",
        name="TravelGlide Express",
        departure_time="07:00",
        arrival_time="11:30",
        duration="4h 30m",
        price=450,
        seats_available=2,
        rating=4.8,
        bus_type="Volvo AC Sleeper",
        amenities=["WiFi"],
        seats=[
            Seat(id="bus-001-seat-01", number="01", is_booked=False, price=450),
            Seat(id="bus-001-seat-02", number="02", is_booked=False, price=500),
            Seat(id="bus-001-seat-03", number="03", is_booked=True, price=450),
        ],
    )


@pytest.fixture
def other_bus():
    return Bus(
        id="bus-002",
        name="WonderTour Deluxe",
        departure_time="09:30",
        arrival_time="14:45",
        price=380,
        seats=[
            Seat(id="bus-002-seat-01", number="01", is_booked=False, price=380),
            Seat(id="bus-002-seat-02", number="02", is_booked=False, price=430),
        ],
    )


@pytest.fixture
def mock_store():
    """Mock reservation store that echoes what it is given."""
    store = Mock(spec=ReservationStore)
    store.list = AsyncMock(return_value=[])
    store.create = AsyncMock(side_effect=lambda reservation: reservation)
    store.update_status = AsyncMock(
        side_effect=lambda reservation_id, status: Mock(id=reservation_id, status=status)
    )
    return store


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def session(auth, mock_store, settings, notifications):
    return BookingSession(
        auth,
        mock_store,
        id_generator=BookingIdGenerator(seed=7),
        notifier=notifications.append,
        settings=settings,
    )


@pytest.fixture
def payment_session(session, bus):
    """Session at the payment step with both free seats and a passenger."""
    session.set_search_params("New York", "Boston", date(2025, 5, 20))
    session.select_bus(bus)
    session.toggle_seat_selection(bus.seats[0])
    session.toggle_seat_selection(bus.seats[1])
    session.submit_passenger_form(
        {
            "name": "Jane Doe",
            "age": "34",
            "gender": "female",
            "email": "jane@example.com",
            "phone": "5551234567",
        },
        terms_accepted=True,
    )
    return session
