"""
Booking-related data models.

Catalog entities and persisted reservations are pydantic models that speak the
camelCase wire shape of the reservation API. The in-progress draft is a plain
dataclass owned by a single booking session.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..enums import PaymentMethod, ReservationStatus


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Serialize using the camelCase field names of the reservation API."""
        return self.model_dump(mode="json", by_alias=True)


class Seat(_WireModel):
    """A seat as issued by the catalog. ``is_booked`` reflects global inventory."""

    id: str
    number: str
    is_booked: bool = False
    price: float = Field(ge=0)


class Bus(_WireModel):
    """Read-only catalog bus with its seat map."""

    id: str
    name: str
    departure_time: str = ""
    arrival_time: str = ""
    duration: str = ""
    price: float = 0.0
    seats_available: int = 0
    rating: float = 0.0
    bus_type: str = ""
    amenities: List[str] = Field(default_factory=list)
    seats: List[Seat] = Field(default_factory=list)

    def find_seat(self, seat_id: str) -> Optional[Seat]:
        """Return the seat with ``seat_id`` or None."""
        for seat in self.seats:
            if seat.id == seat_id:
                return seat
        return None


class Passenger(_WireModel):
    """Passenger details committed at the passenger step."""

    name: str = ""
    age: str = ""
    gender: str = ""
    email: str = ""
    phone: str = ""


class Reservation(_WireModel):
    """A finalized booking. Only ``status`` ever changes after creation."""

    id: str
    user_id: Optional[str] = None
    origin: str = Field(default="", alias="from")
    destination: str = Field(default="", alias="to")
    travel_date: Optional[date] = Field(default=None, alias="date")
    selected_bus: Optional[Bus] = None
    selected_seats: List[Seat] = Field(default_factory=list)
    passenger: Passenger = Field(default_factory=Passenger)
    total_price: float = 0.0
    booking_id: Optional[str] = None
    status: ReservationStatus = ReservationStatus.CONFIRMED
    booking_date: datetime = Field(default_factory=_utcnow)
    payment_method: PaymentMethod = PaymentMethod.ONLINE

    @field_validator("travel_date", mode="before")
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        # Storage may hand back a full timestamp for the travel date
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10:
            return value[:10]
        return value

    @property
    def seat_numbers(self) -> List[str]:
        return [seat.number for seat in self.selected_seats]

    def with_status(self, status: ReservationStatus) -> "Reservation":
        """Return a copy with only the status changed."""
        return self.model_copy(update={"status": status})


class Offer(_WireModel):
    """A promotional offer shown alongside the booking flow."""

    id: str
    title: str
    code: str
    discount: int
    valid_until: date
    description: str = ""


@dataclass
class BookingDraft:
    """The in-progress booking owned by one session."""

    origin: str = ""
    destination: str = ""
    travel_date: Optional[date] = None
    selected_bus: Optional[Bus] = None
    selected_seats: List[Seat] = field(default_factory=list)
    passenger: Passenger = field(default_factory=Passenger)
    total_price: float = 0.0
    booking_id: Optional[str] = None
    payment_method: PaymentMethod = PaymentMethod.ONLINE

    def has_search_params(self) -> bool:
        return bool(self.origin and self.destination and self.travel_date)

    def is_seat_selected(self, seat_id: str) -> bool:
        return any(s.id == seat_id for s in self.selected_seats)

    def to_reservation(
        self,
        reservation_id: str,
        *,
        user_id: Optional[str] = None,
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        booking_date: Optional[datetime] = None,
    ) -> Reservation:
        """Snapshot the draft into a reservation with ``reservation_id``."""
        return Reservation(
            id=reservation_id,
            user_id=user_id,
            origin=self.origin,
            destination=self.destination,
            travel_date=self.travel_date,
            selected_bus=self.selected_bus,
            selected_seats=list(self.selected_seats),
            passenger=self.passenger,
            total_price=self.total_price,
            booking_id=reservation_id,
            status=status,
            booking_date=booking_date or _utcnow(),
            payment_method=self.payment_method,
        )
