"""
Booking session: the wizard state machine for one signed-in user.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ...config import Settings, get_settings
from ...core.enums import BookingStep, PaymentMethod, ReservationStatus
from ...core.exceptions import (
    AuthRequiredError,
    BookingFlowError,
    BookingPersistFailedError,
    CancelFailedError,
    InvalidSearchError,
    ReservationStoreError,
    SeatUnavailableError,
    ValidationFailedError,
)
from ...core.models import Bus, BookingDraft, Notification, Offer, Passenger, Reservation, Seat, User
from ...utils.event_log import log_event
from ...utils.ids import BookingIdGenerator
from ...utils.logging import get_logger
from ...utils.validation import ValidationUtils
from ..auth import AuthGate
from ..store import ReservationStore
from .data import CatalogProvider
from .pricing import display_total, seats_total
from .ticket import FileTicketExporter, TicketExporter, render_ticket, ticket_filename

logger = get_logger("booking.session")

Notifier = Callable[[Notification], None]


def _log_notification(notification: Notification) -> None:
    log = logger.warning if notification.is_error else logger.info
    log("%s: %s", notification.title, notification.description)


class BookingSession:
    """Own the booking draft, the step pointer and the reservation cache.

    Create one per active user session. Transitions validate, mutate the draft
    and advance the step; store-backed operations only touch local state once
    the store call has succeeded.
    """

    def __init__(
        self,
        auth: AuthGate,
        store: ReservationStore,
        *,
        id_generator: Optional[Callable[[], str]] = None,
        exporter: Optional[TicketExporter] = None,
        notifier: Optional[Notifier] = None,
        settings: Optional[Settings] = None,
        catalog: Optional[CatalogProvider] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.auth = auth
        self.store = store
        self.settings = settings or get_settings()
        self.id_generator = id_generator or BookingIdGenerator()
        self.exporter = exporter or FileTicketExporter(self.settings.tickets_dir)
        self.notifier = notifier or _log_notification
        self.catalog = catalog or CatalogProvider()
        self.session_id = session_id or uuid.uuid4().hex

        self._draft = BookingDraft()
        self._step = BookingStep.SEARCH
        self._reservations: List[Reservation] = []
        self._fetching = False

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def step(self) -> BookingStep:
        return self._step

    @property
    def reservations(self) -> Tuple[Reservation, ...]:
        return tuple(self._reservations)

    @property
    def is_confirmed(self) -> bool:
        return self._draft.booking_id is not None

    @property
    def current_offers(self) -> List[Offer]:
        return self.catalog.offers()

    def display_total(self) -> float:
        """Checkout total: seat total plus the service fee."""
        return display_total(self._draft.total_price, self.settings.service_fee)

    def find_reservation(self, reservation_id: str) -> Optional[Reservation]:
        for reservation in self._reservations:
            if reservation.id == reservation_id:
                return reservation
        return None

    # ------------------------------------------------------------------
    # Guards and helpers
    # ------------------------------------------------------------------
    def _require_user(self, action: str) -> User:
        user = self.auth.current_user() if self.auth.is_authenticated() else None
        if user is None:
            logger.info("blocked %s: not signed in", action)
            raise AuthRequiredError(f"Sign in to {action}")
        return user

    def _require_open_draft(self, action: str) -> None:
        if self.is_confirmed:
            raise BookingFlowError(
                f"Cannot {action}: booking {self._draft.booking_id} is already confirmed"
            )

    def _move_to(self, step: BookingStep) -> None:
        prev = self._step
        self._step = step
        if prev != step:
            self._log_step_transition(prev, step)

    def _log_step_transition(self, from_step: BookingStep, to_step: BookingStep) -> None:
        logger.debug("step %s -> %s", from_step.name, to_step.name)
        self._log_event("step_transition", {"from": int(from_step), "to": int(to_step)})

    def _log_event(self, event: str, data: Dict[str, Any]) -> None:
        log_event(event, data, session_id=self.session_id)

    def _notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notifier(Notification(title=title, description=description, variant=variant))

    # ------------------------------------------------------------------
    # Wizard transitions
    # ------------------------------------------------------------------
    def set_search_params(self, origin: str, destination: str, travel_date: Optional[date]) -> None:
        """Record the route and date, then move to bus selection."""
        self._require_user("search for buses")
        self._require_open_draft("change the search")
        missing = ValidationUtils.validate_search(origin, destination, travel_date)
        if missing:
            raise InvalidSearchError("Missing search fields: " + ", ".join(missing))

        self._draft.origin = origin.strip()
        self._draft.destination = destination.strip()
        self._draft.travel_date = travel_date
        self._move_to(BookingStep.SELECT_BUS)

    def select_bus(self, bus: Bus) -> None:
        """Pick a bus. Seats chosen on a previous bus are dropped."""
        self._require_user("select a bus")
        self._require_open_draft("select a bus")
        if not self._draft.has_search_params():
            raise BookingFlowError("Cannot select a bus before searching")

        self._draft.selected_bus = bus
        self._draft.selected_seats = []
        self._draft.total_price = 0.0
        self._move_to(BookingStep.SELECT_SEATS)

    def toggle_seat_selection(self, seat: Seat) -> BookingDraft:
        """Select or deselect ``seat``. Booked seats are ignored."""
        self._require_user("select seats")
        self._require_open_draft("change seats")
        bus = self._draft.selected_bus
        if bus is None:
            raise BookingFlowError("Cannot select seats before selecting a bus")
        # The bus's own seat is authoritative for booking state and price
        catalog_seat = bus.find_seat(seat.id)
        if catalog_seat is None:
            raise SeatUnavailableError(f"Seat {seat.id} is not on bus {bus.id}")
        if catalog_seat.is_booked:
            logger.debug("ignoring booked seat %s", seat.id)
            return self._draft

        if self._draft.is_seat_selected(seat.id):
            self._draft.selected_seats = [s for s in self._draft.selected_seats if s.id != seat.id]
        else:
            self._draft.selected_seats = [*self._draft.selected_seats, catalog_seat]
        self._draft.total_price = seats_total(self._draft.selected_seats)
        return self._draft

    def confirm_seats(self) -> None:
        """Leave seat selection for the passenger form."""
        self._require_user("continue to passenger details")
        self._require_open_draft("continue to passenger details")
        if not self._draft.selected_seats:
            raise BookingFlowError("Select at least one seat to continue")
        self._move_to(BookingStep.PASSENGER_INFO)

    def set_passenger_info(self, passenger: Passenger) -> None:
        """Commit pre-validated passenger details and go straight to payment."""
        self._require_user("enter passenger details")
        self._require_open_draft("change passenger details")
        if not self._draft.selected_seats:
            raise BookingFlowError("Cannot enter passenger details before selecting seats")

        self._draft.passenger = passenger
        # Passenger submission skips step 4's review and lands on payment
        self._move_to(BookingStep.PAYMENT)

    def submit_passenger_form(self, data: Mapping[str, Any], terms_accepted: bool) -> Passenger:
        """Validate the raw passenger form, then commit it."""
        errors = ValidationUtils.validate_passenger_form(data, terms_accepted)
        if errors:
            raise ValidationFailedError(errors)
        passenger = Passenger(
            name=str(data.get("name", "")).strip(),
            age=str(data.get("age", "")).strip(),
            gender=str(data.get("gender", "")),
            email=str(data.get("email", "")).strip(),
            phone=str(data.get("phone", "")).strip(),
        )
        self.set_passenger_info(passenger)
        return passenger

    def set_payment_method(self, method: PaymentMethod | str) -> None:
        self._require_user("choose a payment method")
        self._require_open_draft("change the payment method")
        self._draft.payment_method = PaymentMethod.from_value(method)

    def go_back(self, step: BookingStep | int) -> None:
        """Return to an earlier step. The draft is left as is."""
        self._require_user("navigate the booking")
        target = BookingStep(step)
        if target >= self._step:
            raise BookingFlowError(f"Cannot go back from step {int(self._step)} to step {int(target)}")
        self._move_to(target)

    def reset_booking(self) -> None:
        """Start over with an empty draft. Saved reservations are kept."""
        self._draft = BookingDraft()
        self._move_to(BookingStep.SEARCH)

    # ------------------------------------------------------------------
    # Store-backed operations
    # ------------------------------------------------------------------
    async def complete_booking(self) -> Reservation:
        """Persist the draft as a confirmed reservation.

        The draft only receives its booking id once the store has accepted the
        reservation, so a failed attempt can simply be retried.
        """
        user = self._require_user("complete the booking")
        self._require_open_draft("complete the booking")
        if self._step != BookingStep.PAYMENT:
            raise BookingFlowError("Cannot complete the booking before the payment step")
        if not self._draft.selected_seats or not self._draft.passenger.name:
            raise BookingFlowError("Cannot complete the booking without seats and passenger details")

        booking_id = self.id_generator()
        reservation = self._draft.to_reservation(
            booking_id,
            user_id=user.id,
            status=ReservationStatus.CONFIRMED,
            booking_date=datetime.now(timezone.utc),
        )

        try:
            stored = await self.store.create(reservation)
        except ReservationStoreError as e:
            logger.error("failed to save booking %s: %s", booking_id, e)
            self._log_event("reservation_create_failed", {"booking_id": booking_id, "error": str(e)})
            self._notify(
                "Booking Error",
                "There was an error completing your booking. Please try again.",
                "destructive",
            )
            raise BookingPersistFailedError(f"Booking {booking_id} was not saved") from e

        self._reservations.append(stored)
        self._draft.booking_id = stored.booking_id or stored.id
        self._log_event("reservation_created", {"booking_id": self._draft.booking_id})
        self._notify(
            "Booking Completed",
            f"Your booking with ID {self._draft.booking_id} has been confirmed.",
        )
        return stored

    async def cancel_booking(self, reservation_id: str) -> Optional[Reservation]:
        """Cancel a saved reservation. Already-cancelled or unknown ids are ignored."""
        self._require_user("cancel a booking")
        current = self.find_reservation(reservation_id)
        if current is None:
            logger.info("cancel ignored: %s not found", reservation_id)
            return None
        if current.status == ReservationStatus.CANCELLED:
            logger.info("cancel ignored: %s already cancelled", reservation_id)
            return None

        try:
            await self.store.update_status(reservation_id, ReservationStatus.CANCELLED)
        except ReservationStoreError as e:
            logger.error("failed to cancel booking %s: %s", reservation_id, e)
            self._log_event("reservation_cancel_failed", {"booking_id": reservation_id, "error": str(e)})
            self._notify("Error", "Failed to cancel booking. Please try again.", "destructive")
            raise CancelFailedError(f"Booking {reservation_id} was not cancelled") from e

        cancelled = current.with_status(ReservationStatus.CANCELLED)
        self._reservations = [
            cancelled if r.id == reservation_id else r for r in self._reservations
        ]

        self._log_event("reservation_cancelled", {"booking_id": reservation_id})
        self._notify(
            "Booking Cancelled",
            f"Your booking {reservation_id} has been cancelled. "
            "A refund will be processed within 5-7 business days.",
        )
        return cancelled

    def download_ticket(self, reservation_id: str) -> Any:
        """Render the e-ticket for a saved reservation and hand it to the exporter."""
        self._require_user("download a ticket")
        reservation = self.find_reservation(reservation_id)
        if reservation is None:
            return None

        content = render_ticket(reservation, self.settings.app_name, self.settings.currency_symbol)
        filename = ticket_filename(reservation.booking_id or reservation.id, self.settings.app_name)
        result = self.exporter.save(filename, content)
        self._notify("Ticket Downloaded", "Your e-ticket has been downloaded successfully.")
        return result

    async def refresh_reservations(self) -> Tuple[Reservation, ...]:
        """Reload the reservation cache from the store.

        Only one fetch runs at a time; a call made while one is pending
        returns the current cache.
        """
        user = self._require_user("view bookings")
        if self._fetching:
            return self.reservations

        self._fetching = True
        try:
            fetched = await self.store.list(user.id)
        except ReservationStoreError as e:
            logger.error("failed to fetch bookings for %s: %s", user.id, e)
            self._notify("Error", "Failed to fetch your bookings", "destructive")
            return self.reservations
        finally:
            self._fetching = False

        # The user may have signed out or switched while the fetch was pending
        current = self.auth.current_user() if self.auth.is_authenticated() else None
        if current is None or current.id != user.id:
            logger.info("discarding bookings fetched for %s: user changed", user.id)
            return self.reservations

        self._reservations = list(fetched)
        return self.reservations

    async def on_auth_changed(self) -> None:
        """Fetch reservations after sign-in; drop them after sign-out."""
        if self.auth.is_authenticated():
            await self.refresh_reservations()
        else:
            self._reservations = []

    def summary(self) -> Dict[str, Any]:
        """Snapshot of the checkout figures shown to the user."""
        return {
            "step": int(self._step),
            "seats": [seat.number for seat in self._draft.selected_seats],
            "total_price": self._draft.total_price,
            "service_fee": self.settings.service_fee,
            "display_total": self.display_total(),
            "payment_method": self._draft.payment_method.value,
        }
