"""
FastAPI application factory and configuration.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..services.store import SQLiteReservationStore
from ..utils.logging import configure_logging
from .handlers import HealthHandler
from .middleware import LoggingMiddleware
from .routes import BookingsRouter


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[SQLiteReservationStore] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} Reservations",
        description="Reservation persistence for the bus booking flow",
        version=settings.app_version,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    store = store or SQLiteReservationStore(settings.reservation_db_path)
    health_handler = HealthHandler(settings)
    bookings = BookingsRouter(store, settings)

    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(bookings.router, prefix="/api/bookings", tags=["bookings"])

    return app
