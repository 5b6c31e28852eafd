"""
Application settings and configuration.
"""

from typing import Dict, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "TravelGlide"
    app_version: str = "1.0.0"
    debug: bool = False

    # Pricing
    currency_symbol: str = "₹"
    service_fee: float = 50.0

    # Reservation store: "api" talks to the reservation service, "sqlite" keeps
    # reservations in a local file
    reservation_backend: str = "api"
    reservation_api_base: str = "http://localhost:5000/api"
    reservation_api_token: Optional[str] = None
    reservation_api_timeout: float = 10.0
    reservation_db_path: str = "travelglide_reservations.db"

    # Reservation API server: token -> user id
    api_tokens: Dict[str, str] = Field(default_factory=dict)

    # Tickets
    tickets_dir: str = "tickets"

    # Logging
    log_level: str = "INFO"
    event_log_path: str = "travelglide_event_log.jsonl"


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
