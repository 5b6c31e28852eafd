"""
Logger helpers shared by the booking services.
"""

import logging
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``travelglide``."""
    if not name.startswith("travelglide"):
        name = f"travelglide.{name}"
    return logging.getLogger(name)


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the ``travelglide`` logger once."""
    root = logging.getLogger("travelglide")
    root.setLevel((level or "INFO").upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
