"""
User-visible notifications emitted by the booking session.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A toast-style message for the presentation layer."""

    title: str
    description: str
    variant: str = "default"

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"
