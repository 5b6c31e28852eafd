"""
Authentication gate.

The booking session only needs to know who is signed in. Sign-in flows live
outside this package; ``LocalAuthGate`` is the in-process holder they update.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ...core.models import User
from ...utils.logging import get_logger

logger = get_logger("auth")


@runtime_checkable
class AuthGate(Protocol):
    """Supplies the current user identity."""

    def current_user(self) -> Optional[User]:
        ...

    def is_authenticated(self) -> bool:
        ...


class LocalAuthGate:
    """Auth gate holding the signed-in user in memory."""

    def __init__(self, user: Optional[User] = None) -> None:
        self._user = user

    def current_user(self) -> Optional[User]:
        return self._user

    def is_authenticated(self) -> bool:
        return self._user is not None

    def sign_in(self, user: User) -> None:
        self._user = user
        logger.info("user %s signed in", user.id)

    def sign_out(self) -> None:
        if self._user is not None:
            logger.info("user %s signed out", self._user.id)
        self._user = None
