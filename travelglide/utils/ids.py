"""
Booking id generation.
"""

import random
from typing import Optional

BOOKING_ID_PREFIX = "BK-"
_LOWEST = 100000
_HIGHEST = 999999


class BookingIdGenerator:
    """Produce ``BK-`` ids with six random digits in [100000, 999999].

    Pass ``seed`` (or a ready ``random.Random``) to get a reproducible sequence.
    Ids are not checked for uniqueness.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random(seed)

    def __call__(self) -> str:
        return f"{BOOKING_ID_PREFIX}{self._rng.randint(_LOWEST, _HIGHEST)}"
