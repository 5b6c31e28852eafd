"""
Authentication gate consumed by the booking session.
"""

from .gate import AuthGate, LocalAuthGate

__all__ = [
    "AuthGate",
    "LocalAuthGate",
]
