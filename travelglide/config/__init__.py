"""
Configuration management for the TravelGlide booking system.
"""

from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
