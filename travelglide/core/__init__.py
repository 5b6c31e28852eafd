"""
Core models, enums and exceptions for the TravelGlide booking system.
"""
