"""
Validation utilities for search and passenger form input.
"""

import math
import re
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple

_EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
_PHONE_RE = re.compile(r"^[0-9]{10}$")


class ValidationUtils:
    """Validation utilities for the booking forms."""

    @staticmethod
    def validate_search(origin: Optional[str], destination: Optional[str], travel_date: Optional[date]) -> List[str]:
        """Return the names of missing search fields."""
        missing = []
        if not origin or not str(origin).strip():
            missing.append("from")
        if not destination or not str(destination).strip():
            missing.append("to")
        if travel_date is None:
            missing.append("date")
        return missing

    @staticmethod
    def validate_name(name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate passenger name.

        Args:
            name: Full name as typed

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name or not str(name).strip():
            return False, "Name is required"
        return True, None

    @staticmethod
    def validate_age(age: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate passenger age: numeric, between 1 and 120.

        Args:
            age: Age as typed (string or number)

        Returns:
            Tuple of (is_valid, error_message)
        """
        text = str(age).strip() if age is not None else ""
        if not text:
            return False, "Age is required"
        try:
            value = float(text)
        except ValueError:
            return False, "Enter a valid age"
        if math.isnan(value) or value < 1 or value > 120:
            return False, "Enter a valid age"
        return True, None

    @staticmethod
    def validate_email(email: str) -> Tuple[bool, Optional[str]]:
        """
        Validate an email of the ``local@domain.tld`` shape.

        Args:
            email: Email address

        Returns:
            Tuple of (is_valid, error_message)
        """
        text = (email or "").strip()
        if not text:
            return False, "Email is required"
        if not _EMAIL_RE.match(text):
            return False, "Enter a valid email"
        return True, None

    @staticmethod
    def validate_phone(phone: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a 10-digit phone number.

        Args:
            phone: Phone number

        Returns:
            Tuple of (is_valid, error_message)
        """
        text = (phone or "").strip()
        if not text:
            return False, "Phone number is required"
        if not _PHONE_RE.match(text):
            return False, "Enter a valid 10-digit phone number"
        return True, None

    @staticmethod
    def validate_passenger_form(data: Mapping[str, Any], terms_accepted: bool) -> Dict[str, str]:
        """
        Validate the passenger form.

        Args:
            data: Raw form fields (name, age, gender, email, phone)
            terms_accepted: Whether the terms checkbox was ticked

        Returns:
            Mapping of field name to error message; empty when valid
        """
        errors: Dict[str, str] = {}
        checks = (
            ("name", ValidationUtils.validate_name),
            ("age", ValidationUtils.validate_age),
            ("email", ValidationUtils.validate_email),
            ("phone", ValidationUtils.validate_phone),
        )
        for name, check in checks:
            ok, message = check(data.get(name, ""))
            if not ok:
                errors[name] = message
        if not terms_accepted:
            errors["terms"] = "You must accept the terms and conditions"
        return errors
