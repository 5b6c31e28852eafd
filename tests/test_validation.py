from datetime import date

import pytest

from travelglide.utils.validation import ValidationUtils


@pytest.mark.parametrize("age, ok", [("1", True), ("120", True), ("34", True), ("0", False), ("121", False), ("abc", False), ("", False), ("nan", False)])
def test_validate_age(age, ok):
    assert ValidationUtils.validate_age(age)[0] is ok


@pytest.mark.parametrize("email, ok", [("a@b.co", True), ("jane.doe@example.com", True), ("a@b", False), ("nope", False), ("a @b.co", False)])
def test_validate_email(email, ok):
    assert ValidationUtils.validate_email(email)[0] is ok


@pytest.mark.parametrize("phone, ok", [("5551234567", True), ("555123456", False), ("555-123-4567", False), ("", False), ("٥٥٥١٢٣٤٥٦٧", False), ("５５５１２３４５６７", False)])
def test_validate_phone(phone, ok):
    assert ValidationUtils.validate_phone(phone)[0] is ok


def test_passenger_form_valid():
    data = {"name": "Jane", "age": "34", "gender": "female", "email": "jane@example.com", "phone": "5551234567"}
    assert ValidationUtils.validate_passenger_form(data, terms_accepted=True) == {}


def test_passenger_form_messages():
    errors = ValidationUtils.validate_passenger_form({}, terms_accepted=False)
    assert errors == {
        "name": "Name is required",
        "age": "Age is required",
        "email": "Email is required",
        "phone": "Phone number is required",
        "terms": "You must accept the terms and conditions",
    }


def test_validate_search_lists_missing_fields():
    assert ValidationUtils.validate_search("A", "B", date(2025, 1, 1)) == []
    assert ValidationUtils.validate_search("", None, None) == ["from", "to", "date"]
