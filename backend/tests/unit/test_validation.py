from __future__ import annotations

from datetime import date

import pytest

from app.models.employee import EmployeeInput
from app.services.validation import parse_hire_date, validate_employee, validate_password

VALID = {
    "full_name": "Dilina Mewan",
    "email": "dilina@gmail.com",
    "position": "Software Developer",
    "department": "IT",
    "phone": "0713336584",
    "hire_date": "2022-01-15",
}


def _errors(**overrides) -> dict[str, list[str]]:
    result: dict[str, list[str]] = {}
    for error in validate_employee(EmployeeInput(**{**VALID, **overrides})):
        result.setdefault(error.field, []).append(error.message)
    return result


def test_valid_employee_has_no_errors():
    assert _errors() == {}


def test_missing_fields_are_all_reported():
    errors = validate_employee(EmployeeInput())

    assert [e.field for e in errors] == ["fullName", "email", "position", "department", "phone", "hireDate"]
    assert errors[0].message == "Full Name is required"
    assert errors[4].message == "Phone number is required"


def test_whitespace_only_counts_as_missing():
    assert _errors(position="   ") == {"position": ["Position is required"]}


@pytest.mark.parametrize("phone", ["12345", "071333658", "07133365841", "071-333-658", "071333658a"])
def test_phone_must_be_ten_digits(phone):
    assert _errors(phone=phone) == {"phone": ["Phone number must contain exactly 10 digits"]}


def test_email_format_is_checked():
    assert _errors(email="not-an-email") == {"email": ["Please enter a valid email address"]}


def test_length_limits():
    errors = _errors(full_name="x" * 101, department="d" * 51, position="p" * 50)

    assert errors == {
        "fullName": ["Full Name cannot exceed 100 characters"],
        "department": ["Department cannot exceed 50 characters"],
    }


def test_long_email_reports_length():
    errors = _errors(email="a" * 95 + "@gmail.com")

    assert "Email cannot exceed 100 characters" in errors["email"]


def test_invalid_hire_date():
    assert _errors(hire_date="2022-13-40") == {"hireDate": ["Hire Date must be a valid date"]}


def test_parse_hire_date():
    assert parse_hire_date("2020-03-05") == date(2020, 3, 5)
    assert parse_hire_date("") is None
    assert parse_hire_date(None) is None
    assert parse_hire_date("yesterday") is None


def test_password_policy():
    assert validate_password("abc123", min_length=6, require_digit=True) == []

    errors = validate_password("abc", min_length=6, require_digit=True)
    assert [e.field for e in errors] == ["password", "password"]

    assert validate_password("abcdef", min_length=6, require_digit=False) == []
