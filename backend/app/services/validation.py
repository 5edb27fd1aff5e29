"""Field-by-field validation for employee and account input."""

from __future__ import annotations

import re
from datetime import date

from email_validator import EmailNotValidError, validate_email

from app.core.exceptions import FieldError
from app.models.employee import EmployeeInput

_PHONE_RE = re.compile(r"[0-9]{10}")

# (attribute, wire name, label, max length)
_TEXT_RULES: list[tuple[str, str, str, int]] = [
    ("full_name", "fullName", "Full Name", 100),
    ("email", "email", "Email", 100),
    ("position", "position", "Position", 50),
    ("department", "department", "Department", 50),
]


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def parse_hire_date(value: str | None) -> date | None:
    if _is_blank(value):
        return None
    try:
        return date.fromisoformat(value.strip())  # type: ignore[union-attr]
    except ValueError:
        return None


def validate_employee(data: EmployeeInput) -> list[FieldError]:
    """Return every problem with ``data``; an empty list means it can be stored."""
    errors: list[FieldError] = []

    for attr, field, label, max_length in _TEXT_RULES:
        value = getattr(data, attr)
        if _is_blank(value):
            errors.append(FieldError(field, f"{label} is required"))
            continue
        if attr == "email" and not is_valid_email(value):
            errors.append(FieldError(field, "Please enter a valid email address"))
        if len(value) > max_length:
            errors.append(FieldError(field, f"{label} cannot exceed {max_length} characters"))

    if _is_blank(data.phone):
        errors.append(FieldError("phone", "Phone number is required"))
    elif not _PHONE_RE.fullmatch(data.phone):  # type: ignore[arg-type]
        errors.append(FieldError("phone", "Phone number must contain exactly 10 digits"))

    if _is_blank(data.hire_date):
        errors.append(FieldError("hireDate", "Hire Date is required"))
    elif parse_hire_date(data.hire_date) is None:
        errors.append(FieldError("hireDate", "Hire Date must be a valid date"))

    return errors


def validate_password(password: str, *, min_length: int, require_digit: bool) -> list[FieldError]:
    errors: list[FieldError] = []
    if len(password) < min_length:
        errors.append(FieldError("password", f"Passwords must be at least {min_length} characters."))
    if require_digit and not any(ch.isdigit() for ch in password):
        errors.append(FieldError("password", "Passwords must have at least one digit ('0'-'9')."))
    return errors
