"""Field validation for the student form.

Every field is checked in a single pass. A field first has to be present
(non-blank after trimming); format rules only apply to present values and
must match the whole, untrimmed value.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from studentform.records.models import FieldPath, Gender
from studentform.validation.models import ErrorKind, ErrorMap, FieldError

if TYPE_CHECKING:
    from collections.abc import Callable

    from studentform.records.models import Student

STUDENT_ID_PATTERN = re.compile(r"[A-Za-z]{3}\d{3}", re.ASCII)
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"\d{10}", re.ASCII)
PINCODE_PATTERN = re.compile(r"\d{6}", re.ASCII)

GENDERS = frozenset(g.value for g in Gender)


def is_valid_student_id(value: str) -> bool:
    """Three letters followed by three digits, e.g. abc123."""
    return STUDENT_ID_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_phone(value: str) -> bool:
    """Exactly ten digits."""
    return PHONE_PATTERN.fullmatch(value) is not None


def is_valid_pincode(value: str) -> bool:
    """Exactly six digits."""
    return PINCODE_PATTERN.fullmatch(value) is not None


def is_valid_gender(value: str) -> bool:
    return value in GENDERS


# field -> (required message, format check, format message)
RULES: dict[FieldPath, tuple[str, Callable[[str], bool] | None, str | None]] = {
    FieldPath.STUDENT_ID: (
        "Student ID is required",
        is_valid_student_id,
        "Student Id Format abc123",
    ),
    FieldPath.FIRST_NAME: ("First Name is required", None, None),
    FieldPath.STUDENT_EMAIL: (
        "Email is required",
        is_valid_email,
        "Please enter a valid email",
    ),
    FieldPath.STUDENT_PHONE: (
        "Phone number is required",
        is_valid_phone,
        "Phone number must be 10 digits",
    ),
    FieldPath.GENDER: (
        "Gender is required",
        is_valid_gender,
        "Please select a valid gender",
    ),
    FieldPath.ADDRESS_FULL_ADDRESS: ("Address is required", None, None),
    FieldPath.ADDRESS_TOWN: ("City is required", None, None),
    FieldPath.ADDRESS_PINCODE: (
        "Pincode is required",
        is_valid_pincode,
        "Pincode must be 6 digits",
    ),
}


def validate_field(path: FieldPath, value: str) -> FieldError | None:
    """Check a single field.

    Args:
        path: The field being checked.
        value: Its raw value.

    Returns:
        The error for the field, or None if it passes. Fields without
        rules (last name) always pass.
    """
    rule = RULES.get(path)
    if rule is None:
        return None
    required_message, check, format_message = rule

    if not value.strip():
        return FieldError(path, ErrorKind.REQUIRED_FIELD_MISSING, required_message)
    if check is not None and not check(value):
        return FieldError(path, ErrorKind.FORMAT_MISMATCH, format_message or "Invalid value")
    return None


def validate(student: Student) -> ErrorMap:
    """Validate every field of a student.

    Args:
        student: The candidate record, as entered.

    Returns:
        Mapping of failing field -> error, in form order. Empty if valid.
    """
    errors: ErrorMap = {}
    for path in FieldPath:
        error = validate_field(path, path.get(student))
        if error is not None:
            errors[path] = error
    return errors
