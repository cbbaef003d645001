"""Validator - Field rules for the student form."""

from studentform.validation.models import ErrorKind, ErrorMap, FieldError, error_messages
from studentform.validation.validator import (
    is_valid_email,
    is_valid_gender,
    is_valid_phone,
    is_valid_pincode,
    is_valid_student_id,
    validate,
    validate_field,
)

__all__ = [
    "ErrorKind",
    "ErrorMap",
    "FieldError",
    "error_messages",
    "is_valid_email",
    "is_valid_gender",
    "is_valid_phone",
    "is_valid_pincode",
    "is_valid_student_id",
    "validate",
    "validate_field",
]
