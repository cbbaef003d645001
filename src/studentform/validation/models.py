"""Data models for the Validator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from studentform.records.models import FieldPath


class ErrorKind(StrEnum):
    """Why a field was rejected."""

    REQUIRED_FIELD_MISSING = "required_field_missing"
    FORMAT_MISMATCH = "format_mismatch"
    DUPLICATE_KEY = "duplicate_key"


@dataclass(frozen=True)
class FieldError:
    """A user-facing error for a single form field.

    Attributes:
        field: The rejected field.
        kind: Category of the failure.
        message: Text shown next to the field.
    """

    field: FieldPath
    kind: ErrorKind
    message: str


ErrorMap = dict[FieldPath, FieldError]


def error_messages(errors: ErrorMap) -> dict[str, str]:
    """Flatten an error map to dotted path -> message."""
    return {str(path): error.message for path, error in errors.items()}
