"""Record Store - In-memory storage for student records."""

from studentform.records.exceptions import (
    DuplicateStudentError,
    EmptyStoreError,
    RecordStoreError,
    StudentNotFoundError,
)
from studentform.records.models import (
    Address,
    FieldPath,
    Gender,
    Student,
)
from studentform.records.store import RecordStore

__all__ = [
    "Address",
    "DuplicateStudentError",
    "EmptyStoreError",
    "FieldPath",
    "Gender",
    "RecordStore",
    "RecordStoreError",
    "Student",
    "StudentNotFoundError",
]
