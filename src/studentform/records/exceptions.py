"""Custom exceptions for the Record Store."""


class RecordStoreError(Exception):
    """Base exception for Record Store errors."""


class DuplicateStudentError(RecordStoreError):
    """Student with given ID already exists."""


class StudentNotFoundError(RecordStoreError):
    """Student with given ID does not exist."""


class EmptyStoreError(RecordStoreError):
    """There are no student records to export."""
