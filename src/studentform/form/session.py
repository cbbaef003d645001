"""FormSession - caller-side state for the student details form."""

from __future__ import annotations

import logging
from pathlib import Path

from studentform.config import Settings
from studentform.records import (
    DuplicateStudentError,
    FieldPath,
    RecordStore,
    Student,
    StudentNotFoundError,
)
from studentform.validation import ErrorKind, ErrorMap, FieldError, validate

logger = logging.getLogger(__name__)

DUPLICATE_ID_MESSAGE = "Student ID already exists!"


class FormSession:
    """One form bound to one record store.

    Holds the in-progress field values, the errors shown next to each
    field and whether the form is editing an existing record.
    """

    def __init__(self, store: RecordStore | None = None, settings: Settings | None = None) -> None:
        self.store = store if store is not None else RecordStore()
        self.settings = settings if settings is not None else Settings()
        self.form: Student = Student.blank()
        self.errors: ErrorMap = {}
        self.editing_id: str | None = None

    @property
    def edit_mode(self) -> bool:
        return self.editing_id is not None

    def set_field(self, path: FieldPath, value: str) -> None:
        """Write one field and clear the error shown for it."""
        self.form = path.set(self.form, value)
        self.errors.pop(path, None)

    def reset(self) -> None:
        """Clear the form, its errors and edit mode."""
        self.form = Student.blank()
        self.errors = {}
        self.editing_id = None

    def submit(self) -> bool:
        """Validate the form and add or update the record.

        Returns:
            True if the store was changed and the form reset, False if
            errors were recorded instead. If the record being edited was
            removed from the store meanwhile, the form leaves edit mode and
            resets, and False is returned.
        """
        errors = validate(self.form)
        if errors:
            self.errors = errors
            logger.debug("Submit rejected: %s", ", ".join(errors))
            return False

        try:
            if self.editing_id is None:
                self.store.add(self.form)
            else:
                self.store.update(self.editing_id, self.form)
        except DuplicateStudentError:
            self.errors = {
                FieldPath.STUDENT_ID: FieldError(
                    FieldPath.STUDENT_ID, ErrorKind.DUPLICATE_KEY, DUPLICATE_ID_MESSAGE
                )
            }
            return False
        except StudentNotFoundError:
            logger.warning("Edited student %s no longer exists", self.editing_id)
            self.reset()
            return False

        self.reset()
        return True

    def begin_edit(self, student_id: str) -> None:
        """Load a stored record into the form for editing.

        Raises:
            StudentNotFoundError: If no student has student_id
        """
        self.form = self.store.get(student_id)
        self.editing_id = student_id
        self.errors = {}

    def cancel_edit(self) -> None:
        self.reset()

    def delete(self, student_id: str) -> bool:
        """Delete a record. Deleting the record being edited leaves edit mode."""
        removed = self.store.delete(student_id)
        if removed and student_id == self.editing_id:
            self.reset()
        return removed

    def save(self, directory: str | Path) -> Path:
        """Write all records to the export file in directory.

        Returns:
            Path of the written file

        Raises:
            EmptyStoreError: If there are no records; nothing is written
        """
        payload = self.store.export(indent=self.settings.export_indent)
        path = Path(directory) / self.settings.export_filename
        path.write_text(payload, encoding="utf-8")
        logger.info("Saved %d student records to %s", len(self.store), path)
        return path
