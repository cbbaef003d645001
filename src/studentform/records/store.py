"""RecordStore - Main API for student record operations."""

from __future__ import annotations

import json
import logging

from studentform.config import DEFAULT_EXPORT_INDENT
from studentform.records.exceptions import (
    DuplicateStudentError,
    EmptyStoreError,
    StudentNotFoundError,
)
from studentform.records.models import Student

logger = logging.getLogger(__name__)


class RecordStore:
    """In-memory, insertion-ordered collection of students.

    The student ID is the unique key. There are no secondary indices;
    lookups scan the list.
    """

    def __init__(self, students: list[Student] | None = None) -> None:
        """Initialize the store.

        Args:
            students: Initial records, in order. IDs must be unique.

        Raises:
            DuplicateStudentError: If the initial records repeat an ID
        """
        self._students: list[Student] = []
        for student in students or []:
            self.add(student)

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return self._index_of(student_id) is not None

    def _index_of(self, student_id: object) -> int | None:
        for i, student in enumerate(self._students):
            if student.student_id == student_id:
                return i
        return None

    def add(self, student: Student) -> Student:
        """Append a new student.

        Args:
            student: The record to add

        Returns:
            The added record

        Raises:
            DuplicateStudentError: If a student with the same ID exists
        """
        if student.student_id in self:
            raise DuplicateStudentError(f"Student with id '{student.student_id}' already exists")
        self._students.append(student)
        logger.info("Added student %s (%d records)", student.student_id, len(self._students))
        return student

    def get(self, student_id: str) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        index = self._index_of(student_id)
        if index is None:
            raise StudentNotFoundError(f"Student with id '{student_id}' not found")
        return self._students[index]

    def update(self, original_id: str, student: Student) -> Student:
        """Replace the student keyed by original_id, keeping its position.

        Args:
            original_id: ID of the record being edited
            student: The replacement record

        Returns:
            The replacement record

        Raises:
            StudentNotFoundError: If no student has original_id
            DuplicateStudentError: If the replacement takes the ID of another student
        """
        index = self._index_of(original_id)
        if index is None:
            raise StudentNotFoundError(f"Student with id '{original_id}' not found")

        if student.student_id != original_id and student.student_id in self:
            raise DuplicateStudentError(f"Student with id '{student.student_id}' already exists")

        self._students[index] = student
        logger.info("Updated student %s", original_id)
        return student

    def delete(self, student_id: str) -> bool:
        """Delete a student if present.

        Returns:
            True if a record was removed, False if none matched
        """
        index = self._index_of(student_id)
        if index is None:
            logger.debug("Delete ignored, no student %s", student_id)
            return False
        del self._students[index]
        logger.info("Deleted student %s (%d records)", student_id, len(self._students))
        return True

    def list(self) -> list[Student]:
        """List all students in insertion order."""
        return list(self._students)

    def export(self, indent: int = DEFAULT_EXPORT_INDENT) -> str:
        """Serialize all students to pretty-printed JSON.

        Args:
            indent: Indentation width of the JSON output

        Returns:
            JSON array of students in their camelCase wire shape

        Raises:
            EmptyStoreError: If the store holds no students
        """
        if not self._students:
            raise EmptyStoreError("No student records to save!")
        payload = json.dumps(
            [s.to_dict() for s in self._students], indent=indent, ensure_ascii=False
        )
        logger.info("Exported %d student records", len(self._students))
        return payload
