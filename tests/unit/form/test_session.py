"""Unit tests for FormSession."""

import json
from pathlib import Path

import pytest

from studentform.config import Settings
from studentform.form import DUPLICATE_ID_MESSAGE, FormSession
from studentform.records import (
    EmptyStoreError,
    FieldPath,
    RecordStore,
    Student,
    StudentNotFoundError,
)
from studentform.validation import ErrorKind


@pytest.fixture
def session() -> FormSession:
    return FormSession()


def fill(session: FormSession, student: Student) -> None:
    """Type every field of student into the form."""
    for path in FieldPath:
        session.set_field(path, path.get(student))


@pytest.mark.unit
class TestSetField:
    """Tests for set_field."""

    def test_sets_nested_field(self, session: FormSession) -> None:
        session.set_field(FieldPath.ADDRESS_TOWN, "Springfield")

        assert session.form.address.town == "Springfield"

    def test_clears_error_for_field_only(self, session: FormSession) -> None:
        session.submit()
        assert FieldPath.STUDENT_ID in session.errors

        session.set_field(FieldPath.STUDENT_ID, "a")

        assert FieldPath.STUDENT_ID not in session.errors
        assert FieldPath.FIRST_NAME in session.errors


@pytest.mark.unit
class TestSubmit:
    """Tests for submit."""

    def test_invalid_form_records_errors(self, session: FormSession) -> None:
        assert session.submit() is False
        assert session.errors[FieldPath.FIRST_NAME].message == "First Name is required"
        assert len(session.store) == 0

    def test_valid_form_adds_and_resets(self, session: FormSession, jane: Student) -> None:
        fill(session, jane)

        assert session.submit() is True
        assert session.store.list() == [jane]
        assert session.form == Student.blank()
        assert session.errors == {}

    def test_duplicate_id_reported_on_student_id(
        self, session: FormSession, jane: Student
    ) -> None:
        session.store.add(jane)
        fill(session, jane)
        session.set_field(FieldPath.FIRST_NAME, "Janet")

        assert session.submit() is False

        error = session.errors[FieldPath.STUDENT_ID]
        assert error.kind == ErrorKind.DUPLICATE_KEY
        assert error.message == DUPLICATE_ID_MESSAGE
        assert session.store.list() == [jane]
        assert session.form.first_name == "Janet"


@pytest.mark.unit
class TestEdit:
    """Tests for the edit flow."""

    def test_begin_edit_loads_record(self, session: FormSession, jane: Student) -> None:
        session.store.add(jane)

        session.begin_edit("abc123")

        assert session.edit_mode
        assert session.form == jane

    def test_begin_edit_unknown_raises(self, session: FormSession) -> None:
        with pytest.raises(StudentNotFoundError):
            session.begin_edit("zzz999")
        assert not session.edit_mode

    def test_submit_in_edit_mode_replaces(self, session: FormSession, jane: Student) -> None:
        session.store.add(Student(student_id="aaa111", first_name="A", gender="male"))
        session.store.add(jane)
        session.begin_edit("abc123")
        session.set_field(FieldPath.ADDRESS_TOWN, "Shelbyville")

        assert session.submit() is True

        assert not session.edit_mode
        students = session.store.list()
        assert [s.student_id for s in students] == ["aaa111", "abc123"]
        assert students[1].address.town == "Shelbyville"

    def test_submit_after_edited_record_removed(
        self, session: FormSession, jane: Student
    ) -> None:
        session.store.add(jane)
        session.begin_edit("abc123")
        session.store.delete("abc123")

        assert session.submit() is False

        assert not session.edit_mode
        assert session.form == Student.blank()
        assert len(session.store) == 0

    def test_cancel_edit(self, session: FormSession, jane: Student) -> None:
        session.store.add(jane)
        session.begin_edit("abc123")

        session.cancel_edit()

        assert not session.edit_mode
        assert session.form == Student.blank()
        assert session.store.list() == [jane]


@pytest.mark.unit
class TestDelete:
    """Tests for delete."""

    def test_delete_edited_record_leaves_edit_mode(
        self, session: FormSession, jane: Student
    ) -> None:
        session.store.add(jane)
        session.begin_edit("abc123")

        assert session.delete("abc123") is True
        assert not session.edit_mode

    def test_delete_unknown(self, session: FormSession, jane: Student) -> None:
        session.store.add(jane)

        assert session.delete("zzz999") is False
        assert len(session.store) == 1


@pytest.mark.unit
class TestSave:
    """Tests for save."""

    def test_save_writes_export_file(self, tmp_path: Path, jane: Student) -> None:
        session = FormSession(RecordStore([jane]))

        path = session.save(tmp_path)

        assert path == tmp_path / "students_data.txt"
        assert json.loads(path.read_text(encoding="utf-8")) == [jane.to_dict()]

    def test_save_empty_raises_and_writes_nothing(self, tmp_path: Path) -> None:
        session = FormSession()

        with pytest.raises(EmptyStoreError):
            session.save(tmp_path)

        assert list(tmp_path.iterdir()) == []

    def test_save_uses_settings(self, tmp_path: Path, jane: Student) -> None:
        settings = Settings(export_filename="out.json", export_indent=4)
        session = FormSession(RecordStore([jane]), settings=settings)

        path = session.save(tmp_path)

        assert path.name == "out.json"
        assert '\n    {' in path.read_text(encoding="utf-8")
