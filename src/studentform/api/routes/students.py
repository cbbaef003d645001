"""Student CRUD and export endpoints."""

import json
import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from studentform.api.dependencies import RecordStoreDep, SettingsDep
from studentform.api.models import (
    APIResponse,
    StudentPayload,
    StudentResponse,
    student_to_response,
)
from studentform.logging import sanitize_for_log
from studentform.validation import error_messages, validate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["students"])


def _validation_failed(payload: StudentPayload, errors: dict[str, str]) -> JSONResponse:
    logger.info(
        "Validation failed for %s: %s",
        sanitize_for_log(json.dumps(payload.model_dump(by_alias=True))),
        ", ".join(errors),
    )
    return JSONResponse(
        status_code=422,
        content=APIResponse[dict[str, str]](data=errors, error="Validation failed").model_dump(),
    )


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(store: RecordStoreDep) -> APIResponse[list[StudentResponse]]:
    """List all students in insertion order."""
    return APIResponse(data=[student_to_response(s) for s in store.list()])


@router.post("/validate", response_model=APIResponse[dict[str, str]])
def validate_student(payload: StudentPayload) -> APIResponse[dict[str, str]]:
    """Check a student without storing it. An empty map means valid."""
    return APIResponse(data=error_messages(validate(payload.to_student())))


@router.get("/export", response_class=PlainTextResponse)
def export_students(store: RecordStoreDep, settings: SettingsDep) -> PlainTextResponse:
    """Download all students as a pretty-printed JSON text file."""
    payload = store.export(indent=settings.export_indent)
    return PlainTextResponse(
        payload,
        headers={"Content-Disposition": f'attachment; filename="{settings.export_filename}"'},
    )


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(
    payload: StudentPayload, store: RecordStoreDep
) -> APIResponse[StudentResponse] | JSONResponse:
    """Add a new student."""
    student = payload.to_student()
    errors = validate(student)
    if errors:
        return _validation_failed(payload, error_messages(errors))
    created = store.add(student)
    return APIResponse(data=student_to_response(created))


@router.put("/{student_id}", response_model=APIResponse[StudentResponse])
def update_student(
    student_id: str, payload: StudentPayload, store: RecordStoreDep
) -> APIResponse[StudentResponse] | JSONResponse:
    """Replace a student wholesale."""
    student = payload.to_student()
    errors = validate(student)
    if errors:
        return _validation_failed(payload, error_messages(errors))
    updated = store.update(student_id, student)
    return APIResponse(data=student_to_response(updated))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, store: RecordStoreDep) -> None:
    """Delete a student. Unknown IDs are ignored."""
    store.delete(student_id)
