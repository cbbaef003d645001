"""REST API for the student details form."""

from studentform.api.app import app, create_app
from studentform.api.models import (
    APIResponse,
    StudentPayload,
    StudentResponse,
)

__all__ = [
    "APIResponse",
    "StudentPayload",
    "StudentResponse",
    "app",
    "create_app",
]
