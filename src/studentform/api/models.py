"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from studentform.records import Address, Student

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Student models


def _as_form_text(value: Any) -> Any:
    """Browser forms may send null or bare numbers; treat them as text."""
    if value is None:
        return ""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


class AddressPayload(BaseModel):
    """Address part of a student request.

    Fields default to empty strings so missing values are reported by the
    validator rather than rejected by the schema.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_address: str = ""
    town: str = ""
    pincode: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_form_text(value)


class StudentPayload(BaseModel):
    """Request model for adding or replacing a student."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    student_id: str = ""
    first_name: str = ""
    last_name: str = ""
    student_email: str = ""
    student_phone: str = ""
    gender: str = ""
    address: AddressPayload = AddressPayload()

    @field_validator(
        "student_id",
        "first_name",
        "last_name",
        "student_email",
        "student_phone",
        "gender",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_form_text(value)

    @field_validator("address", mode="before")
    @classmethod
    def default_address(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_student(self) -> Student:
        """Convert to a Student record."""
        return Student(
            student_id=self.student_id,
            first_name=self.first_name,
            last_name=self.last_name,
            student_email=self.student_email,
            student_phone=self.student_phone,
            gender=self.gender,
            address=Address(
                full_address=self.address.full_address,
                town=self.address.town,
                pincode=self.address.pincode,
            ),
        )


class AddressResponse(BaseModel):
    """Response model for an address."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    full_address: str
    town: str
    pincode: str


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    student_id: str
    first_name: str
    last_name: str
    student_email: str
    student_phone: str
    gender: str
    address: AddressResponse


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student record to StudentResponse."""
    return StudentResponse.model_validate(student)
