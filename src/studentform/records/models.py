"""Data models for student records."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Any


class Gender(StrEnum):
    """Gender options offered by the form."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class FieldPath(StrEnum):
    """Form fields, valued by their dotted path in the wire format."""

    STUDENT_ID = "studentId"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    STUDENT_EMAIL = "studentEmail"
    STUDENT_PHONE = "studentPhone"
    GENDER = "gender"
    ADDRESS_FULL_ADDRESS = "address.fullAddress"
    ADDRESS_TOWN = "address.town"
    ADDRESS_PINCODE = "address.pincode"

    @property
    def is_address(self) -> bool:
        """Whether the field lives on the nested address."""
        return self in _ADDRESS_ATTRS

    @property
    def attr(self) -> str:
        """Attribute name on Student, or on Address for address fields."""
        if self.is_address:
            return _ADDRESS_ATTRS[self]
        return _STUDENT_ATTRS[self]

    def get(self, student: Student) -> str:
        """Read this field from a student."""
        if self.is_address:
            return getattr(student.address, self.attr)
        return getattr(student, self.attr)

    def set(self, student: Student, value: str) -> Student:
        """Return a copy of the student with this field set to value."""
        if self.is_address:
            return replace(student, address=replace(student.address, **{self.attr: value}))
        return replace(student, **{self.attr: value})


_STUDENT_ATTRS = {
    FieldPath.STUDENT_ID: "student_id",
    FieldPath.FIRST_NAME: "first_name",
    FieldPath.LAST_NAME: "last_name",
    FieldPath.STUDENT_EMAIL: "student_email",
    FieldPath.STUDENT_PHONE: "student_phone",
    FieldPath.GENDER: "gender",
}

_ADDRESS_ATTRS = {
    FieldPath.ADDRESS_FULL_ADDRESS: "full_address",
    FieldPath.ADDRESS_TOWN: "town",
    FieldPath.ADDRESS_PINCODE: "pincode",
}


@dataclass(frozen=True)
class Address:
    """Postal address of a student.

    Attributes:
        full_address: House number, street and area.
        town: City or town.
        pincode: Six digit postal code.
    """

    full_address: str = ""
    town: str = ""
    pincode: str = ""

    def to_dict(self) -> dict[str, str]:
        """Convert to the camelCase wire shape."""
        return {
            "fullAddress": self.full_address,
            "town": self.town,
            "pincode": self.pincode,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        """Create from the camelCase wire shape. Missing keys become empty strings."""
        return cls(
            full_address=data.get("fullAddress", ""),
            town=data.get("town", ""),
            pincode=data.get("pincode", ""),
        )


@dataclass(frozen=True)
class Student:
    """A student record as captured by the form.

    Gender holds the raw selected value so that an empty or unknown
    selection can be reported by the validator.

    Attributes:
        student_id: Unique key, three letters followed by three digits.
        first_name: Required given name.
        last_name: Optional family name.
        student_email: Contact email.
        student_phone: Ten digit phone number.
        gender: One of the Gender values once validated.
        address: Postal address.
    """

    student_id: str = ""
    first_name: str = ""
    last_name: str = ""
    student_email: str = ""
    student_phone: str = ""
    gender: str = ""
    address: Address = field(default_factory=Address)

    @classmethod
    def blank(cls) -> Student:
        """An empty form."""
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase wire shape."""
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "studentEmail": self.student_email,
            "studentPhone": self.student_phone,
            "gender": str(self.gender),
            "address": self.address.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Student:
        """Create from the camelCase wire shape. Missing keys become empty strings."""
        return cls(
            student_id=data.get("studentId", ""),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            student_email=data.get("studentEmail", ""),
            student_phone=data.get("studentPhone", ""),
            gender=data.get("gender", ""),
            address=Address.from_dict(data.get("address") or {}),
        )

    def __repr__(self) -> str:
        return f"<Student(student_id={self.student_id!r}, first_name={self.first_name!r})>"

