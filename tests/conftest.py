"""Shared pytest fixtures and configuration."""

import pytest

from studentform.records import Address, Student


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def jane() -> Student:
    """A student whose every field is valid."""
    return Student(
        student_id="abc123",
        first_name="Jane",
        student_email="jane@x.com",
        student_phone="9876543210",
        gender="female",
        address=Address(full_address="12 Main St", town="Springfield", pincode="123456"),
    )


@pytest.fixture
def jane_payload() -> dict:
    """Wire-format body for the same student."""
    return {
        "studentId": "abc123",
        "firstName": "Jane",
        "studentEmail": "jane@x.com",
        "studentPhone": "9876543210",
        "gender": "female",
        "address": {"fullAddress": "12 Main St", "town": "Springfield", "pincode": "123456"},
    }
