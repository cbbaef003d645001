"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from studentform.config import Settings
from studentform.records import RecordStore

# Global RecordStore instance (initialized on app startup)
_record_store: RecordStore | None = None


def init_record_store() -> RecordStore:
    """Initialize the global RecordStore instance."""
    global _record_store  # noqa: PLW0603
    _record_store = RecordStore()
    return _record_store


def close_record_store() -> None:
    """Drop the global RecordStore instance and its records."""
    global _record_store  # noqa: PLW0603
    _record_store = None


def get_record_store() -> Generator[RecordStore, None, None]:
    """Dependency that provides the RecordStore instance."""
    if _record_store is None:
        raise RuntimeError("RecordStore not initialized. Call init_record_store() first.")
    yield _record_store


# Type alias for dependency injection
RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]

# Global Settings instance
_settings: Settings | None = None


def init_settings(settings: Settings) -> None:
    """Initialize the global Settings instance."""
    global _settings  # noqa: PLW0603
    _settings = settings


def get_settings() -> Settings:
    """Dependency that provides the Settings, falling back to defaults."""
    return _settings if _settings is not None else Settings()


SettingsDep = Annotated[Settings, Depends(get_settings)]
