"""SQLAlchemy models and declarative base."""

from app.models.base import Base  # noqa: F401
from app.models.entities import (  # noqa: F401
    DEVICE_TYPES,
    MAX_ID,
    Locale,
    Translation,
)

__all__ = [
    "Base",
    "DEVICE_TYPES",
    "MAX_ID",
    "Locale",
    "Translation",
]
