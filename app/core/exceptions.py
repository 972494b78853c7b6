"""Application error hierarchy.

Services raise these; the handlers registered in ``app.core.app`` turn them
into the standard ``{"success": false, "message": ...}`` envelope.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto a client-facing HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(AppError):
    """A write would violate a uniqueness constraint."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists."


class TranslationConflictError(ConflictError):
    default_message = (
        "translation key already exists, Please try again with different key."
    )


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class TranslationNotFoundError(NotFoundError):
    default_message = "Translation not found"

    def __init__(self, translation_id: int):
        self.translation_id = translation_id
        super().__init__()


class LocaleNotFoundError(NotFoundError):
    default_message = "Locale not found"

    def __init__(self, locale: str | int):
        self.locale = locale
        super().__init__()


class RequestValidationFailed(AppError):
    """Input rejected before reaching the service layer."""

    status_code = 422
    default_message = "The given data was invalid."

    def __init__(self, errors: dict[str, list[str]], message: str | None = None):
        self.errors = errors
        super().__init__(message)
