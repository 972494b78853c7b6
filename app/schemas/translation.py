from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models import DEVICE_TYPES, MAX_ID, Translation


T = TypeVar("T")


class TranslationRequest(BaseModel):
    """Validation rules for create/update payloads.

    ``locale_id`` must additionally reference an existing locale; that check
    needs the database and runs in ``app.api.deps.get_translation_payload``.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    locale_id: int = Field(
        ..., ge=1, le=MAX_ID, description="Identifier of an existing locale."
    )
    key: str = Field(..., min_length=1, max_length=255, description="Lookup key.")
    value: str = Field(..., min_length=1, description="Localized text.")
    device_type: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Target device; expected values are mobile, tablet and desktop.",
        examples=list(DEVICE_TYPES),
    )
    group: str | None = Field(default=None, max_length=50)
    is_active: bool | None = None

    @field_validator("group")
    @classmethod
    def _blank_group_is_missing(cls, value: str | None) -> str | None:
        return value or None


@dataclass(frozen=True)
class TranslationDTO:
    """Validated translation values handed to the service layer."""

    locale_id: int
    key: str
    value: str
    device_type: str = "desktop"
    group: str = "general"
    is_active: bool = True
    id: int | None = None

    @classmethod
    def from_request(
        cls, request: TranslationRequest, id: int | None = None
    ) -> TranslationDTO:
        return cls(
            id=id,
            locale_id=request.locale_id,
            key=request.key,
            value=request.value,
            device_type=request.device_type,
            group=request.group or "general",
            is_active=True if request.is_active is None else bool(request.is_active),
        )


class TranslationFilters(BaseModel):
    """Optional filters and pagination controls for listing translations."""

    key: str | None = None
    value: str | None = None
    locale_id: int | None = None
    device_type: str | None = None
    group: str | None = None
    per_page: int | None = None
    page: int | None = None


class TranslationResource(BaseModel):
    """Serialized translation returned to clients."""

    id: int
    locale_id: int
    locale: str
    key: str
    value: str
    device_type: str
    group: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, translation: Translation) -> TranslationResource:
        return cls(
            id=translation.id,
            locale_id=translation.locale_id,
            locale=translation.locale.code,
            key=translation.key,
            value=translation.value,
            device_type=translation.device_type,
            group=translation.group,
            is_active=translation.is_active,
            created_at=translation.created_at,
            updated_at=translation.updated_at,
        )


class TranslationPage(BaseModel):
    """One page of translations plus pagination metadata."""

    items: list[TranslationResource]
    total: int
    page: int
    per_page: int
    last_page: int


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope shared by every endpoint."""

    success: bool = True
    message: str
    data: T | None = None


class ErrorResponse(BaseModel):
    """Error envelope; ``errors`` is only present for validation failures."""

    success: bool = False
    message: str
    errors: dict[str, list[str]] | None = None

    def as_content(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
