from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query

from app.api.deps import get_translation_payload, get_translation_service
from app.models import MAX_ID
from app.schemas.translation import (
    ApiResponse,
    TranslationDTO,
    TranslationFilters,
    TranslationPage,
    TranslationRequest,
    TranslationResource,
)
from app.services.translation import TranslationService

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[TranslationPage],
    response_model_exclude_none=True,
    summary="List translations with optional filters and pagination.",
)
async def list_translations(
    key: str | None = Query(default=None, description="Filter by key (partial match)."),
    value: str | None = Query(default=None, description="Filter by value (partial match)."),
    locale_id: int | None = Query(
        default=None, ge=1, le=MAX_ID, description="Filter by locale ID."
    ),
    device_type: str | None = Query(
        default=None, description="Filter by device type (mobile/tablet/desktop)."
    ),
    group: str | None = Query(default=None, description="Filter by translation group."),
    per_page: int | None = Query(
        default=None,
        description="Items per page (default 15, clamped to 1-100).",
    ),
    page: int | None = Query(default=None, description="Page number, starting at 1."),
    service: TranslationService = Depends(get_translation_service),
) -> ApiResponse[TranslationPage]:
    filters = TranslationFilters(
        key=key,
        value=value,
        locale_id=locale_id,
        device_type=device_type,
        group=group,
        per_page=per_page,
        page=page,
    )
    translations = await service.search_translations(filters)
    return ApiResponse(message="Translations data", data=translations)


@router.post(
    "",
    response_model=ApiResponse[TranslationResource],
    response_model_exclude_none=True,
    summary="Create a translation.",
    responses={400: {"description": "Duplicate translation"}},
)
async def create_translation(
    payload: TranslationRequest = Depends(get_translation_payload),
    service: TranslationService = Depends(get_translation_service),
) -> ApiResponse[TranslationResource]:
    translation = await service.create_translation(TranslationDTO.from_request(payload))
    return ApiResponse(
        message="Translation added successfully.",
        data=TranslationResource.from_entity(translation),
    )


@router.get(
    "/locale/{locale}",
    response_model=ApiResponse[list[TranslationResource]],
    response_model_exclude_none=True,
    summary="List every translation for a locale code.",
    responses={404: {"description": "Locale not found"}},
)
async def list_translations_by_locale(
    locale: str = Path(..., description="Locale code, e.g. en, es, fr."),
    device_type: str | None = Query(default=None, description="Device type filter."),
    service: TranslationService = Depends(get_translation_service),
) -> ApiResponse[list[TranslationResource]]:
    translations = await service.get_translations_by_locale(locale, device_type)
    return ApiResponse(
        message="Translation data",
        data=[TranslationResource.from_entity(item) for item in translations],
    )


@router.get(
    "/{translation_id}",
    response_model=ApiResponse[TranslationResource],
    response_model_exclude_none=True,
    summary="Fetch a translation by ID.",
    responses={404: {"description": "Translation not found"}},
)
async def get_translation(
    translation_id: int = Path(..., description="Translation ID."),
    service: TranslationService = Depends(get_translation_service),
) -> ApiResponse[TranslationResource]:
    translation = await service.get_translation(translation_id)
    return ApiResponse(
        message="Translation detail",
        data=TranslationResource.from_entity(translation),
    )


@router.put(
    "/{translation_id}",
    response_model=ApiResponse[TranslationResource],
    response_model_exclude_none=True,
    summary="Replace a translation's fields.",
    responses={
        400: {"description": "Duplicate translation"},
        404: {"description": "Translation not found"},
    },
)
async def update_translation(
    translation_id: int = Path(..., description="Translation ID."),
    payload: TranslationRequest = Depends(get_translation_payload),
    service: TranslationService = Depends(get_translation_service),
) -> ApiResponse[TranslationResource]:
    dto = TranslationDTO.from_request(payload, id=translation_id)
    translation = await service.update_translation(translation_id, dto)
    return ApiResponse(
        message="Translation updated successfully.",
        data=TranslationResource.from_entity(translation),
    )


@router.delete(
    "/{translation_id}",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
    summary="Delete a translation.",
    responses={404: {"description": "Translation not found"}},
)
async def delete_translation(
    translation_id: int = Path(..., description="Translation ID."),
    service: TranslationService = Depends(get_translation_service),
) -> ApiResponse[None]:
    await service.delete_translation(translation_id)
    return ApiResponse(message="Translation deleted successfully")
