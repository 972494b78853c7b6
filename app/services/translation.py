from __future__ import annotations

import logging
import math
from typing import Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import AppSettings, get_settings
from app.core.exceptions import (
    LocaleNotFoundError,
    TranslationConflictError,
    TranslationNotFoundError,
)
from app.models import MAX_ID, Locale, Translation
from app.schemas.translation import (
    TranslationDTO,
    TranslationFilters,
    TranslationPage,
    TranslationResource,
)


logger = logging.getLogger(__name__)


class TranslationService:
    """Create, query and maintain locale-scoped translation records.

    Writes commit immediately so a uniqueness violation only rolls back the
    offending statement's transaction and never leaks partial state.
    """

    def __init__(self, session: AsyncSession, settings: AppSettings | None = None):
        self._session = session
        self._settings = settings or get_settings()

    async def search_translations(
        self, filters: TranslationFilters | None = None
    ) -> TranslationPage:
        """Return one page of translations matching the filters, ordered by id."""
        filters = filters or TranslationFilters()
        per_page = self._clamp_per_page(filters.per_page)
        page = min(max(filters.page or 1, 1), MAX_ID)

        count_stmt = self._apply_filters(select(func.count(Translation.id)), filters)
        total = int((await self._session.execute(count_stmt)).scalar_one() or 0)

        stmt = (
            self._apply_filters(select(Translation), filters)
            .order_by(Translation.id.asc())
            .limit(per_page)
            .offset((page - 1) * per_page)
        )
        result = await self._session.execute(stmt)
        records = result.scalars().all()

        return TranslationPage(
            items=[TranslationResource.from_entity(record) for record in records],
            total=total,
            page=page,
            per_page=per_page,
            last_page=max(math.ceil(total / per_page), 1),
        )

    async def create_translation(self, dto: TranslationDTO) -> Translation:
        translation = Translation(
            locale_id=dto.locale_id,
            key=dto.key,
            value=dto.value,
            device_type=dto.device_type,
            group=dto.group,
            is_active=dto.is_active,
        )
        self._session.add(translation)
        await self._commit_or_conflict()
        await self._session.refresh(translation)
        logger.info(
            "Created translation %s (%s/%s)", translation.id, dto.key, dto.device_type
        )
        return translation

    async def get_translation(self, translation_id: int) -> Translation:
        if not _is_storable_id(translation_id):
            raise TranslationNotFoundError(translation_id)
        translation = await self._session.get(Translation, translation_id)
        if translation is None:
            raise TranslationNotFoundError(translation_id)
        return translation

    async def update_translation(
        self, translation_id: int, dto: TranslationDTO
    ) -> Translation:
        translation = await self.get_translation(translation_id)

        translation.locale_id = dto.locale_id
        translation.key = dto.key
        translation.value = dto.value
        translation.device_type = dto.device_type
        translation.group = dto.group
        translation.is_active = dto.is_active

        await self._commit_or_conflict()
        await self._session.refresh(translation)
        logger.info("Updated translation %s", translation.id)
        return translation

    async def delete_translation(self, translation_id: int) -> None:
        translation = await self.get_translation(translation_id)
        await self._session.delete(translation)
        await self._session.commit()
        logger.info("Deleted translation %s", translation_id)

    async def get_translations_by_locale(
        self, locale_code: str, device_type: str | None = None
    ) -> Sequence[Translation]:
        """Return every translation for a locale code, optionally per device type."""
        locale = await self.get_locale_by_code(locale_code)
        if locale is None:
            raise LocaleNotFoundError(locale_code)

        stmt = select(Translation).where(Translation.locale_id == locale.id)
        if device_type:
            stmt = stmt.where(Translation.device_type == device_type)
        stmt = stmt.order_by(Translation.id.asc())

        result = await self._session.execute(stmt)
        return result.scalars().all()

    async def get_locale_by_code(self, code: str) -> Locale | None:
        result = await self._session.execute(select(Locale).where(Locale.code == code))
        return result.scalar_one_or_none()

    async def locale_exists(self, locale_id: int) -> bool:
        if not _is_storable_id(locale_id):
            return False
        return await self._session.get(Locale, locale_id) is not None

    async def _commit_or_conflict(self) -> None:
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.warning("Rejected conflicting translation write: %s", exc.orig)
            raise TranslationConflictError() from exc

    def _clamp_per_page(self, per_page: int | None) -> int:
        if per_page is None:
            per_page = self._settings.default_per_page
        return min(max(per_page, 1), self._settings.max_per_page)

    def _apply_filters(self, stmt: Select, filters: TranslationFilters) -> Select:
        conditions: list = []
        if filters.key:
            conditions.append(Translation.key.icontains(filters.key, autoescape=True))
        if filters.value:
            conditions.append(Translation.value.icontains(filters.value, autoescape=True))
        if filters.locale_id is not None:
            conditions.append(Translation.locale_id == filters.locale_id)
        if filters.device_type:
            conditions.append(Translation.device_type == filters.device_type)
        if filters.group:
            conditions.append(Translation.group == filters.group)

        if conditions:
            stmt = stmt.where(*conditions)
        return stmt


def _is_storable_id(value: int) -> bool:
    return 1 <= value <= MAX_ID
