from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.database import get_session_factory
from app.core.exceptions import RequestValidationFailed
from app.schemas.translation import TranslationRequest
from app.services.translation import TranslationService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an AsyncSession."""
    session = get_session_factory()()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_translation_service(
    session: AsyncSession = Depends(get_db_session),
) -> TranslationService:
    """Provide TranslationService bound to the request session."""
    return TranslationService(session, get_settings())


async def get_translation_payload(
    payload: TranslationRequest,
    service: TranslationService = Depends(get_translation_service),
) -> TranslationRequest:
    """Apply the database-backed rules that the request schema cannot express."""
    if not await service.locale_exists(payload.locale_id):
        raise RequestValidationFailed(
            {"locale_id": ["The selected locale id is invalid."]}
        )
    return payload
