"""Load translation fixtures through TranslationService."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import dispose_engine, session_scope
from app.core.exceptions import TranslationConflictError
from app.schemas.translation import TranslationDTO, TranslationRequest
from app.services.translation import TranslationService


logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed translations from a JSON fixture using TranslationService."
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON array of translations; each entry names its locale by `locale` code or `locale_id`.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate payloads and resolve locales without inserting rows.",
    )
    return parser.parse_args()


def load_entries(path: Path) -> list[dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Translation fixture not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Translation fixture must be a JSON array.")
    return data


async def seed_translations(
    session: AsyncSession,
    entries: list[dict[str, Any]],
    *,
    dry_run: bool = False,
) -> dict[str, int]:
    """Insert fixture entries, skipping duplicates and invalid rows."""
    service = TranslationService(session)
    locale_ids: dict[str, int | None] = {}
    counts = {"inserted": 0, "duplicates": 0, "invalid": 0}

    for index, entry in enumerate(entries):
        payload = dict(entry)
        code = payload.pop("locale", None)
        if code is not None and "locale_id" not in payload:
            if code not in locale_ids:
                locale = await service.get_locale_by_code(code)
                locale_ids[code] = locale.id if locale else None
            payload["locale_id"] = locale_ids[code]

        try:
            request = TranslationRequest(**payload)
        except ValidationError as exc:
            logger.warning("Entry %s is invalid: %s", index, exc.errors())
            counts["invalid"] += 1
            continue
        if not await service.locale_exists(request.locale_id):
            logger.warning("Entry %s references unknown locale %s", index, code or request.locale_id)
            counts["invalid"] += 1
            continue

        if dry_run:
            counts["inserted"] += 1
            continue
        try:
            await service.create_translation(TranslationDTO.from_request(request))
        except TranslationConflictError:
            counts["duplicates"] += 1
            continue
        counts["inserted"] += 1

    return counts


async def _main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")
    args = _parse_args()
    entries = load_entries(args.input)

    try:
        async with session_scope() as session:
            counts = await seed_translations(session, entries, dry_run=args.dry_run)
    finally:
        await dispose_engine()

    action = "validated" if args.dry_run else "inserted"
    print(
        f"{action} {counts['inserted']} translations; "
        f"{counts['duplicates']} duplicates and {counts['invalid']} invalid entries skipped."
    )
    return 0 if counts["invalid"] == 0 else 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(_main()))
