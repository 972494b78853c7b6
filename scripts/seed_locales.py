"""Seed the locales reference table."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import dispose_engine, session_scope
from app.models import Locale


DEFAULT_LOCALES: list[dict[str, str]] = [
    {"code": "en", "name": "English"},
    {"code": "es", "name": "Spanish"},
    {"code": "fr", "name": "French"},
    {"code": "de", "name": "German"},
    {"code": "it", "name": "Italian"},
    {"code": "pt", "name": "Portuguese"},
    {"code": "nl", "name": "Dutch"},
    {"code": "ja", "name": "Japanese"},
    {"code": "zh", "name": "Chinese"},
    {"code": "ar", "name": "Arabic"},
]


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed locale reference data.")
    parser.add_argument(
        "--input",
        type=Path,
        help="Optional JSON array of {code, name} objects; defaults to the built-in list.",
    )
    parser.add_argument(
        "--count",
        type=int,
        help="Only seed the first N locales.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be inserted without committing.",
    )
    return parser.parse_args()


def load_locales(path: Path | None) -> list[dict[str, Any]]:
    if path is None:
        return [dict(item) for item in DEFAULT_LOCALES]
    if not path.exists():
        raise FileNotFoundError(f"Locale fixture not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Locale fixture must be a JSON array.")
    for entry in data:
        if not isinstance(entry, dict) or not str(entry.get("code") or "").strip():
            raise ValueError(f"Locale entry is missing a code: {entry!r}")
    return data


async def seed_locales(
    session: AsyncSession,
    locales: list[dict[str, Any]],
    *,
    dry_run: bool = False,
) -> tuple[int, int]:
    """Insert locales whose code is not present yet; returns (inserted, skipped)."""
    result = await session.execute(select(Locale.code))
    existing = set(result.scalars().all())
    inserted = 0
    skipped = 0

    for entry in locales:
        code = str(entry["code"]).strip()
        if code in existing:
            skipped += 1
            continue
        session.add(Locale(code=code, name=entry.get("name")))
        existing.add(code)
        inserted += 1

    if dry_run:
        await session.rollback()
    else:
        await session.commit()
    return inserted, skipped


async def _main() -> int:
    args = _parse_args()
    locales = load_locales(args.input)
    if args.count is not None:
        locales = locales[: max(args.count, 0)]

    try:
        async with session_scope() as session:
            inserted, skipped = await seed_locales(session, locales, dry_run=args.dry_run)
    finally:
        await dispose_engine()

    action = "validated" if args.dry_run else "inserted"
    print(
        f"{action} {inserted} locale{'' if inserted == 1 else 's'}, "
        f"skipped {skipped} existing{' (dry run)' if args.dry_run else ''}."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(_main()))
