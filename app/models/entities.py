from __future__ import annotations

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    true,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin


DEVICE_TYPES = ("mobile", "tablet", "desktop")

# Largest value an Integer primary key column holds on every supported backend.
MAX_ID = 2**31 - 1


class Locale(TimestampMixin, Base):
    """Reference list of locale identifiers a translation may target."""

    __tablename__ = "locales"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)
    name: Mapped[str | None] = mapped_column(String(64), nullable=True)

    translations: Mapped[list[Translation]] = relationship(
        back_populates="locale", cascade="all, delete-orphan", passive_deletes=True
    )


class Translation(TimestampMixin, Base):
    """Localized text for a key, scoped by locale, device type and group."""

    __tablename__ = "translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    locale_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("locales.id", ondelete="cascade"), nullable=False
    )
    key: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    device_type: Mapped[str] = mapped_column(
        String(50), nullable=False, default="desktop", server_default="desktop"
    )
    group: Mapped[str] = mapped_column(
        String(50), nullable=False, default="general", server_default="general"
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true()
    )

    locale: Mapped[Locale] = relationship(
        back_populates="translations", lazy="joined", innerjoin=True
    )

    __table_args__ = (
        UniqueConstraint(
            "locale_id",
            "key",
            "device_type",
            "group",
            name="uq_translations_locale_key_device_group",
        ),
        Index("ix_translations_key", "key"),
        Index("ix_translations_device_type", "device_type"),
    )
