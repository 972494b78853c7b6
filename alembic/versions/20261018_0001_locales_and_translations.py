"""Create locales and translations tables."""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "locales",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(length=16), nullable=False),
        sa.Column("name", sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_locales"),
        sa.UniqueConstraint("code", name="uq_locales_code"),
    )

    op.create_table(
        "translations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("locale_id", sa.Integer(), nullable=False),
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("device_type", sa.String(length=50), server_default="desktop", nullable=False),
        sa.Column("group", sa.String(length=50), server_default="general", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["locale_id"],
            ["locales.id"],
            name="fk_translations_locale_id",
            ondelete="cascade",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_translations"),
        sa.UniqueConstraint(
            "locale_id",
            "key",
            "device_type",
            "group",
            name="uq_translations_locale_key_device_group",
        ),
    )
    op.create_index("ix_translations_key", "translations", ["key"], unique=False)
    op.create_index("ix_translations_device_type", "translations", ["device_type"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_translations_device_type", table_name="translations")
    op.drop_index("ix_translations_key", table_name="translations")
    op.drop_table("translations")
    op.drop_table("locales")
