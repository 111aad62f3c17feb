"""Article view index - one JSONB row per (uuid, locale).

Revision ID: 001
Revises:
Create Date: 2026-10-16

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "article_view",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("uuid", sa.String(255), nullable=False),
        sa.Column("locale", sa.String(32), nullable=False),
        sa.Column("body", postgresql.JSONB(), nullable=False),
        sa.Column(
            "indexed_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.create_index("ix_article_view_uuid", "article_view", ["uuid"])
    op.create_index("ix_article_view_locale", "article_view", ["locale"])
    op.create_unique_constraint(
        "uq_article_view_uuid_locale", "article_view", ["uuid", "locale"]
    )


def downgrade() -> None:
    op.drop_table("article_view")
