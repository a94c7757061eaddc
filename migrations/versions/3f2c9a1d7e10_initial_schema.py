"""initial_schema

Create the schema for SatyaMatrix:
- Reports (published analyses of misleading content)
- Report votes (one like/dislike per report and voter token)

Revision ID: 3f2c9a1d7e10
Revises:
Create Date: 2026-10-17 10:12:44.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a1d7e10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid()
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # REPORTS TABLE
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column(
            "id",
            sa.UUID(),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("source_type", sa.String(20), nullable=True),
        sa.Column("source_url", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("headline", sa.Text(), nullable=True),
        sa.Column("link", sa.Text(), nullable=True),
        sa.Column("analysis_text", sa.Text(), nullable=True),
        sa.Column("reliability", sa.Float(), nullable=True),
        sa.Column(
            "tags",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "reasons",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "status", sa.String(50), nullable=False, server_default="published"
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "reliability IS NULL OR (reliability >= 0 AND reliability <= 100)",
            name="reliability_range",
        ),
    )

    # Trending feed: published reports, newest first
    op.create_index(
        "idx_reports_status_created_at",
        "reports",
        ["status", sa.text("created_at DESC")],
    )

    # ========================================================================
    # REPORT VOTES TABLE
    # ========================================================================
    op.create_table(
        "report_votes",
        sa.Column("report_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.String(255), nullable=False),
        sa.Column("vote", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("report_id", "voter_id", name="pk_report_votes"),
        sa.CheckConstraint("vote IN (1, -1)", name="vote_is_like_or_dislike"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("report_votes")
    op.drop_index("idx_reports_status_created_at", table_name="reports")
    op.drop_table("reports")
