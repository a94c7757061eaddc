"""SQLAlchemy table definitions for SatyaMatrix.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", Text, nullable=True),
    Column("source_type", String(20), nullable=True),  # 'image' | 'headline' | 'link'
    Column("source_url", Text, nullable=True),
    Column("image_url", Text, nullable=True),  # Public storage URL
    Column("headline", Text, nullable=True),
    Column("link", Text, nullable=True),
    Column("analysis_text", Text, nullable=True),
    Column("reliability", Float, nullable=True),
    Column("tags", JSONB, nullable=False, server_default="[]"),
    Column("reasons", JSONB, nullable=False, server_default="[]"),
    Column("status", String(50), nullable=False, server_default="published"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "reliability IS NULL OR (reliability >= 0 AND reliability <= 100)",
        name="reliability_range",
    ),
)

Index(
    "idx_reports_status_created_at",
    reports_table.c.status,
    reports_table.c.created_at.desc(),
)

# ============================================================================
# REPORT VOTES TABLE
# ============================================================================
# No foreign key to reports: report deletion removes votes explicitly first
report_votes_table = Table(
    "report_votes",
    metadata,
    Column("report_id", UUID, nullable=False),
    Column("voter_id", String(255), nullable=False),
    Column("vote", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("report_id", "voter_id", name="pk_report_votes"),
    CheckConstraint("vote IN (1, -1)", name="vote_is_like_or_dislike"),
)
