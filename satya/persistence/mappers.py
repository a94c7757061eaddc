"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from satya.domain.model import Report, Vote
from satya.domain.value import ReportId, SourceType, VoteChoice, VoterId


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model.

    Args:
        row: Database row as dict

    Returns:
        Report domain model
    """
    return Report(
        id=ReportId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        title=row.get("title"),
        source_type=SourceType(row["source_type"]) if row.get("source_type") else None,
        source_url=row.get("source_url"),
        image_url=row.get("image_url"),
        headline=row.get("headline"),
        link=row.get("link"),
        analysis_text=row.get("analysis_text"),
        reliability=row.get("reliability"),
        tags=list(row.get("tags") or []),
        reasons=list(row.get("reasons") or []),
        status=row["status"],
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to an insert dict.

    created_at is left out so the database assigns it.

    Args:
        report: Report domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": report.id,
        "title": report.title,
        "source_type": report.source_type.value if report.source_type else None,
        "source_url": report.source_url,
        "image_url": report.image_url,
        "headline": report.headline,
        "link": report.link,
        "analysis_text": report.analysis_text,
        "reliability": report.reliability,
        "tags": list(report.tags),
        "reasons": list(report.reasons),
        "status": report.status,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        report_id=ReportId(
            UUID(row["report_id"])
            if isinstance(row["report_id"], str)
            else row["report_id"]
        ),
        voter_id=VoterId(row["voter_id"]),
        choice=VoteChoice(row["vote"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to an upsert dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "report_id": vote.report_id,
        "voter_id": vote.voter_id,
        "vote": vote.choice.value,
    }
