"""Simulated content analysis and report drafting.

The reliability score is random; there is no real model behind it.
"""

import random
import re
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from satya.application.usecase.report import TrendingReportItem
from satya.domain.value import ReportStatus, SourceType

FLAG_THRESHOLD = 60.0
TITLE_LENGTH = 120
CANNED_REASONS = (
    "Source credibility issues",
    "Factual inconsistencies",
    "Emotional language patterns",
)
URL_PATTERN = re.compile(r"https?://", re.IGNORECASE)


class Analysis(BaseModel):
    """Result of analyzing one piece of content."""

    content: str
    reliability: float = Field(ge=0, le=100)
    message: str
    reasons: list[str]

    @property
    def flagged(self) -> bool:
        """Low-reliability content may be published as a report."""
        return self.reliability < FLAG_THRESHOLD


class ReportDraft(BaseModel):
    """Payload for ``POST /api/reports``."""

    title: str
    source_type: SourceType
    image_url: str | None = None
    headline: str | None = None
    link: str | None = None
    analysis_text: str
    reliability: float | None = None
    reasons: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    status: str = ReportStatus.PUBLISHED.value


def simulate_analysis(content: str, rng: random.Random | None = None) -> Analysis:
    rng = rng or random.Random()
    reliability = rng.random() * 100
    return Analysis(
        content=content,
        reliability=reliability,
        message=f"I've analyzed your news content. Reliability score: {reliability:.1f}%",
        reasons=list(CANNED_REASONS),
    )


def detect_source_type(text: str, has_image: bool) -> SourceType:
    if has_image:
        return SourceType.IMAGE
    if URL_PATTERN.search(text):
        return SourceType.LINK
    return SourceType.HEADLINE


def parse_tags(text: str) -> list[str]:
    """Split a comma-separated tag field, dropping blanks."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def build_report_draft(
    analysis: Analysis,
    *,
    content: str | None = None,
    image_url: str | None = None,
    tags_text: str = "",
) -> ReportDraft:
    """Build the publish payload for an analysis.

    Args:
        analysis: The analysis being published
        content: Edited content (defaults to the analyzed content)
        image_url: Public URL of an uploaded image, if any
        tags_text: Comma-separated tags

    Returns:
        Report draft
    """
    text = (content or analysis.content or "").strip()
    source_type = detect_source_type(text, bool(image_url))
    return ReportDraft(
        title=text[:TITLE_LENGTH],
        source_type=source_type,
        image_url=image_url,
        headline=text if source_type == SourceType.HEADLINE else None,
        link=text if source_type == SourceType.LINK else None,
        analysis_text=text,
        reliability=analysis.reliability,
        reasons=list(analysis.reasons),
        tags=parse_tags(tags_text),
    )


def filter_reports(
    items: Iterable[TrendingReportItem], query: str
) -> Sequence[TrendingReportItem]:
    """Case-insensitive search over title, analysis text and tags.

    ``#tag`` matches too. A blank query keeps everything.
    """
    items = list(items)
    q = query.strip().lower()
    if not q:
        return items

    def matches(item: TrendingReportItem) -> bool:
        if q in (item.title or "").lower():
            return True
        if q in (item.analysis_text or "").lower():
            return True
        return any(q in f"#{tag}".lower() for tag in item.tags)

    return [item for item in items if matches(item)]
