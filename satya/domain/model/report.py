"""Report entity.

Reports are community-published records of content the assistant flagged,
with the (simulated) reliability score and the reasons behind it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from satya.domain.model.common import DomainModel
from satya.domain.value import ReportId, ReportStatus, SourceType


class Report(DomainModel):
    """Report entity.

    Business rules:
    - Created once, never edited in place
    - Deleting a report deletes its votes first, then its image
    - created_at is assigned by the store and orders the trending feed
    """

    id: ReportId
    title: Optional[str] = None
    source_type: Optional[SourceType] = None
    source_url: Optional[str] = None
    image_url: Optional[str] = None
    headline: Optional[str] = None
    link: Optional[str] = None
    analysis_text: Optional[str] = None
    reliability: Optional[float] = Field(default=None, ge=0, le=100)
    tags: list[str] = Field(default_factory=list)
    reasons: list[str] = Field(default_factory=list)
    status: str = ReportStatus.PUBLISHED.value
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_published(self) -> bool:
        return self.status == ReportStatus.PUBLISHED.value
