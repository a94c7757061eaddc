"""In-memory report repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from satya.domain.model.report import Report
from satya.domain.repository.report import ReportRepository
from satya.domain.value import ReportId


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}
        # Insertion order breaks created_at ties
        self._sequence: dict[ReportId, int] = {}

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_by_status(self, status: str, limit: int) -> list[Report]:
        """Find reports by status, newest first."""
        reports = [r for r in self._reports.values() if r.status == status]
        reports.sort(key=lambda r: (r.created_at, self._sequence[r.id]), reverse=True)
        return reports[:limit]

    async def save(self, report: Report) -> Report:
        """Insert a report, assigning created_at."""
        stored = report.model_copy(update={"created_at": datetime.now(timezone.utc)})
        self._reports[stored.id] = stored
        self._sequence[stored.id] = len(self._sequence)
        return stored

    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report."""
        self._sequence.pop(report_id, None)
        return self._reports.pop(report_id, None) is not None
