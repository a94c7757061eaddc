"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from satya.domain.model.report import Report
from satya.domain.value import ReportId


class ReportRepository(ABC):
    """Repository for Report entity.

    Defines the contract for report persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(self, status: str, limit: int) -> List[Report]:
        """Find reports with a given status, most recent first.

        Args:
            status: Report status to match
            limit: Maximum number of reports to return

        Returns:
            Reports ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Insert a new report.

        The store assigns created_at; the returned report carries it.

        Args:
            report: The report to insert

        Returns:
            The stored report
        """
        pass

    @abstractmethod
    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report row.

        Args:
            report_id: The report ID to delete

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
