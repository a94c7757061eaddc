"""PostgreSQL implementation of Report repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from satya.domain.model import Report
from satya.domain.repository import ReportRepository
from satya.domain.value import ReportId
from satya.persistence.mappers import report_to_dict, row_to_report
from satya.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        with logfire.span("report_repository.find_by_id", report_id=str(report_id)):
            stmt = select(reports_table).where(reports_table.c.id == report_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Report not found", report_id=str(report_id))
                return None

            return row_to_report(row._asdict())

    async def find_by_status(self, status: str, limit: int) -> List[Report]:
        """Find reports by status, newest first."""
        with logfire.span(
            "report_repository.find_by_status", status=status, limit=limit
        ):
            stmt = (
                select(reports_table)
                .where(reports_table.c.status == status)
                .order_by(desc(reports_table.c.created_at))
                .limit(limit)
            )
            result = await self.session.execute(stmt)
            return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def save(self, report: Report) -> Report:
        """Insert a report and return it with the store-assigned created_at."""
        with logfire.span("report_repository.save", report_id=str(report.id)):
            stmt = (
                insert(reports_table)
                .values(**report_to_dict(report))
                .returning(reports_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_report(row._asdict()) if row else report

    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report row."""
        stmt = delete(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
