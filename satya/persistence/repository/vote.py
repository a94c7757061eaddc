"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from satya.domain.model import Vote
from satya.domain.repository import VoteRepository
from satya.domain.value import ReportId, VoterId
from satya.persistence.mappers import row_to_vote, vote_to_dict
from satya.persistence.tables import report_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_report_and_voter(
        self, report_id: ReportId, voter_id: VoterId
    ) -> Optional[Vote]:
        """Find the vote in one ballot slot."""
        stmt = select(report_votes_table).where(
            and_(
                report_votes_table.c.report_id == report_id,
                report_votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_report(self, report_id: ReportId) -> List[Vote]:
        """Find all votes on a report.

        Runs inside a SAVEPOINT so a failed read does not abort the
        surrounding transaction for the reads that follow it.
        """
        stmt = select(report_votes_table).where(
            report_votes_table.c.report_id == report_id
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_vote(row._asdict()) for row in rows]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, replacing the choice on (report_id, voter_id) conflict."""
        with logfire.span(
            "vote_repository.upsert",
            report_id=str(vote.report_id),
            voter_id=vote.voter_id,
        ):
            stmt = insert(report_votes_table).values(**vote_to_dict(vote))
            stmt = stmt.on_conflict_do_update(
                index_elements=[
                    report_votes_table.c.report_id,
                    report_votes_table.c.voter_id,
                ],
                set_={"vote": stmt.excluded.vote, "updated_at": func.now()},
            ).returning(report_votes_table)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_vote(row._asdict()) if row else vote

    async def delete_by_report(self, report_id: ReportId) -> int:
        """Delete every vote on a report."""
        stmt = delete(report_votes_table).where(
            report_votes_table.c.report_id == report_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
