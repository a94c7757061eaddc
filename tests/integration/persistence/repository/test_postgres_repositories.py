"""Integration tests for the PostgreSQL repositories.

Needs a migrated database at DATABASE__URL (``scripts/run_migrations.py``).
"""

import os
from uuid import uuid4

import pytest

from satya.domain.model import Report, Vote
from satya.domain.repository import ReportRepository, VoteRepository
from satya.domain.service import TallyService
from satya.domain.value import ReportId, VoteChoice, VoterId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="DATABASE__URL not set"
)

integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresRepositories:
    @pytest.mark.asyncio
    async def test_upsert_keeps_one_row_per_slot(self, integration_env):
        report_repo = await integration_env.get(ReportRepository)
        vote_repo = await integration_env.get(VoteRepository)
        tally_service = await integration_env.get(TallyService)

        report = await report_repo.save(Report(id=ReportId(uuid4()), title="Claim"))
        voter = VoterId(f"v_{uuid4().hex[:20]}")

        await vote_repo.upsert(
            Vote(report_id=report.id, voter_id=voter, choice=VoteChoice.LIKE)
        )
        await vote_repo.upsert(
            Vote(report_id=report.id, voter_id=voter, choice=VoteChoice.DISLIKE)
        )

        tally = await tally_service.get_tally(report.id)
        assert (tally.likes, tally.dislikes) == (0, 1)

        assert await vote_repo.delete_by_report(report.id) == 1
        assert await report_repo.delete(report.id) is True

    @pytest.mark.asyncio
    async def test_save_assigns_created_at(self, integration_env):
        report_repo = await integration_env.get(ReportRepository)

        first = await report_repo.save(Report(id=ReportId(uuid4()), title="first"))
        second = await report_repo.save(Report(id=ReportId(uuid4()), title="second"))

        newest = await report_repo.find_by_status("published", 2)
        # NOW() is fixed per transaction, so both rows share a timestamp
        assert {r.id for r in newest} == {first.id, second.id}
        assert first.created_at <= second.created_at

        for report in (first, second):
            await report_repo.delete(report.id)
