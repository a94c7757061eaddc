"""Unit tests for ReportService."""

from collections.abc import Sequence
from uuid import uuid4

import pytest

from satya.adapter.supabase import MockBlobStorage
from satya.config import PlatformSettings, TrendingSettings
from satya.domain.error import DependencyError, NotFoundError
from satya.domain.model.report import Report
from satya.domain.model.vote import Vote, VoteTally
from satya.domain.repository import ReportRepository, VoteRepository
from satya.domain.service import (
    BlobStorage,
    ReportService,
    StorageService,
    TallyService,
)
from satya.domain.value import ReportId, VoteChoice, VoterId
from satya.persistence.repository.inmemory import (
    InMemoryReportRepository,
    InMemoryVoteRepository,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BUCKET_URL = f"{MockBlobStorage.BASE_URL}/storage/v1/object/public/reports-media"


class FailingRemoveStorage(MockBlobStorage):
    """Storage whose removals always fail."""

    async def remove(self, bucket: str, paths: Sequence[str]) -> None:
        raise DependencyError("blob storage", "remove failed: 503")


def _report(**fields) -> Report:
    return Report(id=ReportId(uuid4()), title="Claim", **fields)


class TestCreateReport:
    @pytest.mark.asyncio
    async def test_store_assigns_created_at_and_defaults(self, unit_env):
        report_service = await unit_env.get(ReportService)

        saved = await report_service.create_report(_report())

        assert saved.status == "published"
        assert saved.tags == []
        assert saved.reasons == []
        assert saved.created_at is not None


class TestListTrending:
    @pytest.mark.asyncio
    async def test_newest_first_with_tallies(self, unit_env):
        report_service = await unit_env.get(ReportService)
        vote_repo = await unit_env.get(VoteRepository)
        older = await report_service.create_report(_report())
        newer = await report_service.create_report(_report())
        await vote_repo.upsert(
            Vote(report_id=older.id, voter_id=VoterId("a"), choice=VoteChoice.LIKE)
        )

        pairs = await report_service.list_trending()

        assert [r.id for r, _ in pairs] == [newer.id, older.id]
        assert pairs[1][1] == VoteTally(likes=1, dislikes=0)
        assert pairs[0][1] == VoteTally()

    @pytest.mark.asyncio
    async def test_only_published(self, unit_env):
        report_service = await unit_env.get(ReportService)
        await report_service.create_report(_report(status="draft"))
        published = await report_service.create_report(_report())

        pairs = await report_service.list_trending()

        assert [r.id for r, _ in pairs] == [published.id]

    @pytest.mark.asyncio
    async def test_limit_is_clamped(self, unit_env):
        report_service = await unit_env.get(ReportService)
        for _ in range(5):
            await report_service.create_report(_report())

        assert len(await report_service.list_trending(2)) == 2
        assert len(await report_service.list_trending(0)) == 1
        assert len(await report_service.list_trending(-10)) == 1
        assert len(await report_service.list_trending(1000)) == 5

    def test_clamp_limit(self):
        report_service = ReportService(
            InMemoryReportRepository(),
            InMemoryVoteRepository(),
            TallyService(InMemoryVoteRepository()),
            StorageService(MockBlobStorage(), PlatformSettings()),
            TrendingSettings(),
        )

        assert report_service.clamp_limit(None) == 20
        assert report_service.clamp_limit(0) == 1
        assert report_service.clamp_limit(50) == 50
        assert report_service.clamp_limit(101) == 100


class TestDeleteReport:
    @pytest.mark.asyncio
    async def test_removes_votes_image_and_row(self, unit_env):
        report_service = await unit_env.get(ReportService)
        vote_repo = await unit_env.get(VoteRepository)
        report_repo = await unit_env.get(ReportRepository)
        storage = await unit_env.get(BlobStorage)
        storage.objects[("reports-media", "uploads/a b.png")] = b"png"
        report = await report_service.create_report(
            _report(image_url=f"{BUCKET_URL}/uploads/a%20b.png")
        )
        for voter in ("a", "b"):
            await vote_repo.upsert(
                Vote(report_id=report.id, voter_id=VoterId(voter), choice=VoteChoice.LIKE)
            )

        await report_service.delete_report(report.id, "admin@example.com")

        assert await report_repo.find_by_id(report.id) is None
        assert await vote_repo.find_by_report(report.id) == []
        assert storage.removed == ["uploads/a b.png"]
        assert ("reports-media", "uploads/a b.png") not in storage.objects

    @pytest.mark.asyncio
    async def test_blob_failure_does_not_block_deletion(self):
        """Scenario: 3 votes, failing blob removal -> (0,0) and gone from trending."""
        report_repo = InMemoryReportRepository()
        vote_repo = InMemoryVoteRepository()
        tally_service = TallyService(vote_repo)
        report_service = ReportService(
            report_repo,
            vote_repo,
            tally_service,
            StorageService(FailingRemoveStorage(), PlatformSettings()),
            TrendingSettings(),
        )
        report = await report_service.create_report(
            _report(image_url=f"{BUCKET_URL}/uploads/x.png")
        )
        for voter, choice in (("a", 1), ("b", -1), ("c", 1)):
            await vote_repo.upsert(
                Vote(report_id=report.id, voter_id=VoterId(voter), choice=VoteChoice(choice))
            )

        await report_service.delete_report(report.id, "admin@example.com")

        assert await tally_service.get_tally(report.id) == VoteTally()
        assert await report_service.list_trending() == []

    @pytest.mark.asyncio
    async def test_foreign_image_url_is_left_alone(self, unit_env):
        report_service = await unit_env.get(ReportService)
        storage = await unit_env.get(BlobStorage)
        report = await report_service.create_report(
            _report(image_url="https://elsewhere.example/cat.png")
        )

        await report_service.delete_report(report.id, "admin@example.com")

        assert storage.removed == []

    @pytest.mark.asyncio
    async def test_missing_report(self, unit_env):
        report_service = await unit_env.get(ReportService)

        with pytest.raises(NotFoundError):
            await report_service.delete_report(ReportId(uuid4()), "admin@example.com")
