"""Unit tests for the in-memory vote repository."""

from uuid import uuid4

import pytest

from satya.domain.model import Vote
from satya.domain.value import ReportId, VoteChoice, VoterId
from satya.persistence.repository.inmemory import InMemoryVoteRepository


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_upsert_replaces_choice(self):
        repo = InMemoryVoteRepository()
        report_id = ReportId(uuid4())
        voter = VoterId("v_x")

        first = await repo.upsert(
            Vote(report_id=report_id, voter_id=voter, choice=VoteChoice.LIKE)
        )
        second = await repo.upsert(
            Vote(report_id=report_id, voter_id=voter, choice=VoteChoice.DISLIKE)
        )

        votes = await repo.find_by_report(report_id)
        assert len(votes) == 1
        assert votes[0].choice == VoteChoice.DISLIKE
        assert second.created_at == first.created_at

    @pytest.mark.asyncio
    async def test_delete_by_report(self):
        repo = InMemoryVoteRepository()
        report_id = ReportId(uuid4())
        other_id = ReportId(uuid4())
        for voter in ("v_a", "v_b", "v_c"):
            await repo.upsert(
                Vote(report_id=report_id, voter_id=VoterId(voter), choice=VoteChoice.LIKE)
            )
        await repo.upsert(
            Vote(report_id=other_id, voter_id=VoterId("v_a"), choice=VoteChoice.LIKE)
        )

        assert await repo.delete_by_report(report_id) == 3
        assert await repo.find_by_report(report_id) == []
        assert len(await repo.find_by_report(other_id)) == 1
        assert await repo.delete_by_report(report_id) == 0
