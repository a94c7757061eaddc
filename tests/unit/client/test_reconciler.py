"""Unit tests for optimistic vote reconciliation."""

import asyncio

import pytest

from satya.client import (
    ApiError,
    InMemoryStore,
    LocalVoteState,
    VoteReconciler,
    VoteSubmitter,
    apply_transition,
)
from satya.domain.model import VoteTally


class FakeSubmitter(VoteSubmitter):
    """Answers with a fixed tally, or raises."""

    def __init__(self, tally: VoteTally | None = None, error: Exception | None = None):
        self.tally = tally or VoteTally()
        self.error = error
        self.calls: list[tuple[str, str, int]] = []

    async def submit_vote(self, report_id: str, voter_id: str, choice: int) -> VoteTally:
        self.calls.append((report_id, voter_id, choice))
        if self.error is not None:
            raise self.error
        return self.tally


def _reconciler(submitter: VoteSubmitter) -> tuple[VoteReconciler, LocalVoteState]:
    state = LocalVoteState(InMemoryStore())
    return VoteReconciler(state, submitter), state


class TestApplyTransition:
    @pytest.mark.parametrize(
        "previous, choice, expected",
        [
            (0, 1, (3, 1)),
            (0, -1, (2, 2)),
            (1, -1, (1, 2)),
            (-1, 1, (3, 0)),
            (1, 1, (2, 1)),
        ],
    )
    def test_transitions(self, previous, choice, expected):
        result = apply_transition(VoteTally(likes=2, dislikes=1), previous, choice)

        assert (result.likes, result.dislikes) == expected

    def test_never_negative(self):
        result = apply_transition(VoteTally(likes=0, dislikes=0), 1, -1)

        assert (result.likes, result.dislikes) == (0, 1)


class TestVoteReconciler:
    @pytest.mark.asyncio
    async def test_server_tally_overwrites_optimistic(self):
        submitter = FakeSubmitter(VoteTally(likes=10, dislikes=4))
        reconciler, state = _reconciler(submitter)
        reconciler.seed([("r1", VoteTally(likes=2, dislikes=1))])

        tally = await reconciler.vote("r1", 1)

        assert tally == VoteTally(likes=10, dislikes=4)
        assert reconciler.displayed_tally("r1") == tally
        assert reconciler.choice_for("r1") == 1
        assert submitter.calls == [("r1", state.voter_id(), 1)]

    @pytest.mark.asyncio
    async def test_failure_rolls_back(self):
        submitter = FakeSubmitter(error=ApiError("down", status_code=500))
        reconciler, state = _reconciler(submitter)
        reconciler.seed([("r1", VoteTally(likes=2, dislikes=1))])
        state.set_choice("r1", -1)

        with pytest.raises(ApiError):
            await reconciler.vote("r1", 1)

        assert reconciler.displayed_tally("r1") == VoteTally(likes=2, dislikes=1)
        assert reconciler.choice_for("r1") == -1

    @pytest.mark.asyncio
    async def test_same_choice_is_noop(self):
        submitter = FakeSubmitter()
        reconciler, state = _reconciler(submitter)
        state.set_choice("r1", 1)

        await reconciler.vote("r1", 1)

        assert submitter.calls == []

    @pytest.mark.asyncio
    async def test_voter_id_is_stable(self):
        submitter = FakeSubmitter()
        reconciler, state = _reconciler(submitter)

        await reconciler.vote("r1", 1)
        await reconciler.vote("r2", -1)

        voters = {voter for _, voter, _ in submitter.calls}
        assert len(voters) == 1
        assert voters.pop().startswith("v_")


class GatedSubmitter(VoteSubmitter):
    """Holds likes until released; dislikes answer at once."""

    def __init__(self, like_error: Exception | None = None):
        self.release = asyncio.Event()
        self.like_error = like_error

    async def submit_vote(self, report_id: str, voter_id: str, choice: int) -> VoteTally:
        if choice == 1:
            await self.release.wait()
            if self.like_error is not None:
                raise self.like_error
            return VoteTally(likes=1, dislikes=0)
        return VoteTally(likes=0, dislikes=1)


class TestOverlappingVotes:
    @pytest.mark.asyncio
    async def test_late_failure_keeps_newer_vote(self):
        submitter = GatedSubmitter(like_error=ApiError("timeout", status_code=504))
        reconciler, _ = _reconciler(submitter)

        like = asyncio.create_task(reconciler.vote("r1", 1))
        await asyncio.sleep(0)
        await reconciler.vote("r1", -1)
        submitter.release.set()

        with pytest.raises(ApiError):
            await like

        assert reconciler.choice_for("r1") == -1
        assert reconciler.displayed_tally("r1") == VoteTally(likes=0, dislikes=1)

    @pytest.mark.asyncio
    async def test_late_success_does_not_overwrite_newer_vote(self):
        submitter = GatedSubmitter()
        reconciler, _ = _reconciler(submitter)

        like = asyncio.create_task(reconciler.vote("r1", 1))
        await asyncio.sleep(0)
        await reconciler.vote("r1", -1)
        submitter.release.set()
        await like

        assert reconciler.choice_for("r1") == -1
        assert reconciler.displayed_tally("r1") == VoteTally(likes=0, dislikes=1)
