"""Optimistic vote reconciliation on the client.

The displayed counters move immediately when the user votes, then get
overwritten by the server's tally. If the submission fails, the local
choice and the counters both go back to what they were. A vote that has
been superseded by a newer vote on the same report leaves the slot alone.
"""

from collections.abc import Iterable

import logfire

from satya.domain.model.vote import VoteTally

from .api import VoteSubmitter
from .store import LocalVoteState


def apply_transition(tally: VoteTally, previous: int, choice: int) -> VoteTally:
    """Optimistic counters after moving a slot from ``previous`` to ``choice``.

    previous/choice: 1 like, -1 dislike, 0 none. Counters never go below 0.
    """
    likes, dislikes = tally.likes, tally.dislikes
    if previous == choice:
        return tally
    if previous == 1:
        likes = max(0, likes - 1)
    elif previous == -1:
        dislikes = max(0, dislikes - 1)
    if choice == 1:
        likes += 1
    elif choice == -1:
        dislikes += 1
    return VoteTally(likes=likes, dislikes=dislikes)


class VoteReconciler:
    """Keeps displayed tallies and local choices in step with the server."""

    def __init__(self, state: LocalVoteState, submitter: VoteSubmitter) -> None:
        """Initialize reconciler.

        Args:
            state: Persisted voter token and choices
            submitter: Sends votes to the server
        """
        self.state = state
        self.submitter = submitter
        self.board: dict[str, VoteTally] = {}
        # Bumped per vote; only the latest vote on a report may touch its slot
        self._generations: dict[str, int] = {}

    def seed(self, tallies: Iterable[tuple[str, VoteTally]]) -> None:
        """Load counters as fetched from the server."""
        for report_id, tally in tallies:
            self.board[report_id] = tally

    def displayed_tally(self, report_id: str) -> VoteTally:
        return self.board.get(report_id, VoteTally())

    def choice_for(self, report_id: str) -> int:
        return self.state.choice_for(report_id)

    async def vote(self, report_id: str, choice: int) -> VoteTally:
        """Vote with an optimistic update.

        Args:
            report_id: Report being voted on
            choice: 1 like, -1 dislike

        Returns:
            The displayed tally after reconciliation

        Raises:
            Whatever the submitter raised, after rolling back (unless a
            newer vote on the same report has already replaced this one)
        """
        previous = self.state.choice_for(report_id)
        if previous == choice:
            return self.displayed_tally(report_id)

        snapshot = self.displayed_tally(report_id)
        generation = self._generations.get(report_id, 0) + 1
        self._generations[report_id] = generation
        self.board[report_id] = apply_transition(snapshot, previous, choice)
        self.state.set_choice(report_id, choice)

        try:
            server_tally = await self.submitter.submit_vote(
                report_id, self.state.voter_id(), choice
            )
        except Exception as e:
            if self._generations[report_id] == generation:
                self.board[report_id] = snapshot
                self.state.set_choice(report_id, previous)
                logfire.warn(
                    "Vote rolled back", report_id=report_id, choice=choice, error=str(e)
                )
            else:
                # A newer vote owns the slot now
                logfire.warn(
                    "Superseded vote failed",
                    report_id=report_id,
                    choice=choice,
                    error=str(e),
                )
            raise

        if self._generations[report_id] != generation:
            logfire.info("Superseded vote confirmed", report_id=report_id, choice=choice)
            return self.displayed_tally(report_id)

        self.board[report_id] = server_tally
        return server_tally
