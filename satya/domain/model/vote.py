"""Vote entity and derived tally.

Each ballot slot (report, voter) holds at most one vote; submitting again
replaces the previous choice.
"""

from collections.abc import Iterable
from datetime import datetime

from pydantic import Field

from satya.domain.model.common import DomainModel
from satya.domain.value import ReportId, VoteChoice, VoterId


class Vote(DomainModel):
    """Vote entity.

    Identity is the composite (report_id, voter_id); the store enforces
    uniqueness and replaces on conflict.
    """

    report_id: ReportId
    voter_id: VoterId
    choice: VoteChoice
    created_at: datetime = Field(default_factory=datetime.now)


class VoteTally(DomainModel):
    """Like/dislike counts for one report, recomputed from vote rows."""

    likes: int = Field(default=0, ge=0)
    dislikes: int = Field(default=0, ge=0)

    @classmethod
    def from_choices(cls, choices: Iterable[VoteChoice]) -> "VoteTally":
        """Count choices into a tally.

        Args:
            choices: Choices of every vote row for one report

        Returns:
            The tally
        """
        likes = 0
        dislikes = 0
        for choice in choices:
            if choice == VoteChoice.LIKE:
                likes += 1
            elif choice == VoteChoice.DISLIKE:
                dislikes += 1
        return cls(likes=likes, dislikes=dislikes)

    @property
    def total(self) -> int:
        return self.likes + self.dislikes
