"""Submit vote use case."""

from typing import Any

from pydantic import BaseModel

from satya.application.usecase.base import BaseUseCase
from satya.domain.model.vote import VoteTally
from satya.domain.service import VoteService
from satya.domain.value import parse_report_id


class SubmitVoteRequest(BaseModel):
    """Submit vote request.

    voter_id and vote are validated by the domain service so that bad
    values surface as domain validation errors.
    """

    report_id: str
    voter_id: Any = None
    vote: Any = None


class VoteTallyResponse(BaseModel):
    """Like/dislike counts for a report."""

    likes: int
    dislikes: int

    @classmethod
    def from_tally(cls, tally: VoteTally) -> "VoteTallyResponse":
        return cls(likes=tally.likes, dislikes=tally.dislikes)


class SubmitVoteUseCase(BaseUseCase[SubmitVoteRequest, VoteTallyResponse]):
    """Use case for casting or changing a vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> VoteTallyResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            The report's recomputed tally

        Raises:
            MissingReportIdError: If the report id is invalid or unknown
            MissingVoterIdError: If no voter token was supplied
            InvalidChoiceError: If the vote is not 1 or -1
            DependencyError: If the row store fails
        """
        report_id = parse_report_id(request.report_id)
        tally = await self.vote_service.submit_vote(
            report_id, request.voter_id, request.vote
        )
        return VoteTallyResponse.from_tally(tally)
