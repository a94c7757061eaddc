"""Get vote tally use case."""

from pydantic import BaseModel

from satya.application.usecase.base import BaseUseCase
from satya.domain.service import TallyService
from satya.domain.value import parse_report_id

from .submit_vote import VoteTallyResponse


class GetVoteTallyRequest(BaseModel):
    """Get vote tally request."""

    report_id: str


class GetVoteTallyUseCase(BaseUseCase[GetVoteTallyRequest, VoteTallyResponse]):
    """Use case for reading a report's tally."""

    def __init__(self, tally_service: TallyService) -> None:
        """Initialize get vote tally use case.

        Args:
            tally_service: Tally domain service
        """
        self.tally_service = tally_service

    async def execute(self, request: GetVoteTallyRequest) -> VoteTallyResponse:
        """Execute get vote tally flow.

        A report without votes (or unknown to the store) reads (0, 0).
        """
        report_id = parse_report_id(request.report_id)
        tally = await self.tally_service.get_tally(report_id)
        return VoteTallyResponse.from_tally(tally)
