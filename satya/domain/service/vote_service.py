"""Vote domain service."""

import logfire

from satya.domain.error import (
    InvalidChoiceError,
    MissingReportIdError,
    MissingVoterIdError,
    ValidationError,
)
from satya.domain.model.vote import Vote, VoteTally
from satya.domain.repository import ReportRepository, VoteRepository
from satya.domain.value import ReportId, VoteChoice, VoterId

from .base import Service, row_store_errors
from .tally_service import TallyService

MAX_VOTER_ID_LENGTH = 255


def validate_choice(choice: object) -> VoteChoice:
    """Validate a raw vote value.

    Args:
        choice: Value from the request (1 or -1)

    Returns:
        The vote choice

    Raises:
        InvalidChoiceError: If the value is not exactly 1 or -1
    """
    # bool is an int subclass; True must not count as a like
    if isinstance(choice, bool) or not isinstance(choice, (int, float)):
        raise InvalidChoiceError(choice)
    if choice not in (1, -1):
        raise InvalidChoiceError(choice)
    return VoteChoice(int(choice))


def validate_voter_id(voter_id: object) -> VoterId:
    """Validate a raw voter token.

    Raises:
        MissingVoterIdError: If absent, blank or not a string
        ValidationError: If longer than the column allows
    """
    if not isinstance(voter_id, str) or not voter_id.strip():
        raise MissingVoterIdError()
    if len(voter_id) > MAX_VOTER_ID_LENGTH:
        raise ValidationError(
            f"voter_id must be at most {MAX_VOTER_ID_LENGTH} characters"
        )
    return VoterId(voter_id)


class VoteService(Service):
    """Domain service for vote submission.

    Ballot slot transitions (per report and voter):
        unvoted -> liked / disliked: insert
        liked <-> disliked: replace the choice
        liked -> liked, disliked -> disliked: no write
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        report_repository: ReportRepository,
        tally_service: TallyService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            report_repository: Report repository
            tally_service: Tally domain service
        """
        self.vote_repository = vote_repository
        self.report_repository = report_repository
        self.tally_service = tally_service

    async def submit_vote(
        self, report_id: ReportId, voter_id: object, choice: object
    ) -> VoteTally:
        """Cast or change a vote.

        Args:
            report_id: Report being voted on
            voter_id: Raw voter token from the request
            choice: Raw vote value from the request

        Returns:
            The report's tally recomputed after the write

        Raises:
            MissingVoterIdError: If no voter token was supplied
            InvalidChoiceError: If the vote is not 1 or -1
            MissingReportIdError: If the report does not exist
            DependencyError: If the row store fails
        """
        voter = validate_voter_id(voter_id)
        vote_choice = validate_choice(choice)

        with logfire.span(
            "vote_service.submit_vote",
            report_id=str(report_id),
            voter_id=voter,
            choice=vote_choice.value,
        ):
            with row_store_errors("submit_vote"):
                report = await self.report_repository.find_by_id(report_id)
                if report is None:
                    logfire.warn("Vote on non-existent report", report_id=str(report_id))
                    raise MissingReportIdError(str(report_id))

                current = await self.vote_repository.find_by_report_and_voter(
                    report_id, voter
                )
                if current is not None and current.choice == vote_choice:
                    logfire.info(
                        "Vote unchanged",
                        report_id=str(report_id),
                        voter_id=voter,
                        choice=vote_choice.value,
                    )
                else:
                    await self.vote_repository.upsert(
                        Vote(report_id=report_id, voter_id=voter, choice=vote_choice)
                    )
                    logfire.info(
                        "Vote recorded",
                        report_id=str(report_id),
                        voter_id=voter,
                        previous=current.choice.value if current else 0,
                        choice=vote_choice.value,
                    )

            return await self.tally_service.get_tally(report_id)
