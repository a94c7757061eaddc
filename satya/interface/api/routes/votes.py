"""Vote routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from satya.application.usecase.vote import (
    GetVoteTallyRequest,
    GetVoteTallyUseCase,
    SubmitVoteRequest,
    SubmitVoteUseCase,
    VoteTallyResponse,
)

router = APIRouter(prefix="/reports", tags=["votes"], route_class=DishkaRoute)


class SubmitVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    voter_id: Any = None
    vote: Any = None


@router.get("/{report_id}/votes", response_model=VoteTallyResponse)
async def get_vote_tally(
    report_id: str,
    get_vote_tally_use_case: FromDishka[GetVoteTallyUseCase],
) -> VoteTallyResponse:
    """Current like/dislike counts for a report."""
    return await get_vote_tally_use_case.execute(
        GetVoteTallyRequest(report_id=report_id)
    )


@router.post("/{report_id}/vote", response_model=VoteTallyResponse)
async def submit_vote(
    report_id: str,
    request: SubmitVoteAPIRequest,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
) -> VoteTallyResponse:
    """Cast or change a vote.

    Args:
        report_id: Report UUID
        request: Voter token and choice (1 like, -1 dislike)
        submit_vote_use_case: Submit vote use case from DI

    Returns:
        The report's recomputed tally
    """
    return await submit_vote_use_case.execute(
        SubmitVoteRequest(
            report_id=report_id, voter_id=request.voter_id, vote=request.vote
        )
    )
