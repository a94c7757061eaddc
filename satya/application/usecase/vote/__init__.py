"""Vote use cases."""

from .get_vote_tally import GetVoteTallyRequest, GetVoteTallyUseCase
from .submit_vote import (
    SubmitVoteRequest,
    SubmitVoteUseCase,
    VoteTallyResponse,
)

__all__ = [
    "GetVoteTallyRequest",
    "GetVoteTallyUseCase",
    "SubmitVoteRequest",
    "SubmitVoteUseCase",
    "VoteTallyResponse",
]
