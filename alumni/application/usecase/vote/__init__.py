"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteTallyResponse
from .get_vote_tally import GetVoteTallyRequest, GetVoteTallyUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "VoteTallyResponse",
    "GetVoteTallyRequest",
    "GetVoteTallyUseCase",
]
