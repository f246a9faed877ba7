"""Client-side vote controller and its transport to the vote aggregator."""

from .controller import RetryPolicy, VoteController, transition
from .error import ConflictError, NetworkError, ValidationError, VoteClientError
from .model import ThreadSeed, VoteState
from .transport import HttpVoteAggregator, VoteAggregator

__all__ = [
    "ConflictError",
    "HttpVoteAggregator",
    "NetworkError",
    "RetryPolicy",
    "ThreadSeed",
    "ValidationError",
    "VoteAggregator",
    "VoteClientError",
    "VoteController",
    "VoteState",
    "transition",
]
