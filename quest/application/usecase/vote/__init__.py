"""Vote use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetMyVoteResponse,
    GetMyVoteUseCase,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteItem,
    VoteTargetRequest,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetMyVoteResponse",
    "GetMyVoteUseCase",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
    "VoteItem",
    "VoteTargetRequest",
]
