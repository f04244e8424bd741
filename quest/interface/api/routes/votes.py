"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from quest.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetMyVoteResponse,
    GetMyVoteUseCase,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    VoteTargetRequest,
)
from quest.domain.service import JWTService
from quest.domain.value import VotableType, VoteType
from quest.interface.api.security import require_actor

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on an item."""

    entity_type: VotableType
    entity_id: UUID
    vote_type: VoteType


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an item, replacing any earlier vote by the caller.

    Example:
        POST /votes
        {"entity_type": "review", "entity_id": "...", "vote_type": "up"}
    """
    actor = require_actor(jwt_service, auth_token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(user_id=actor.user_id, **request.model_dump())
    )


@router.delete("", response_model=RemoveVoteResponse)
async def remove_vote(
    entity_type: VotableType,
    entity_id: UUID,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    actor = require_actor(jwt_service, auth_token)
    return await remove_vote_use_case.execute(
        VoteTargetRequest(user_id=actor.user_id, entity_type=entity_type, entity_id=entity_id)
    )


@router.get("/me", response_model=GetMyVoteResponse)
async def get_my_vote(
    entity_type: VotableType,
    entity_id: UUID,
    get_my_vote_use_case: FromDishka[GetMyVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyVoteResponse:
    """The caller's vote on an item, or ``{"vote": null}``."""
    actor = require_actor(jwt_service, auth_token)
    return await get_my_vote_use_case.execute(
        VoteTargetRequest(user_id=actor.user_id, entity_type=entity_type, entity_id=entity_id)
    )
