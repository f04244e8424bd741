"""Achievement routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from quest.application.usecase.achievement import (
    AddAchievementImageRequest,
    AddAchievementImageResponse,
    AddAchievementImageUseCase,
    CreateAchievementRequest,
    CreateAchievementResponse,
    CreateAchievementUseCase,
    GetAchievementRequest,
    GetAchievementResponse,
    GetAchievementUseCase,
    ListGameAchievementsRequest,
    ListGameAchievementsResponse,
    ListGameAchievementsUseCase,
    ListUnlockedRequest,
    ListUnlockedResponse,
    ListUnlockedUseCase,
    RemoveDifficultyVoteRequest,
    RemoveDifficultyVoteResponse,
    RemoveDifficultyVoteUseCase,
    UnlockAchievementRequest,
    UnlockAchievementResponse,
    UnlockAchievementUseCase,
    VoteDifficultyRequest,
    VoteDifficultyResponse,
    VoteDifficultyUseCase,
)
from quest.domain.service import JWTService
from quest.interface.api.security import require_actor

router = APIRouter(tags=["achievements"], route_class=DishkaRoute)


class DifficultyVoteAPIRequest(BaseModel):
    """API request for rating an achievement's difficulty."""

    difficulty: int = Field(ge=1, le=10)


class AddImageAPIRequest(BaseModel):
    """API request for attaching an image to an achievement."""

    image_url: str = Field(min_length=1, max_length=2048)
    caption: str | None = Field(default=None, max_length=500)


@router.get("/games/{game_id}/achievements", response_model=ListGameAchievementsResponse)
async def list_game_achievements(
    game_id: UUID,
    list_game_achievements_use_case: FromDishka[ListGameAchievementsUseCase],
) -> ListGameAchievementsResponse:
    """List a game's achievements by points."""
    return await list_game_achievements_use_case.execute(
        ListGameAchievementsRequest(game_id=game_id)
    )


# Registered before /achievements/{achievement_id}
@router.get("/achievements/unlocked", response_model=ListUnlockedResponse)
async def list_unlocked(
    list_unlocked_use_case: FromDishka[ListUnlockedUseCase],
    jwt_service: FromDishka[JWTService],
    user_id: UUID | None = None,
    game_id: UUID | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListUnlockedResponse:
    """List unlocked achievements, newest first.

    Without ``user_id`` the caller's own unlocks are listed, which requires
    authentication.
    """
    if user_id is None:
        user_id = require_actor(jwt_service, auth_token).user_id
    return await list_unlocked_use_case.execute(
        ListUnlockedRequest(user_id=user_id, game_id=game_id)
    )


@router.get("/achievements/{achievement_id}", response_model=GetAchievementResponse)
async def get_achievement(
    achievement_id: UUID,
    get_achievement_use_case: FromDishka[GetAchievementUseCase],
) -> GetAchievementResponse:
    """Get an achievement with its images."""
    return await get_achievement_use_case.execute(
        GetAchievementRequest(achievement_id=achievement_id)
    )


@router.post(
    "/achievements", response_model=CreateAchievementResponse, status_code=status.HTTP_201_CREATED
)
async def create_achievement(
    request: CreateAchievementRequest,
    create_achievement_use_case: FromDishka[CreateAchievementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAchievementResponse:
    """Add an achievement to a game and bump the game's achievement count."""
    require_actor(jwt_service, auth_token)
    return await create_achievement_use_case.execute(request)


@router.post(
    "/achievements/{achievement_id}/unlock",
    response_model=UnlockAchievementResponse,
    status_code=status.HTTP_201_CREATED,
)
async def unlock_achievement(
    achievement_id: UUID,
    unlock_achievement_use_case: FromDishka[UnlockAchievementUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UnlockAchievementResponse:
    """Unlock an achievement for the caller.

    ``total_unlocks`` goes up by exactly one. A second unlock is a 409 and
    leaves the counter alone.
    """
    actor = require_actor(jwt_service, auth_token)
    return await unlock_achievement_use_case.execute(
        UnlockAchievementRequest(user_id=actor.user_id, achievement_id=achievement_id)
    )


@router.post(
    "/achievements/{achievement_id}/difficulty",
    response_model=VoteDifficultyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vote_difficulty(
    achievement_id: UUID,
    request: DifficultyVoteAPIRequest,
    vote_difficulty_use_case: FromDishka[VoteDifficultyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteDifficultyResponse:
    """Rate an achievement's difficulty from 1 to 10.

    The achievement's ``difficulty_rating`` becomes the rounded mean of all
    votes. Voting again without removing the old vote is a 409.
    """
    actor = require_actor(jwt_service, auth_token)
    return await vote_difficulty_use_case.execute(
        VoteDifficultyRequest(
            user_id=actor.user_id,
            achievement_id=achievement_id,
            difficulty=request.difficulty,
        )
    )


@router.delete(
    "/achievements/{achievement_id}/difficulty",
    response_model=RemoveDifficultyVoteResponse,
)
async def remove_difficulty_vote(
    achievement_id: UUID,
    remove_difficulty_vote_use_case: FromDishka[RemoveDifficultyVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveDifficultyVoteResponse:
    actor = require_actor(jwt_service, auth_token)
    return await remove_difficulty_vote_use_case.execute(
        RemoveDifficultyVoteRequest(user_id=actor.user_id, achievement_id=achievement_id)
    )


@router.post(
    "/achievements/{achievement_id}/images",
    response_model=AddAchievementImageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_achievement_image(
    achievement_id: UUID,
    request: AddImageAPIRequest,
    add_achievement_image_use_case: FromDishka[AddAchievementImageUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddAchievementImageResponse:
    actor = require_actor(jwt_service, auth_token)
    return await add_achievement_image_use_case.execute(
        AddAchievementImageRequest(
            user_id=actor.user_id,
            achievement_id=achievement_id,
            image_url=request.image_url,
            caption=request.caption,
        )
    )
