"""Achievement domain service.

Owns the unlock and difficulty-vote fact tables and keeps the achievement's
summary columns (total_unlocks, difficulty_rating, total_difficulty_votes)
consistent with them.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.domain.error import (
    DuplicateUnlockError,
    DuplicateVoteError,
    NotFoundError,
)
from quest.domain.model import (
    Achievement,
    AchievementImage,
    DifficultyVote,
    UserAchievement,
)
from quest.domain.repository import (
    AchievementImageRepository,
    AchievementRepository,
    DifficultyVoteRepository,
    GameRepository,
    UserAchievementRepository,
)
from quest.domain.value import (
    AchievementId,
    AchievementImageId,
    ActivityType,
    DifficultyVoteId,
    GameId,
    UserAchievementId,
    UserId,
)

from .activity_service import ActivityService
from .aggregate_service import AggregateService
from .base import Service


class AchievementService(Service):
    """Domain service for achievements, unlocks, difficulty votes and images."""

    def __init__(
        self,
        achievement_repository: AchievementRepository,
        user_achievement_repository: UserAchievementRepository,
        difficulty_vote_repository: DifficultyVoteRepository,
        achievement_image_repository: AchievementImageRepository,
        game_repository: GameRepository,
        aggregate_service: AggregateService,
        activity_service: ActivityService,
    ) -> None:
        self.achievement_repository = achievement_repository
        self.user_achievement_repository = user_achievement_repository
        self.difficulty_vote_repository = difficulty_vote_repository
        self.achievement_image_repository = achievement_image_repository
        self.game_repository = game_repository
        self.aggregate_service = aggregate_service
        self.activity_service = activity_service

    async def create_achievement(
        self,
        game_id: GameId,
        title: str,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
        points: int = 0,
        estimated_time: Optional[int] = None,
        is_missable: bool = False,
        is_buggy: bool = False,
        is_grindy: bool = False,
        is_easy: bool = False,
        text_guide: Optional[str] = None,
    ) -> Achievement:
        """Create an achievement and bump the game's total_achievements.

        Raises:
            NotFoundError: If the game does not exist
        """
        with logfire.span(
            "achievement_service.create_achievement", game_id=str(game_id), title=title
        ):
            if not await self.game_repository.find_by_id(game_id):
                raise NotFoundError("Game", str(game_id))

            now = datetime.now()
            achievement = Achievement(
                id=AchievementId(uuid4()),
                game_id=game_id,
                title=title,
                description=description,
                icon_url=icon_url,
                points=points,
                estimated_time=estimated_time,
                is_missable=is_missable,
                is_buggy=is_buggy,
                is_grindy=is_grindy,
                is_easy=is_easy,
                text_guide=text_guide,
                created_at=now,
                updated_at=now,
            )
            saved = await self.achievement_repository.save(achievement)
            await self.game_repository.increment_achievements(game_id)
            logfire.info("Achievement created", achievement_id=str(saved.id))
            return saved

    async def get_achievement(self, achievement_id: AchievementId) -> Achievement:
        """Get an achievement by ID.

        Raises:
            NotFoundError: If the achievement does not exist
        """
        achievement = await self.achievement_repository.find_by_id(achievement_id)
        if not achievement:
            raise NotFoundError("Achievement", str(achievement_id))
        return achievement

    async def get_game_achievements(self, game_id: GameId) -> list[Achievement]:
        return await self.achievement_repository.find_by_game(game_id)

    async def unlock(self, user_id: UserId, achievement_id: AchievementId) -> UserAchievement:
        """Record that a user unlocked an achievement.

        The unlock row and the ``total_unlocks + 1`` update run in the same
        transaction, so the counter moves exactly once per stored unlock.

        Args:
            user_id: The user
            achievement_id: The unlocked achievement

        Returns:
            The unlock record

        Raises:
            NotFoundError: If the achievement does not exist
            DuplicateUnlockError: If the user already unlocked it
        """
        with logfire.span(
            "achievement_service.unlock",
            user_id=str(user_id),
            achievement_id=str(achievement_id),
        ):
            achievement = await self.get_achievement(achievement_id)

            unlock = UserAchievement(
                id=UserAchievementId(uuid4()),
                user_id=user_id,
                achievement_id=achievement_id,
                unlocked_at=datetime.now(),
            )
            try:
                saved = await self.user_achievement_repository.save(unlock)
            except IntegrityError:
                logfire.warn(
                    "Duplicate unlock attempt",
                    user_id=str(user_id),
                    achievement_id=str(achievement_id),
                )
                raise DuplicateUnlockError()

            await self.achievement_repository.increment_unlocks(achievement_id)
            await self.activity_service.log(
                user_id,
                ActivityType.ACHIEVEMENT,
                achievement_id,
                metadata={"game_id": achievement.game_id},
            )
            return saved

    async def get_unlocked(
        self, user_id: UserId, game_id: Optional[GameId] = None
    ) -> list[UserAchievement]:
        """A user's unlocks, newest first, optionally limited to one game."""
        unlocks = await self.user_achievement_repository.find_by_user(user_id)
        if game_id is None:
            return unlocks
        game_achievements = {
            a.id for a in await self.achievement_repository.find_by_game(game_id)
        }
        return [u for u in unlocks if u.achievement_id in game_achievements]

    async def record_difficulty_vote(
        self, user_id: UserId, achievement_id: AchievementId, difficulty: int
    ) -> DifficultyVote:
        """Record a difficulty vote and recompute the achievement's rating.

        The achievement row is locked first, then the vote is inserted and
        the rating rebuilt from all votes, all in the request transaction.

        Args:
            user_id: The voter
            achievement_id: The rated achievement
            difficulty: Difficulty from 1 to 10

        Returns:
            The stored vote

        Raises:
            NotFoundError: If the achievement does not exist
            DuplicateVoteError: If the user already voted on it
        """
        with logfire.span(
            "achievement_service.record_difficulty_vote",
            user_id=str(user_id),
            achievement_id=str(achievement_id),
            difficulty=difficulty,
        ):
            await self._lock_achievement(achievement_id)

            vote = DifficultyVote(
                id=DifficultyVoteId(uuid4()),
                user_id=user_id,
                achievement_id=achievement_id,
                difficulty=difficulty,
                created_at=datetime.now(),
            )
            try:
                saved = await self.difficulty_vote_repository.save(vote)
            except IntegrityError:
                logfire.warn(
                    "Duplicate difficulty vote",
                    user_id=str(user_id),
                    achievement_id=str(achievement_id),
                )
                raise DuplicateVoteError()

            await self.aggregate_service.recompute_difficulty(achievement_id)
            return saved

    async def remove_difficulty_vote(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> bool:
        """Withdraw a difficulty vote so the user can vote again.

        Returns:
            True if a vote was removed

        Raises:
            NotFoundError: If the achievement does not exist
        """
        with logfire.span(
            "achievement_service.remove_difficulty_vote",
            user_id=str(user_id),
            achievement_id=str(achievement_id),
        ):
            await self._lock_achievement(achievement_id)
            deleted = await self.difficulty_vote_repository.delete_by_user_and_achievement(
                user_id, achievement_id
            )
            if deleted:
                await self.aggregate_service.recompute_difficulty(achievement_id)
            return deleted

    async def add_image(
        self,
        user_id: UserId,
        achievement_id: AchievementId,
        image_url: str,
        caption: Optional[str] = None,
    ) -> AchievementImage:
        """Attach an image to an achievement.

        Raises:
            NotFoundError: If the achievement does not exist
        """
        with logfire.span(
            "achievement_service.add_image", achievement_id=str(achievement_id)
        ):
            await self.get_achievement(achievement_id)
            image = AchievementImage(
                id=AchievementImageId(uuid4()),
                achievement_id=achievement_id,
                user_id=user_id,
                image_url=image_url,
                caption=caption,
                created_at=datetime.now(),
            )
            return await self.achievement_image_repository.save(image)

    async def get_images(self, achievement_id: AchievementId) -> list[AchievementImage]:
        return await self.achievement_image_repository.find_by_achievement(achievement_id)

    async def _lock_achievement(self, achievement_id: AchievementId) -> Achievement:
        achievement = await self.achievement_repository.find_by_id_for_update(
            achievement_id
        )
        if not achievement:
            logfire.warn("Achievement not found", achievement_id=str(achievement_id))
            raise NotFoundError("Achievement", str(achievement_id))
        return achievement
