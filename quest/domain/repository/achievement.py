"""Achievement repository interfaces.

Covers the Achievement aggregate and its three fact tables: unlocks,
difficulty votes and images.
"""

from abc import ABC, abstractmethod
from typing import Optional

from quest.domain.model import (
    Achievement,
    AchievementImage,
    DifficultyVote,
    UserAchievement,
)
from quest.domain.value import AchievementId, GameId, UserId


class AchievementRepository(ABC):
    """Repository for Achievement aggregate."""

    @abstractmethod
    async def find_by_id(self, achievement_id: AchievementId) -> Optional[Achievement]:
        pass

    @abstractmethod
    async def find_by_id_for_update(
        self, achievement_id: AchievementId
    ) -> Optional[Achievement]:
        """Find an achievement and lock its row until the transaction ends.

        Concurrent difficulty votes for the same achievement queue up on
        this lock, so each recomputation sees every committed vote.
        """
        pass

    @abstractmethod
    async def find_by_ids(self, achievement_ids: list[AchievementId]) -> list[Achievement]:
        pass

    @abstractmethod
    async def find_by_game(self, game_id: GameId) -> list[Achievement]:
        """List a game's achievements ordered by points ascending."""
        pass

    @abstractmethod
    async def save(self, achievement: Achievement) -> Achievement:
        """Create an achievement."""
        pass

    @abstractmethod
    async def update_difficulty(
        self, achievement_id: AchievementId, difficulty_rating: int, total_votes: int
    ) -> None:
        """Overwrite the difficulty aggregates."""
        pass

    @abstractmethod
    async def increment_unlocks(self, achievement_id: AchievementId) -> None:
        """Atomically increment total_unlocks by 1 (single SQL expression)."""
        pass


class UserAchievementRepository(ABC):
    """Repository for unlock records."""

    @abstractmethod
    async def save(self, unlock: UserAchievement) -> UserAchievement:
        """Insert an unlock record.

        Raises:
            IntegrityError: If the user already unlocked the achievement
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[UserAchievement]:
        """List a user's unlocks, newest first."""
        pass


class DifficultyVoteRepository(ABC):
    """Repository for difficulty votes."""

    @abstractmethod
    async def save(self, vote: DifficultyVote) -> DifficultyVote:
        """Insert a difficulty vote.

        Raises:
            IntegrityError: If the user already voted on the achievement
        """
        pass

    @abstractmethod
    async def find_by_user_and_achievement(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> Optional[DifficultyVote]:
        pass

    @abstractmethod
    async def delete_by_user_and_achievement(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> bool:
        """Delete a user's vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def summarize(self, achievement_id: AchievementId) -> tuple[int, int]:
        """Aggregate all votes for an achievement.

        Returns:
            (count, sum of difficulty); (0, 0) when there are no votes
        """
        pass


class AchievementImageRepository(ABC):
    """Repository for achievement images."""

    @abstractmethod
    async def save(self, image: AchievementImage) -> AchievementImage:
        pass

    @abstractmethod
    async def find_by_achievement(
        self, achievement_id: AchievementId
    ) -> list[AchievementImage]:
        """List images for an achievement, most upvoted first."""
        pass
