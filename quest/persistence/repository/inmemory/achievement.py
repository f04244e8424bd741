"""In-memory achievement repositories for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

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
    UserAchievementRepository,
)
from quest.domain.value import AchievementId, GameId, UserId
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryAchievementRepository(InMemoryRepository, AchievementRepository):
    """In-memory implementation of AchievementRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._achievements: dict[AchievementId, Achievement] = {}

    async def find_by_id(self, achievement_id: AchievementId) -> Optional[Achievement]:
        await self._ensure_available()
        return self._achievements.get(achievement_id)

    async def find_by_id_for_update(
        self, achievement_id: AchievementId
    ) -> Optional[Achievement]:
        await self._ensure_available()
        return self._achievements.get(achievement_id)

    async def find_by_ids(self, achievement_ids: list[AchievementId]) -> list[Achievement]:
        await self._ensure_available()
        return [self._achievements[a] for a in achievement_ids if a in self._achievements]

    async def find_by_game(self, game_id: GameId) -> list[Achievement]:
        await self._ensure_available()
        achievements = [a for a in self._achievements.values() if a.game_id == game_id]
        return sorted(achievements, key=lambda a: (a.points, a.title))

    async def save(self, achievement: Achievement) -> Achievement:
        await self._ensure_available()
        self._achievements[achievement.id] = achievement
        return achievement

    async def update_difficulty(
        self, achievement_id: AchievementId, difficulty_rating: int, total_votes: int
    ) -> None:
        await self._ensure_available()
        achievement = self._achievements.get(achievement_id)
        if achievement:
            self._achievements[achievement_id] = achievement.model_copy(
                update={
                    "difficulty_rating": difficulty_rating,
                    "total_difficulty_votes": total_votes,
                }
            )

    async def increment_unlocks(self, achievement_id: AchievementId) -> None:
        await self._ensure_available()
        achievement = self._achievements.get(achievement_id)
        if achievement:
            self._achievements[achievement_id] = achievement.model_copy(
                update={"total_unlocks": achievement.total_unlocks + 1}
            )


class InMemoryUserAchievementRepository(InMemoryRepository, UserAchievementRepository):
    """In-memory implementation of UserAchievementRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._unlocks: list[UserAchievement] = []

    async def save(self, unlock: UserAchievement) -> UserAchievement:
        """Save an unlock.

        Raises:
            IntegrityError: If the user already unlocked the achievement
        """
        await self._ensure_available()
        for existing in self._unlocks:
            if (
                existing.user_id == unlock.user_id
                and existing.achievement_id == unlock.achievement_id
            ):
                raise IntegrityError("Duplicate unlock", None, Exception())
        self._unlocks.append(unlock)
        return unlock

    async def find_by_user(self, user_id: UserId) -> list[UserAchievement]:
        await self._ensure_available()
        unlocks = [u for u in self._unlocks if u.user_id == user_id]
        return sorted(unlocks, key=lambda u: u.unlocked_at, reverse=True)


class InMemoryDifficultyVoteRepository(InMemoryRepository, DifficultyVoteRepository):
    """In-memory implementation of DifficultyVoteRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._votes: list[DifficultyVote] = []

    async def save(self, vote: DifficultyVote) -> DifficultyVote:
        """Save a difficulty vote.

        Raises:
            IntegrityError: If the user already voted on the achievement
        """
        await self._ensure_available()
        if await self.find_by_user_and_achievement(vote.user_id, vote.achievement_id):
            raise IntegrityError("Duplicate difficulty vote", None, Exception())
        self._votes.append(vote)
        return vote

    async def find_by_user_and_achievement(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> Optional[DifficultyVote]:
        await self._ensure_available()
        for vote in self._votes:
            if vote.user_id == user_id and vote.achievement_id == achievement_id:
                return vote
        return None

    async def delete_by_user_and_achievement(
        self, user_id: UserId, achievement_id: AchievementId
    ) -> bool:
        await self._ensure_available()
        for i, vote in enumerate(self._votes):
            if vote.user_id == user_id and vote.achievement_id == achievement_id:
                self._votes.pop(i)
                return True
        return False

    async def summarize(self, achievement_id: AchievementId) -> tuple[int, int]:
        await self._ensure_available()
        values = [v.difficulty for v in self._votes if v.achievement_id == achievement_id]
        return len(values), sum(values)


class InMemoryAchievementImageRepository(InMemoryRepository, AchievementImageRepository):
    """In-memory implementation of AchievementImageRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._images: list[AchievementImage] = []

    async def save(self, image: AchievementImage) -> AchievementImage:
        await self._ensure_available()
        self._images.append(image)
        return image

    async def find_by_achievement(
        self, achievement_id: AchievementId
    ) -> list[AchievementImage]:
        await self._ensure_available()
        images = [i for i in self._images if i.achievement_id == achievement_id]
        return sorted(images, key=lambda i: i.upvotes, reverse=True)
