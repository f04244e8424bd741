"""In-memory game, platform and tag repositories for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from quest.domain.model import Game, Platform, Tag
from quest.domain.repository import GameRepository, PlatformRepository, TagRepository
from quest.domain.value import GameId, PlatformId, TagId, TagName
from quest.persistence.database import StorageClient

from .base import InMemoryRepository


class InMemoryGameRepository(InMemoryRepository, GameRepository):
    """In-memory implementation of GameRepository for testing.

    Platform and tag links resolve names through the catalogue repositories
    handed in by the test container.
    """

    def __init__(
        self,
        platforms: Optional["InMemoryPlatformRepository"] = None,
        tags: Optional["InMemoryTagRepository"] = None,
        storage: Optional[StorageClient] = None,
    ) -> None:
        super().__init__(storage)
        self._games: dict[GameId, Game] = {}
        self._platform_links: set[tuple[GameId, PlatformId]] = set()
        self._tag_links: set[tuple[GameId, TagId]] = set()
        self._platforms = platforms or InMemoryPlatformRepository(self.storage)
        self._tags = tags or InMemoryTagRepository(self.storage)

    async def find_by_id(self, game_id: GameId) -> Optional[Game]:
        await self._ensure_available()
        return self._games.get(game_id)

    async def find_by_id_for_update(self, game_id: GameId) -> Optional[Game]:
        await self._ensure_available()
        return self._games.get(game_id)

    async def find_all(self, limit: int = 50, offset: int = 0) -> list[Game]:
        await self._ensure_available()
        games = sorted(self._games.values(), key=lambda g: g.created_at, reverse=True)
        return games[offset : offset + limit]

    async def search(self, query: str, limit: int = 20) -> list[Game]:
        await self._ensure_available()
        needle = query.lower()
        games = [g for g in self._games.values() if needle in g.title.lower()]
        return sorted(games, key=lambda g: g.title)[:limit]

    async def save(self, game: Game) -> Game:
        await self._ensure_available()
        if game.id in self._games:
            raise IntegrityError("Duplicate game id", None, Exception())
        self._games[game.id] = game
        return game

    async def update_rating_stats(
        self,
        game_id: GameId,
        average_rating: int,
        total_ratings: int,
        total_reviews: int,
    ) -> None:
        await self._ensure_available()
        game = self._games.get(game_id)
        if game:
            self._games[game_id] = game.model_copy(
                update={
                    "average_rating": average_rating,
                    "total_ratings": total_ratings,
                    "total_reviews": total_reviews,
                }
            )

    async def increment_achievements(self, game_id: GameId) -> None:
        await self._ensure_available()
        game = self._games.get(game_id)
        if game:
            self._games[game_id] = game.model_copy(
                update={"total_achievements": game.total_achievements + 1}
            )

    async def add_platform(self, game_id: GameId, platform_id: PlatformId) -> None:
        await self._ensure_available()
        if (game_id, platform_id) in self._platform_links:
            raise IntegrityError("Duplicate game platform", None, Exception())
        self._platform_links.add((game_id, platform_id))

    async def add_tag(self, game_id: GameId, tag_id: TagId) -> None:
        await self._ensure_available()
        if (game_id, tag_id) in self._tag_links:
            raise IntegrityError("Duplicate game tag", None, Exception())
        self._tag_links.add((game_id, tag_id))

    async def find_platforms(self, game_id: GameId) -> list[Platform]:
        await self._ensure_available()
        ids = {pid for gid, pid in self._platform_links if gid == game_id}
        return [p for p in await self._platforms.find_all() if p.id in ids]

    async def find_tags(self, game_id: GameId) -> list[Tag]:
        await self._ensure_available()
        ids = {tid for gid, tid in self._tag_links if gid == game_id}
        return [t for t in await self._tags.find_all() if t.id in ids]


class InMemoryPlatformRepository(InMemoryRepository, PlatformRepository):
    """In-memory implementation of PlatformRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._platforms: list[Platform] = []

    async def find_all(self) -> list[Platform]:
        await self._ensure_available()
        return sorted(self._platforms, key=lambda p: p.name.root)

    async def find_by_name(self, name: TagName) -> Optional[Platform]:
        await self._ensure_available()
        for platform in self._platforms:
            if platform.name.root == name.root:
                return platform
        return None

    async def save(self, platform: Platform) -> Platform:
        await self._ensure_available()
        if await self.find_by_name(platform.name):
            raise IntegrityError("Duplicate platform", None, Exception())
        self._platforms.append(platform)
        return platform


class InMemoryTagRepository(InMemoryRepository, TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, storage: Optional[StorageClient] = None) -> None:
        super().__init__(storage)
        self._tags: list[Tag] = []

    async def find_all(self) -> list[Tag]:
        await self._ensure_available()
        return sorted(self._tags, key=lambda t: (t.category.value, t.name.root))

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        await self._ensure_available()
        for tag in self._tags:
            if tag.name.root == name.root:
                return tag
        return None

    async def save(self, tag: Tag) -> Tag:
        await self._ensure_available()
        if await self.find_by_name(tag.name):
            raise IntegrityError("Duplicate tag", None, Exception())
        self._tags.append(tag)
        return tag
