"""Game and catalogue domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.domain.error import AlreadyExistsError, NotFoundError, ValidationError
from quest.domain.model import Game, Platform, Tag
from quest.domain.repository import GameRepository, PlatformRepository, TagRepository
from quest.domain.value import GameId, PlatformId, TagCategory, TagId, TagName

from .base import Service


class GameService(Service):
    """Domain service for games, platforms and tags."""

    def __init__(
        self,
        game_repository: GameRepository,
        platform_repository: PlatformRepository,
        tag_repository: TagRepository,
    ) -> None:
        """Initialize game service.

        Args:
            game_repository: Game repository
            platform_repository: Platform repository
            tag_repository: Tag repository
        """
        self.game_repository = game_repository
        self.platform_repository = platform_repository
        self.tag_repository = tag_repository

    async def create_game(
        self,
        title: str,
        description: Optional[str] = None,
        cover_image_url: Optional[str] = None,
        release_date: Optional[datetime] = None,
        developer: Optional[str] = None,
        publisher: Optional[str] = None,
        platform_ids: Optional[list[PlatformId]] = None,
        tag_ids: Optional[list[TagId]] = None,
    ) -> Game:
        """Create a game with all aggregates at zero.

        Args:
            title: Game title
            description: Optional description
            cover_image_url: Optional cover art URL
            release_date: Optional release date
            developer: Optional developer name
            publisher: Optional publisher name
            platform_ids: Platforms to link
            tag_ids: Tags to link

        Returns:
            Created game

        Raises:
            ValidationError: If a platform or tag id does not exist
        """
        with logfire.span("game_service.create_game", title=title):
            now = datetime.now()
            game = Game(
                id=GameId(uuid4()),
                title=title,
                description=description,
                cover_image_url=cover_image_url,
                release_date=release_date,
                developer=developer,
                publisher=publisher,
                created_at=now,
                updated_at=now,
            )
            saved = await self.game_repository.save(game)

            try:
                for platform_id in dict.fromkeys(platform_ids or []):
                    await self.game_repository.add_platform(saved.id, platform_id)
                for tag_id in dict.fromkeys(tag_ids or []):
                    await self.game_repository.add_tag(saved.id, tag_id)
            except IntegrityError:
                logfire.warn("Game created with unknown platform or tag", game_id=str(saved.id))
                raise ValidationError("Unknown platform or tag")

            logfire.info("Game created", game_id=str(saved.id), title=title)
            return saved

    async def get_game(self, game_id: GameId) -> Game:
        """Get a game by ID.

        Raises:
            NotFoundError: If the game does not exist
        """
        game = await self.game_repository.find_by_id(game_id)
        if not game:
            raise NotFoundError("Game", str(game_id))
        return game

    async def get_game_details(self, game_id: GameId) -> tuple[Game, list[Platform], list[Tag]]:
        """Get a game with its platforms and tags."""
        with logfire.span("game_service.get_game_details", game_id=str(game_id)):
            game = await self.get_game(game_id)
            platforms = await self.game_repository.find_platforms(game_id)
            tags = await self.game_repository.find_tags(game_id)
            return game, platforms, tags

    async def list_games(self, limit: int = 50, offset: int = 0) -> list[Game]:
        return await self.game_repository.find_all(limit=limit, offset=offset)

    async def search_games(self, query: str, limit: int = 20) -> list[Game]:
        return await self.game_repository.search(query.strip(), limit=limit)

    async def list_platforms(self) -> list[Platform]:
        return await self.platform_repository.find_all()

    async def create_platform(self, name: str, icon: Optional[str] = None) -> Platform:
        """Create a platform.

        Raises:
            AlreadyExistsError: If the name is taken
        """
        with logfire.span("game_service.create_platform", name=name):
            platform = Platform(id=PlatformId(uuid4()), name=TagName(name), icon=icon)
            if await self.platform_repository.find_by_name(platform.name):
                raise AlreadyExistsError("Platform already exists")
            try:
                return await self.platform_repository.save(platform)
            except IntegrityError:
                raise AlreadyExistsError("Platform already exists")

    async def list_tags(self) -> list[Tag]:
        return await self.tag_repository.find_all()

    async def create_tag(
        self, name: str, category: TagCategory = TagCategory.GENRE
    ) -> Tag:
        """Create a tag.

        Raises:
            AlreadyExistsError: If the name is taken
        """
        with logfire.span("game_service.create_tag", name=name, category=category.value):
            tag = Tag(id=TagId(uuid4()), name=TagName(name), category=category)
            if await self.tag_repository.find_by_name(tag.name):
                raise AlreadyExistsError("Tag already exists")
            try:
                return await self.tag_repository.save(tag)
            except IntegrityError:
                raise AlreadyExistsError("Tag already exists")
