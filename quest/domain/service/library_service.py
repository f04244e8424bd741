"""Library domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from quest.domain.error import AlreadyExistsError, NotFoundError
from quest.domain.model import LibraryEntry
from quest.domain.repository import GameRepository, LibraryRepository
from quest.domain.value import (
    ActivityType,
    Actor,
    GameId,
    LibraryEntryId,
    LibraryStatus,
    UserId,
)

from .activity_service import ActivityService
from .base import Service, ensure_can_modify

ALREADY_IN_LIBRARY = "Game already in library"


class LibraryService(Service):
    """Domain service for a user's game library."""

    def __init__(
        self,
        library_repository: LibraryRepository,
        game_repository: GameRepository,
        activity_service: ActivityService,
    ) -> None:
        self.library_repository = library_repository
        self.game_repository = game_repository
        self.activity_service = activity_service

    async def add_to_library(
        self,
        user_id: UserId,
        game_id: GameId,
        status: LibraryStatus = LibraryStatus.BACKLOG,
    ) -> LibraryEntry:
        """Add a game to a user's library.

        Args:
            user_id: The user
            game_id: The game to add
            status: Initial status

        Returns:
            The created entry

        Raises:
            NotFoundError: If the game does not exist
            AlreadyExistsError: If the game is already in the library
        """
        with logfire.span(
            "library_service.add_to_library", user_id=str(user_id), game_id=str(game_id)
        ):
            if not await self.game_repository.find_by_id(game_id):
                raise NotFoundError("Game", str(game_id))

            if await self.library_repository.find_by_user_and_game(user_id, game_id):
                raise AlreadyExistsError(ALREADY_IN_LIBRARY)

            now = datetime.now()
            entry = LibraryEntry(
                id=LibraryEntryId(uuid4()),
                user_id=user_id,
                game_id=game_id,
                status=status,
                added_at=now,
                updated_at=now,
            )
            try:
                saved = await self.library_repository.save(entry)
            except IntegrityError:
                # Lost a race with a concurrent add for the same pair
                logfire.warn("Duplicate library insert", user_id=str(user_id))
                raise AlreadyExistsError(ALREADY_IN_LIBRARY)

            await self.activity_service.log(user_id, ActivityType.GAME_ADDED, game_id)
            if status == LibraryStatus.COMPLETED:
                await self.activity_service.log(
                    user_id, ActivityType.GAME_COMPLETED, game_id
                )
            return saved

    async def update_entry(
        self,
        actor: Actor,
        entry_id: LibraryEntryId,
        status: Optional[LibraryStatus] = None,
        is_favorite: Optional[bool] = None,
        hours_played: Optional[int] = None,
        personal_rating: Optional[int] = None,
    ) -> LibraryEntry:
        """Update a library entry.

        Any status may move to any other. Moving into COMPLETED from another
        status records a game_completed activity for the entry's game.

        Raises:
            NotFoundError: If the entry does not exist
            NotAuthorizedError: If the actor does not own the entry
        """
        with logfire.span(
            "library_service.update_entry",
            entry_id=str(entry_id),
            status=status.value if status else None,
        ):
            entry = await self.get_entry(entry_id)
            ensure_can_modify(actor, entry.user_id, "library entry", entry_id)

            updates = {
                key: value
                for key, value in {
                    "status": status,
                    "is_favorite": is_favorite,
                    "hours_played": hours_played,
                    "personal_rating": personal_rating,
                }.items()
                if value is not None
            }
            updated = LibraryEntry.model_validate(
                {**entry.model_dump(), **updates, "updated_at": datetime.now()}
            )
            saved = await self.library_repository.save(updated)

            if status == LibraryStatus.COMPLETED and entry.status != LibraryStatus.COMPLETED:
                await self.activity_service.log(
                    entry.user_id, ActivityType.GAME_COMPLETED, entry.game_id
                )
            return saved

    async def remove_entry(self, actor: Actor, entry_id: LibraryEntryId) -> None:
        """Remove a library entry.

        Raises:
            NotFoundError: If the entry does not exist
            NotAuthorizedError: If the actor does not own the entry
        """
        with logfire.span("library_service.remove_entry", entry_id=str(entry_id)):
            entry = await self.get_entry(entry_id)
            ensure_can_modify(actor, entry.user_id, "library entry", entry_id)
            await self.library_repository.delete(entry_id)

    async def get_entry(self, entry_id: LibraryEntryId) -> LibraryEntry:
        entry = await self.library_repository.find_by_id(entry_id)
        if not entry:
            raise NotFoundError("Library entry", str(entry_id))
        return entry

    async def get_library(
        self, user_id: UserId, status: Optional[LibraryStatus] = None
    ) -> list[LibraryEntry]:
        return await self.library_repository.find_by_user(user_id, status)
