"""PostgreSQL implementation of Library repository."""

from typing import Optional

from sqlalchemy import and_, delete, select

from quest.domain.model import LibraryEntry
from quest.domain.repository import LibraryRepository
from quest.domain.value import GameId, LibraryEntryId, LibraryStatus, UserId
from quest.persistence.mappers import model_to_dict, row_to_library_entry
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import user_library_table


class PostgresLibraryRepository(PostgresRepository, LibraryRepository):
    """PostgreSQL implementation of LibraryRepository."""

    async def find_by_id(self, entry_id: LibraryEntryId) -> Optional[LibraryEntry]:
        stmt = select(user_library_table).where(user_library_table.c.id == entry_id)
        return await self._fetch_one(stmt, row_to_library_entry)

    async def find_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[LibraryEntry]:
        stmt = select(user_library_table).where(
            and_(
                user_library_table.c.user_id == user_id,
                user_library_table.c.game_id == game_id,
            )
        )
        return await self._fetch_one(stmt, row_to_library_entry)

    async def find_by_user(
        self, user_id: UserId, status: Optional[LibraryStatus] = None
    ) -> list[LibraryEntry]:
        stmt = select(user_library_table).where(user_library_table.c.user_id == user_id)
        if status is not None:
            stmt = stmt.where(user_library_table.c.status == status.value)
        stmt = stmt.order_by(user_library_table.c.updated_at.desc())
        return await self._fetch_all(stmt, row_to_library_entry)

    async def save(self, entry: LibraryEntry) -> LibraryEntry:
        """Save an entry (create or update)."""
        existing = await self.find_by_id(entry.id)

        entry_dict = model_to_dict(entry)

        if existing:
            stmt = (
                user_library_table.update()
                .where(user_library_table.c.id == entry.id)
                .values(**entry_dict)
            )
        else:
            stmt = user_library_table.insert().values(**entry_dict)

        await self._write(stmt)
        return entry

    async def delete(self, entry_id: LibraryEntryId) -> None:
        stmt = delete(user_library_table).where(user_library_table.c.id == entry_id)
        await self._write(stmt)
