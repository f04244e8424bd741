"""PostgreSQL implementation of Guide and MapMarker repositories."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select

from quest.domain.model import Guide, MapMarker
from quest.domain.repository import GuideRepository, MapMarkerRepository
from quest.domain.value import GameId, GuideId, MapMarkerId, UserId
from quest.persistence.mappers import model_to_dict, row_to_guide, row_to_map_marker
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import guides_table, map_markers_table


class PostgresGuideRepository(PostgresRepository, GuideRepository):
    """PostgreSQL implementation of GuideRepository."""

    async def find_by_id(self, guide_id: GuideId) -> Optional[Guide]:
        stmt = select(guides_table).where(guides_table.c.id == guide_id)
        return await self._fetch_one(stmt, row_to_guide)

    async def find_latest_by_user_and_game(
        self, user_id: UserId, game_id: GameId
    ) -> Optional[Guide]:
        stmt = select(guides_table).where(
            and_(
                guides_table.c.user_id == user_id,
                guides_table.c.game_id == game_id,
                guides_table.c.is_latest.is_(True),
            )
        )
        return await self._fetch_one(stmt, row_to_guide)

    async def find_latest_by_game(self, game_id: GameId) -> list[Guide]:
        stmt = (
            select(guides_table)
            .where(
                and_(
                    guides_table.c.game_id == game_id,
                    guides_table.c.is_latest.is_(True),
                )
            )
            .order_by(guides_table.c.upvotes.desc(), guides_table.c.created_at.desc())
        )
        return await self._fetch_all(stmt, row_to_guide)

    async def save(self, guide: Guide) -> Guide:
        """Save a guide (create or update)."""
        existing = await self.find_by_id(guide.id)

        guide_dict = model_to_dict(guide)

        if existing:
            stmt = (
                guides_table.update()
                .where(guides_table.c.id == guide.id)
                .values(**guide_dict)
            )
        else:
            stmt = guides_table.insert().values(**guide_dict)

        await self._write(stmt)
        return guide

    async def increment_views(self, guide_id: GuideId) -> None:
        stmt = (
            guides_table.update()
            .where(guides_table.c.id == guide_id)
            .values(views=guides_table.c.views + 1)
        )
        await self._write(stmt)


class PostgresMapMarkerRepository(PostgresRepository, MapMarkerRepository):
    """PostgreSQL implementation of MapMarkerRepository."""

    async def find_by_id(self, marker_id: MapMarkerId) -> Optional[MapMarker]:
        stmt = select(map_markers_table).where(map_markers_table.c.id == marker_id)
        return await self._fetch_one(stmt, row_to_map_marker)

    async def find_by_guide(self, guide_id: GuideId) -> list[MapMarker]:
        stmt = (
            select(map_markers_table)
            .where(map_markers_table.c.guide_id == guide_id)
            .order_by(map_markers_table.c.created_at)
        )
        return await self._fetch_all(stmt, row_to_map_marker)

    async def save(self, marker: MapMarker) -> MapMarker:
        stmt = insert(map_markers_table).values(**model_to_dict(marker))
        await self._write(stmt)
        return marker

    async def delete(self, marker_id: MapMarkerId) -> None:
        stmt = delete(map_markers_table).where(map_markers_table.c.id == marker_id)
        await self._write(stmt)
