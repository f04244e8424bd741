"""PostgreSQL implementation of Activity repository."""

from sqlalchemy import insert, select

from quest.domain.model import Activity
from quest.domain.repository import ActivityRepository
from quest.domain.value import UserId
from quest.persistence.mappers import model_to_dict, row_to_activity
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import activities_table


class PostgresActivityRepository(PostgresRepository, ActivityRepository):
    """PostgreSQL implementation of ActivityRepository."""

    async def save(self, activity: Activity) -> Activity:
        stmt = insert(activities_table).values(**model_to_dict(activity))
        await self._write(stmt)
        return activity

    async def find_by_users(self, user_ids: list[UserId], limit: int = 50) -> list[Activity]:
        if not user_ids:
            return []
        stmt = (
            select(activities_table)
            .where(activities_table.c.user_id.in_(user_ids))
            .order_by(activities_table.c.created_at.desc())
            .limit(limit)
        )
        return await self._fetch_all(stmt, row_to_activity)
