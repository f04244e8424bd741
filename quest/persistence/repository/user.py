"""PostgreSQL implementation of User and Follower repositories."""

from typing import Optional

from sqlalchemy import and_, delete, exists, insert, select

from quest.domain.model import Follower, User
from quest.domain.repository import FollowerRepository, UserRepository
from quest.domain.value import UserId
from quest.persistence.mappers import model_to_dict, row_to_user
from quest.persistence.repository.base import PostgresRepository
from quest.persistence.tables import followers_table, users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._fetch_one(stmt, row_to_user)

    async def find_by_open_id(self, open_id: str) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.open_id == open_id)
        return await self._fetch_one(stmt, row_to_user)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        return await self._fetch_all(stmt, row_to_user)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = model_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self._write(stmt)
        return user


class PostgresFollowerRepository(PostgresRepository, FollowerRepository):
    """PostgreSQL implementation of FollowerRepository."""

    async def save(self, follower: Follower) -> Follower:
        stmt = insert(followers_table).values(**model_to_dict(follower))
        await self._write(stmt)
        return follower

    async def delete(self, follower_id: UserId, following_id: UserId) -> bool:
        stmt = delete(followers_table).where(
            and_(
                followers_table.c.follower_id == follower_id,
                followers_table.c.following_id == following_id,
            )
        )
        result = await self._write(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        stmt = select(
            exists().where(
                and_(
                    followers_table.c.follower_id == follower_id,
                    followers_table.c.following_id == following_id,
                )
            )
        )
        result = await self._execute(stmt)
        return bool(result.scalar())

    async def find_following_ids(self, user_id: UserId) -> list[UserId]:
        stmt = (
            select(followers_table.c.following_id)
            .where(followers_table.c.follower_id == user_id)
            .order_by(followers_table.c.created_at.desc())
        )
        result = await self._execute(stmt)
        return [UserId(row.following_id) for row in result.fetchall()]

    async def find_follower_ids(self, user_id: UserId) -> list[UserId]:
        stmt = (
            select(followers_table.c.follower_id)
            .where(followers_table.c.following_id == user_id)
            .order_by(followers_table.c.created_at.desc())
        )
        result = await self._execute(stmt)
        return [UserId(row.follower_id) for row in result.fetchall()]
