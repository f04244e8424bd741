"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from quest.domain.error import NotAuthorizedError, NotFoundError
from quest.domain.service import CommentService
from quest.domain.value import Actor, CommentableType, CommentId, UserId, UserRole
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment and get_comments."""

    @pytest.mark.asyncio
    async def test_comment_is_listed_for_its_entity(self, unit_env):
        """A new comment should be listed under its target only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        guide_id = uuid4()
        author = UserId(uuid4())

        # Act
        comment = await comment_service.create_comment(
            author, CommentableType.GUIDE, guide_id, "Great route through the caves"
        )

        # Assert
        assert await comment_service.get_comments(CommentableType.GUIDE, guide_id) == [
            comment
        ]
        assert await comment_service.get_comments(CommentableType.REVIEW, guide_id) == []

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.get_comment(CommentId(uuid4()))


class TestCommentOwnership:
    """Only the author or an admin may edit or delete a comment."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        author = UserId(uuid4())
        comment = await comment_service.create_comment(
            author, CommentableType.REVIEW, uuid4(), "first"
        )

        # Act
        updated = await comment_service.update_comment(
            Actor(user_id=author), comment.id, "edited"
        )

        # Assert
        assert updated.content == "edited"
        assert updated.created_at == comment.created_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(
            UserId(uuid4()), CommentableType.REVIEW, uuid4(), "first"
        )

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await comment_service.update_comment(
                Actor(user_id=UserId(uuid4())), comment.id, "hijacked"
            )
        stored = await comment_service.get_comment(comment.id)
        assert stored.content == "first"

    @pytest.mark.asyncio
    async def test_admin_can_delete_any_comment(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        target = uuid4()
        comment = await comment_service.create_comment(
            UserId(uuid4()), CommentableType.ACHIEVEMENT, target, "spam"
        )
        admin = Actor(user_id=UserId(uuid4()), role=UserRole.ADMIN)

        # Act
        await comment_service.delete_comment(admin, comment.id)

        # Assert
        assert await comment_service.get_comments(CommentableType.ACHIEVEMENT, target) == []
