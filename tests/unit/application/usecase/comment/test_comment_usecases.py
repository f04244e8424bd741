"""Unit tests for the comment use cases."""

from uuid import UUID, uuid4

import pytest

from quest.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from quest.domain.error import NotAuthorizedError, NotFoundError
from quest.domain.service import CommentService
from quest.domain.value import Actor, CommentableType, CommentId, UserId, UserRole
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create(unit_env, author_id, entity_id, content="Missable after chapter 3"):
    use_case = await unit_env.get(CreateCommentUseCase)
    return await use_case.execute(
        CreateCommentRequest(
            user_id=author_id,
            entity_type=CommentableType.ACHIEVEMENT,
            entity_id=entity_id,
            content=content,
        )
    )


class TestCommentUseCases:
    @pytest.mark.asyncio
    async def test_create_then_list_oldest_first_on_equal_votes(self, unit_env):
        # Arrange
        author_id, entity_id = uuid4(), uuid4()
        await _create(unit_env, author_id, entity_id, "first")
        await _create(unit_env, author_id, entity_id, "second")
        list_comments = await unit_env.get(ListCommentsUseCase)

        # Act
        response = await list_comments.execute(
            ListCommentsRequest(entity_type=CommentableType.ACHIEVEMENT, entity_id=entity_id)
        )

        # Assert
        assert [c.content for c in response.comments] == ["first", "second"]
        assert all(c.user_id == str(author_id) for c in response.comments)

    @pytest.mark.asyncio
    async def test_author_updates_comment(self, unit_env):
        author_id = uuid4()
        created = await _create(unit_env, author_id, uuid4())
        update = await unit_env.get(UpdateCommentUseCase)

        updated = await update.execute(
            UpdateCommentRequest(
                actor=Actor(user_id=UserId(author_id)),
                comment_id=created.id,
                content="Edited",
            )
        )

        assert updated.success is True
        stored = await (await unit_env.get(CommentService)).get_comment(
            CommentId(UUID(created.id))
        )
        assert stored.content == "Edited"

    @pytest.mark.asyncio
    async def test_stranger_cannot_update(self, unit_env):
        created = await _create(unit_env, uuid4(), uuid4())
        update = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateCommentRequest(
                    actor=Actor(user_id=UserId(uuid4())),
                    comment_id=created.id,
                    content="Hijacked",
                )
            )

    @pytest.mark.asyncio
    async def test_admin_deletes_any_comment(self, unit_env):
        created = await _create(unit_env, uuid4(), uuid4())
        delete = await unit_env.get(DeleteCommentUseCase)
        admin = Actor(user_id=UserId(uuid4()), role=UserRole.ADMIN)

        response = await delete.execute(
            DeleteCommentRequest(actor=admin, comment_id=created.id)
        )

        assert response.success is True
        with pytest.raises(NotFoundError):
            await delete.execute(DeleteCommentRequest(actor=admin, comment_id=created.id))
