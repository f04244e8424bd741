"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from quest.domain.error import ConflictError, DuplicateVoteError
from quest.domain.repository import VoteRepository
from quest.domain.service import VoteService
from quest.domain.value import UserId, VotableType, VoteType
from quest.persistence.repository.inmemory import InMemoryVoteRepository
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestToggleVote:
    """Tests for toggle_vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_is_stored(self, unit_env):
        """Voting on an item should store one vote row."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_id = UserId(uuid4())
        review_id = uuid4()

        # Act
        vote = await vote_service.toggle_vote(
            user_id, VotableType.REVIEW, review_id, VoteType.UP
        )

        # Assert
        stored = await vote_repo.find_by_entity(VotableType.REVIEW, review_id)
        assert stored == [vote]
        assert vote.vote_type == VoteType.UP

    @pytest.mark.asyncio
    async def test_changing_vote_replaces_previous_row(self, unit_env):
        """Up then down should leave exactly one row, of type down."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_id = UserId(uuid4())
        comment_id = uuid4()

        # Act
        first = await vote_service.toggle_vote(
            user_id, VotableType.COMMENT, comment_id, VoteType.UP
        )
        second = await vote_service.toggle_vote(
            user_id, VotableType.COMMENT, comment_id, VoteType.DOWN
        )

        # Assert
        stored = await vote_repo.find_by_entity(VotableType.COMMENT, comment_id)
        assert len(stored) == 1
        assert stored[0].vote_type == VoteType.DOWN
        assert second.id != first.id

    @pytest.mark.asyncio
    async def test_same_vote_twice_still_one_row(self, unit_env):
        """Repeating the same vote replaces the row instead of conflicting."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        user_id = UserId(uuid4())
        guide_id = uuid4()

        # Act
        await vote_service.toggle_vote(user_id, VotableType.GUIDE, guide_id, VoteType.HELPFUL)
        await vote_service.toggle_vote(user_id, VotableType.GUIDE, guide_id, VoteType.HELPFUL)

        # Assert
        stored = await vote_repo.find_by_entity(VotableType.GUIDE, guide_id)
        assert len(stored) == 1

    @pytest.mark.asyncio
    async def test_votes_of_different_users_are_independent(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        review_id = uuid4()

        await vote_service.toggle_vote(
            UserId(uuid4()), VotableType.REVIEW, review_id, VoteType.UP
        )
        await vote_service.toggle_vote(
            UserId(uuid4()), VotableType.REVIEW, review_id, VoteType.DOWN
        )

        stored = await vote_repo.find_by_entity(VotableType.REVIEW, review_id)
        assert len(stored) == 2


class TestRemoveVote:
    """Tests for remove_vote and get_user_vote."""

    @pytest.mark.asyncio
    async def test_remove_existing_vote(self, unit_env):
        """Removing a vote should delete it and report True."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_id = UserId(uuid4())
        image_id = uuid4()
        await vote_service.toggle_vote(
            user_id, VotableType.ACHIEVEMENT_IMAGE, image_id, VoteType.UP
        )

        # Act
        removed = await vote_service.remove_vote(
            user_id, VotableType.ACHIEVEMENT_IMAGE, image_id
        )

        # Assert
        assert removed is True
        assert (
            await vote_service.get_user_vote(
                user_id, VotableType.ACHIEVEMENT_IMAGE, image_id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_remove_missing_vote_reports_false(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        removed = await vote_service.remove_vote(
            UserId(uuid4()), VotableType.REVIEW, uuid4()
        )

        assert removed is False


class StaleDeleteVoteRepository(InMemoryVoteRepository):
    """Delete misses the row, as when another request inserted it meanwhile."""

    async def delete_by_user_and_entity(self, user_id, entity_type, entity_id):
        return False


class TestConcurrentToggle:
    @pytest.mark.asyncio
    async def test_unique_violation_becomes_conflict(self):
        """Losing the insert race surfaces as a 409-mapped conflict."""
        # Arrange
        vote_repo = StaleDeleteVoteRepository()
        vote_service = VoteService(vote_repo)
        user_id = UserId(uuid4())
        guide_id = uuid4()
        await vote_service.toggle_vote(user_id, VotableType.GUIDE, guide_id, VoteType.UP)

        # Act
        with pytest.raises(DuplicateVoteError) as exc_info:
            await vote_service.toggle_vote(
                user_id, VotableType.GUIDE, guide_id, VoteType.DOWN
            )

        # Assert
        assert isinstance(exc_info.value, ConflictError)
        stored = await vote_repo.find_by_entity(VotableType.GUIDE, guide_id)
        assert [v.vote_type for v in stored] == [VoteType.UP]
