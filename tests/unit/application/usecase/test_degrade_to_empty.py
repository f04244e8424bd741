"""Unit tests for list-read degradation while storage is down."""

from uuid import uuid4

import pytest

from quest.application.usecase.base import degrade_to_empty
from quest.application.usecase.review import ListReviewsRequest, ListReviewsUseCase
from quest.domain.error import StorageUnavailableError


async def _unavailable() -> list:
    raise StorageUnavailableError()


async def _rows() -> list[int]:
    return [1, 2, 3]


class _DownReviewService:
    async def get_game_reviews(self, game_id, limit=20, offset=0):
        raise StorageUnavailableError()


class TestDegradeToEmpty:
    @pytest.mark.asyncio
    async def test_unavailable_storage_gives_empty_list(self):
        assert await degrade_to_empty("list_things", _unavailable()) == []

    @pytest.mark.asyncio
    async def test_available_storage_passes_rows_through(self):
        assert await degrade_to_empty("list_things", _rows()) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        async def _broken() -> list:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await degrade_to_empty("list_things", _broken())

    @pytest.mark.asyncio
    async def test_review_listing_degrades(self):
        """A list endpoint answers an empty page instead of failing."""
        use_case = ListReviewsUseCase(review_service=_DownReviewService())

        response = await use_case.execute(ListReviewsRequest(game_id=uuid4()))

        assert response.reviews == []
