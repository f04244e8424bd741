"""Unit tests for mapping domain errors to HTTP status codes."""

import pytest

from quest.domain.error import (
    AlreadyExistsError,
    DomainError,
    DuplicateUnlockError,
    DuplicateVoteError,
    NotAuthorizedError,
    NotFoundError,
    SelfFollowError,
    StorageUnavailableError,
    ValidationError,
)
from quest.interface.error import status_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NotFoundError("Game", "x"), 404),
        (NotAuthorizedError("review", "x", "y"), 403),
        (AlreadyExistsError("Game already in library"), 409),
        (DuplicateVoteError(), 409),
        (DuplicateUnlockError(), 409),
        (SelfFollowError(), 400),
        (ValidationError("Unknown platform or tag"), 400),
        (StorageUnavailableError(), 503),
        (DomainError("anything else"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected
