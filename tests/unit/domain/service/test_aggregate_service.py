"""Unit tests for aggregate recomputation helpers."""

import pytest

from quest.domain.service import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("total", "count", "expected"),
        [
            (0, 0, 0),
            (12, 2, 6),
            (13, 2, 7),
            (15, 2, 8),
            (10, 3, 3),
            (11, 3, 4),
            (10, 1, 10),
        ],
    )
    def test_mean_rounds_half_away_from_zero(self, total, count, expected):
        """Halves round up, unlike Python's banker's rounding."""
        assert round_half_up(total, count) == expected
