"""Unit tests for the game title search pattern."""

from sqlalchemy.dialects import postgresql

from quest.persistence.repository.game import like_pattern
from quest.persistence.tables import games_table


class TestLikePattern:
    def test_plain_query_is_wrapped(self):
        assert like_pattern("knight") == "%knight%"

    def test_wildcards_match_literally(self):
        assert like_pattern("100%") == "%100\\%%"
        assert like_pattern("a_b") == "%a\\_b%"

    def test_backslash_is_escaped_first(self):
        assert like_pattern("C:\\") == "%C:\\\\%"

    def test_query_compiles_with_escape_clause(self):
        clause = games_table.c.title.ilike(like_pattern("50%"), escape="\\")

        sql = str(clause.compile(dialect=postgresql.dialect()))

        assert "ILIKE" in sql
        assert "ESCAPE" in sql
