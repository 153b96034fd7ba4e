"""
Tests for the partial-update builder and SQL helpers.
"""
import pytest

from jobly.core.exceptions import BadRequestException
from jobly.repositories.sql import bind, placeholder, sql_for_partial_update, where_clause


class TestSqlForPartialUpdate:
    def test_single_field(self):
        set_cols, values = sql_for_partial_update({"name": "Acme"}, {})
        assert set_cols == '"name"=:p1'
        assert values == ["Acme"]

    def test_uses_column_map(self):
        set_cols, values = sql_for_partial_update(
            {"numEmployees": 4, "name": "Acme"},
            {"numEmployees": "num_employees"},
        )
        assert set_cols == '"num_employees"=:p1, "name"=:p2'
        assert values == [4, "Acme"]

    def test_keeps_key_order(self):
        data = {"c": 3, "a": 1, "b": 2}
        set_cols, values = sql_for_partial_update(data, {})
        assert set_cols.split(", ") == ['"c"=:p1', '"a"=:p2', '"b"=:p3']
        assert values == [3, 1, 2]

    def test_none_is_a_value(self):
        set_cols, values = sql_for_partial_update({"logoUrl": None}, {"logoUrl": "logo_url"})
        assert set_cols == '"logo_url"=:p1'
        assert values == [None]

    @pytest.mark.parametrize("column_map", [{}, {"numEmployees": "num_employees"}])
    def test_empty_data_rejected(self, column_map):
        with pytest.raises(BadRequestException) as exc_info:
            sql_for_partial_update({}, column_map)
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "No data"


class TestHelpers:
    def test_placeholder(self):
        assert placeholder(3) == ":p3"

    def test_where_clause_empty(self):
        assert where_clause([]) == ""

    def test_where_clause_joins_with_and(self):
        assert where_clause(["a = :p1", "b > 0"]) == "WHERE a = :p1 AND b > 0"

    def test_bind_positional_values(self):
        stmt = bind("SELECT * FROM jobs WHERE salary >= :p1 AND title = :p2", [10, "x"])
        assert stmt.compile().params == {"p1": 10, "p2": "x"}

    def test_bind_without_values(self):
        stmt = bind("SELECT 1")
        assert stmt.compile().params == {}
