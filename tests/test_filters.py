"""
Tests for the company and job search predicate builders.
"""
import pytest
from pydantic import ValidationError

from jobly.core.exceptions import BadRequestException
from jobly.repositories.company_repository import company_where_clause
from jobly.repositories.job_repository import job_where_clause
from jobly.schemas.company import CompanyFilter
from jobly.schemas.job import JobFilter


class TestCompanyWhereClause:
    def test_no_filters(self):
        assert company_where_clause(None) == ("", [])
        assert company_where_clause(CompanyFilter()) == ("", [])

    def test_name_like_is_case_insensitive(self):
        where, values = company_where_clause(CompanyFilter(nameLike="NeT"))
        assert where == "WHERE lower(name) LIKE :p1"
        assert values == ["%net%"]

    def test_all_filters_in_fixed_order(self):
        where, values = company_where_clause(
            CompanyFilter(maxEmployees=10, minEmployees=2, nameLike="c")
        )
        assert where == (
            "WHERE lower(name) LIKE :p1"
            " AND num_employees >= :p2"
            " AND num_employees <= :p3"
        )
        assert values == ["%c%", 2, 10]

    def test_bounds_only(self):
        where, values = company_where_clause(CompanyFilter(maxEmployees=5))
        assert where == "WHERE num_employees <= :p1"
        assert values == [5]

    def test_equal_bounds_allowed(self):
        where, values = company_where_clause(CompanyFilter(minEmployees=3, maxEmployees=3))
        assert values == [3, 3]

    @pytest.mark.parametrize("name_like", [None, "c"])
    def test_max_below_min_rejected(self, name_like):
        with pytest.raises(BadRequestException):
            company_where_clause(
                CompanyFilter(nameLike=name_like, minEmployees=5, maxEmployees=2)
            )

    def test_filter_accepts_camel_case_keys(self):
        filters = CompanyFilter.model_validate({"nameLike": "x", "minEmployees": "4"})
        assert filters.name_like == "x"
        assert filters.min_employees == 4

    @pytest.mark.parametrize(
        "query",
        [{"name_like": "x"}, {"min_employees": "4"}, {"max_employees": "4"}],
    )
    def test_filter_rejects_snake_case_keys(self, query):
        with pytest.raises(ValidationError):
            CompanyFilter.model_validate(query)


class TestJobWhereClause:
    def test_no_filters(self):
        assert job_where_clause(None) == ("", [])
        assert job_where_clause(JobFilter()) == ("", [])

    def test_all_filters_in_fixed_order(self):
        where, values = job_where_clause(
            JobFilter(hasEquity=True, minSalary=50, title="Eng")
        )
        assert where == "WHERE lower(title) LIKE :p1 AND salary >= :p2 AND equity > 0"
        assert values == ["%eng%", 50]

    def test_has_equity_false_same_as_absent(self):
        base = job_where_clause(JobFilter(title="j"))
        assert job_where_clause(JobFilter(title="j", hasEquity=False)) == base

    def test_has_equity_true_adds_clause_without_value(self):
        where, values = job_where_clause(JobFilter(hasEquity=True))
        assert where == "WHERE equity > 0"
        assert values == []

    def test_query_strings_coerced(self):
        filters = JobFilter.model_validate({"minSalary": "100", "hasEquity": "true"})
        assert filters.min_salary == 100
        assert filters.has_equity is True

    @pytest.mark.parametrize("query", [{"has_equity": "true"}, {"min_salary": "100"}])
    def test_snake_case_keys_rejected(self, query):
        with pytest.raises(ValidationError):
            JobFilter.model_validate(query)
