"""Standard comparison operators."""

from __future__ import annotations

from ..operators import SearchOperation
from ..strategy import PLACEHOLDER, SearchOperator


class _ComparisonOperator(SearchOperator):
    sql_operator: str

    def condition(self, field: str) -> str:
        return f"({field} {self.sql_operator} {PLACEHOLDER})"


class EqualsOperator(_ComparisonOperator):
    sql_operator = "="

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.EQUALS


class NotEqualsOperator(_ComparisonOperator):
    sql_operator = "!="

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.NOT_EQUALS


class GreaterThanOperator(_ComparisonOperator):
    sql_operator = ">"

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.GREATER_THAN


class LessThanOperator(_ComparisonOperator):
    sql_operator = "<"

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.LESS_THAN


class GreaterEqualOperator(_ComparisonOperator):
    sql_operator = ">="

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.GREATER_EQUAL


class LessEqualOperator(_ComparisonOperator):
    sql_operator = "<="

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.LESS_EQUAL
