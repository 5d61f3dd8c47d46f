"""Date and time operators."""

from __future__ import annotations

from ..operators import SearchOperation
from ..strategy import PLACEHOLDER, SearchOperator


class AfterOperator(SearchOperator):
    @property
    def name(self) -> SearchOperation:
        return SearchOperation.AFTER

    def condition(self, field: str) -> str:
        return f"({field} > {PLACEHOLDER})"


class BeforeOperator(SearchOperator):
    @property
    def name(self) -> SearchOperation:
        return SearchOperation.BEFORE

    def condition(self, field: str) -> str:
        return f"({field} < {PLACEHOLDER})"


class _DatePartOperator(SearchOperator):
    """Compare one calendar component extracted from a date column."""

    sql_function: str

    def condition(self, field: str) -> str:
        return f"({self.sql_function}({field}) = {PLACEHOLDER})"


class YearOperator(_DatePartOperator):
    sql_function = "YEAR"

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.YEAR


class MonthOperator(_DatePartOperator):
    sql_function = "MONTH"

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.MONTH


class DayOperator(_DatePartOperator):
    sql_function = "DAY"

    @property
    def name(self) -> SearchOperation:
        return SearchOperation.DAY
