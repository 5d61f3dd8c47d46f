"""
Built-in search operator implementations and the default operator table.

Usage::

    from cqrs_ddd_pagination.operators_sql import DEFAULT_SEARCH_OPERATORS

    condition, parameter = DEFAULT_SEARCH_OPERATORS.compile("name", "contains", "am")
"""

from __future__ import annotations

from ..strategy import SearchOperatorTable
from .standard import (
    EqualsOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualsOperator,
)
from .string import ContainsOperator, EndsWithOperator, StartsWithOperator
from .temporal import (
    AfterOperator,
    BeforeOperator,
    DayOperator,
    MonthOperator,
    YearOperator,
)


def build_default_table() -> SearchOperatorTable:
    """Create a table holding every built-in search operator."""
    return SearchOperatorTable(
        # Comparison
        EqualsOperator(),
        NotEqualsOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        # Pattern matching
        StartsWithOperator(),
        EndsWithOperator(),
        ContainsOperator(),
        # Temporal
        AfterOperator(),
        BeforeOperator(),
        YearOperator(),
        MonthOperator(),
        DayOperator(),
    )


DEFAULT_SEARCH_OPERATORS = build_default_table()

__all__ = [
    "DEFAULT_SEARCH_OPERATORS",
    "AfterOperator",
    "BeforeOperator",
    "ContainsOperator",
    "DayOperator",
    "EndsWithOperator",
    "EqualsOperator",
    "GreaterEqualOperator",
    "GreaterThanOperator",
    "LessEqualOperator",
    "LessThanOperator",
    "MonthOperator",
    "NotEqualsOperator",
    "StartsWithOperator",
    "YearOperator",
    "build_default_table",
]
