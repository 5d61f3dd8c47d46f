"""
Translate ``field__operator=value`` query parameters into a SQL predicate.

Every parameter whose name has the shape ``<field>__<operator>`` is a
search condition. Each condition is compiled through the fixed operator
table into a parenthesized fragment with one ``?`` placeholder, and all
fragments are joined by the keyword given in the ``searchOperator``
parameter::

    >>> new_search("age__greaterthan=18&name__equals=ammar&searchOperator=AND")
    SearchPredicate(conditions=('(age > ?)', '(name = ?)'), parameters=('18', 'ammar'), operator='AND')

Conditions are processed sorted by parameter name so the same query always
yields the same predicate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .exceptions import (
    SearchConditionsMissingError,
    SearchOperatorMissingError,
    UnknownSearchOperationError,
)
from .operators_sql import DEFAULT_SEARCH_OPERATORS
from .query_string import QueryInput, first_value, normalize_query
from .strategy import SearchComponents

logger = logging.getLogger("cqrs_ddd.pagination.search")

SEARCH_OPERATOR_KEY = "searchOperator"
CONDITION_SEPARATOR = "__"


@dataclass(frozen=True)
class SearchPredicate:
    """
    A parameterized boolean SQL expression.

    Attributes:
        conditions: Parenthesized SQL fragments, one ``?`` each.
        parameters: Bound values; ``parameters[i]`` binds to ``conditions[i]``.
        operator: Keyword joining the conditions (``""`` for one condition).
    """

    conditions: tuple[str, ...]
    parameters: tuple[str, ...]
    operator: str = ""

    def __post_init__(self) -> None:
        if not self.conditions:
            raise ValueError("A search predicate needs at least one condition")
        if len(self.conditions) != len(self.parameters):
            raise ValueError(
                f"{len(self.conditions)} conditions but "
                f"{len(self.parameters)} parameters"
            )

    @property
    def sql(self) -> str:
        """The combined WHERE fragment, e.g. ``((a = ?) AND (b > ?))``."""
        return "(" + f" {self.operator} ".join(self.conditions) + ")"


def get_search_components(field: str, operator: str, value: str) -> SearchComponents:
    """
    Compile one search condition.

    Returns:
        ``(condition, parameter)``; both are empty strings when *operator*
        is not a known search operation.
    """
    return DEFAULT_SEARCH_OPERATORS.compile(field, operator, value)


class SearchTranslator:
    """Turns request query parameters into a :class:`SearchPredicate`."""

    def __init__(
        self,
        *,
        operator_key: str = SEARCH_OPERATOR_KEY,
        separator: str = CONDITION_SEPARATOR,
    ) -> None:
        """
        Initialize SearchTranslator.

        Args:
            operator_key: Parameter holding the combining keyword (AND/OR).
            separator: Token between field and operator in parameter names.
        """
        if not separator:
            raise ValueError("separator must not be empty")
        self._operator_key = operator_key
        self._separator = separator

    def split(self, name: str) -> tuple[str, str] | None:
        """Split a parameter name into ``(field, operator)`` at the first separator."""
        field, found, operation = name.partition(self._separator)
        if not found or not field or not operation:
            return None
        return field, operation

    def translate(self, query: QueryInput | None) -> SearchPredicate | None:
        """
        Build the predicate for *query*.

        Returns:
            The combined predicate, or ``None`` when the query carries no
            search parameters at all.

        Raises:
            UnknownSearchOperationError: A condition names an unknown operator.
            SearchOperatorMissingError: Two or more conditions, no keyword.
            SearchConditionsMissingError: A keyword with fewer than two
                conditions.
        """
        values = normalize_query(query)
        operator = first_value(values, self._operator_key)
        conditions: list[str] = []
        parameters: list[str] = []

        for name in sorted(values):
            parts = self.split(name)
            if parts is None or not values[name]:
                continue
            field, operation = parts
            condition, parameter = get_search_components(
                field, operation, values[name][0]
            )
            if not condition:
                logger.debug("Rejected search parameter %r", name)
                raise UnknownSearchOperationError(
                    operation, DEFAULT_SEARCH_OPERATORS.supported_operations
                )
            conditions.append(condition)
            parameters.append(parameter)

        if len(conditions) > 1 and not operator:
            raise SearchOperatorMissingError()
        if operator and len(conditions) < 2:
            raise SearchConditionsMissingError()
        if not conditions:
            return None

        predicate = SearchPredicate(
            conditions=tuple(conditions),
            parameters=tuple(parameters),
            operator=operator,
        )
        logger.debug(
            "Translated %d search condition(s): %s", len(conditions), predicate.sql
        )
        return predicate


_DEFAULT_TRANSLATOR = SearchTranslator()


def new_search(query: QueryInput | None) -> SearchPredicate | None:
    """Translate *query* with the default parameter names."""
    return _DEFAULT_TRANSLATOR.translate(query)
