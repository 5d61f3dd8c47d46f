"""
Search operator compilation strategy.

Provides the ``SearchOperator`` interface and the read-only
``SearchOperatorTable`` the translator dispatches through. Each built-in
operator is an isolated class in ``operators_sql/``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from .operators import SearchOperation

PLACEHOLDER = "?"


class SearchComponents(NamedTuple):
    """A compiled search condition: SQL fragment and its bound parameter."""

    condition: str
    parameter: str


class SearchOperator(ABC):
    """
    Strategy interface for compiling a ``field__operator=value`` search
    parameter into a parenthesized SQL fragment with a single ``?``
    placeholder.
    """

    @property
    @abstractmethod
    def name(self) -> SearchOperation:
        """The operation this strategy handles."""
        ...

    @abstractmethod
    def condition(self, field: str) -> str:
        """Return the parenthesized SQL fragment for *field*."""
        ...

    def parameter(self, value: str) -> str:
        """Return the value to bind to the fragment's placeholder."""
        return value

    def compile(self, field: str, value: str) -> SearchComponents:
        return SearchComponents(self.condition(field), self.parameter(value))


class SearchOperatorTable:
    """
    Immutable lookup of ``SearchOperator`` instances keyed by operation name.

    Built once from a fixed set of strategies; there is no way to add or
    remove operators afterwards.
    """

    def __init__(self, *operators: SearchOperator) -> None:
        self._operators = MappingProxyType({op.name.value: op for op in operators})

    def get(self, name: str) -> SearchOperator | None:
        return self._operators.get(name)

    def has(self, name: str) -> bool:
        return name in self._operators

    @property
    def supported_operations(self) -> list[str]:
        return sorted(self._operators)

    def compile(self, field: str, operation: str, value: str) -> SearchComponents:
        """
        Look up the operation and compile it.

        Returns:
            The compiled components, or empty components when the operation
            is unknown.
        """
        op = self.get(operation)
        if op is None:
            return SearchComponents("", "")
        return op.compile(field, value)
