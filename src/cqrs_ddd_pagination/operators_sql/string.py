"""LIKE-based pattern operators.

The raw value is wrapped with ``%`` wildcards; wildcards already present in
the value are not escaped.
"""

from __future__ import annotations

from ..operators import SearchOperation
from ..strategy import PLACEHOLDER, SearchOperator


class _LikeOperator(SearchOperator):
    def condition(self, field: str) -> str:
        return f"({field} LIKE {PLACEHOLDER})"


class StartsWithOperator(_LikeOperator):
    @property
    def name(self) -> SearchOperation:
        return SearchOperation.STARTSWITH

    def parameter(self, value: str) -> str:
        return f"{value}%"


class EndsWithOperator(_LikeOperator):
    @property
    def name(self) -> SearchOperation:
        return SearchOperation.ENDSWITH

    def parameter(self, value: str) -> str:
        return f"%{value}"


class ContainsOperator(_LikeOperator):
    @property
    def name(self) -> SearchOperation:
        return SearchOperation.CONTAINS

    def parameter(self, value: str) -> str:
        return f"%{value}%"
