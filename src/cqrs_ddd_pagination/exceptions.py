"""
Pagination exception hierarchy.

All exceptions inherit from ``PaginationError`` and provide ``to_dict()``
for API-friendly error responses. ``str(error)`` is a stable message that
callers may surface verbatim.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class PaginationError(Exception):
    """Base exception for all pagination and search errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class QueryValidationError(PaginationError):
    """A pagination or ordering query parameter is malformed or missing."""

    def __init__(self, message: str, param: str | None = None) -> None:
        self.message = message
        self.param = param
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_QUERY",
            "message": self.message,
            "param": self.param,
        }


class SearchError(PaginationError):
    """Base class for search-parameter translation failures."""


class UnknownSearchOperationError(SearchError):
    """
    A ``field__operator`` parameter names an operator outside the fixed set.

    Close matches are offered in ``to_dict()``; the message itself names
    only the offending operator.
    """

    def __init__(
        self, operation: str, valid_operations: list[str] | None = None
    ) -> None:
        self.operation = operation
        self.valid_operations = sorted(valid_operations or [])
        self.suggestions = get_close_matches(
            operation, self.valid_operations, n=3, cutoff=0.6
        )
        super().__init__(f"Unknown search operation '{operation}'")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_SEARCH_OPERATION",
            "message": str(self),
            "operation": self.operation,
            "suggestions": self.suggestions,
        }


class SearchOperatorMissingError(SearchError):
    """Several search conditions were given without a combining keyword."""

    def __init__(self) -> None:
        super().__init__("Search operator is missing")

    def to_dict(self) -> dict[str, Any]:
        return {"error": "SEARCH_OPERATOR_MISSING", "message": str(self)}


class SearchConditionsMissingError(SearchError):
    """A combining keyword was given with fewer than two search conditions."""

    def __init__(self) -> None:
        super().__init__("Cannot find search conditions")

    def to_dict(self) -> dict[str, Any]:
        return {"error": "SEARCH_CONDITIONS_MISSING", "message": str(self)}


class InvalidResultsError(PaginationError, TypeError):
    """The result payload handed to the page builder is not a sequence.

    This is an integration error on the caller's side, not a user input
    error.
    """

    def __init__(self, results: object) -> None:
        self.results_type = type(results).__name__
        super().__init__("The provided collection is not a sequence")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_RESULTS",
            "message": str(self),
            "type": self.results_type,
        }
