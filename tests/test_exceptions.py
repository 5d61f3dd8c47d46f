"""Tests for exceptions module."""

from __future__ import annotations

from cqrs_ddd_pagination.exceptions import (
    InvalidResultsError,
    PaginationError,
    QueryValidationError,
    SearchConditionsMissingError,
    SearchError,
    SearchOperatorMissingError,
    UnknownSearchOperationError,
)
from cqrs_ddd_pagination.operators_sql import DEFAULT_SEARCH_OPERATORS

# -- UnknownSearchOperationError -------------------------------------------------


def test_unknown_operation_message_names_operator():
    err = UnknownSearchOperationError("contians", ["contains", "equals"])
    assert str(err) == "Unknown search operation 'contians'"


def test_unknown_operation_suggestions():
    err = UnknownSearchOperationError(
        "greaterthen", DEFAULT_SEARCH_OPERATORS.supported_operations
    )
    d = err.to_dict()
    assert d["error"] == "UNKNOWN_SEARCH_OPERATION"
    assert d["operation"] == "greaterthen"
    assert "greaterthan" in d["suggestions"]


def test_unknown_operation_no_matches():
    err = UnknownSearchOperationError("zzzzz")
    assert err.to_dict()["suggestions"] == []


# -- Arity errors --------------------------------------------------------------------


def test_operator_missing_to_dict():
    assert SearchOperatorMissingError().to_dict() == {
        "error": "SEARCH_OPERATOR_MISSING",
        "message": "Search operator is missing",
    }


def test_conditions_missing_to_dict():
    assert SearchConditionsMissingError().to_dict() == {
        "error": "SEARCH_CONDITIONS_MISSING",
        "message": "Cannot find search conditions",
    }


# -- QueryValidationError ----------------------------------------------------------


def test_query_validation_to_dict():
    err = QueryValidationError("Limit is invalid", "limit")
    assert err.to_dict() == {
        "error": "INVALID_QUERY",
        "message": "Limit is invalid",
        "param": "limit",
    }


# -- InvalidResultsError ------------------------------------------------------------


def test_invalid_results_is_type_error():
    err = InvalidResultsError("text")
    assert isinstance(err, TypeError)
    assert err.to_dict()["type"] == "str"


# -- Hierarchy --------------------------------------------------------------------------


def test_hierarchy():
    assert issubclass(QueryValidationError, PaginationError)
    assert issubclass(UnknownSearchOperationError, SearchError)
    assert issubclass(SearchOperatorMissingError, SearchError)
    assert issubclass(SearchConditionsMissingError, SearchError)
    assert issubclass(SearchError, PaginationError)
    assert issubclass(InvalidResultsError, PaginationError)
    assert not issubclass(InvalidResultsError, SearchError)


def test_base_to_dict():
    err = PaginationError("boom")
    assert err.to_dict() == {"error": "PaginationError", "message": "boom"}
