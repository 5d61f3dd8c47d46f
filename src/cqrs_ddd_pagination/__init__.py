"""REST list-endpoint helpers — pagination links, query validation, search predicates."""

from __future__ import annotations

from .exceptions import (
    InvalidResultsError,
    PaginationError,
    QueryValidationError,
    SearchConditionsMissingError,
    SearchError,
    SearchOperatorMissingError,
    UnknownSearchOperationError,
)
from .links import LinkBuilder, Links, new_links
from .operators import SearchOperation
from .page import Page, new_page
from .query import DEFAULT_LIMIT, DEFAULT_ORDER_BY, PaginationQuery, new_query, validate_query
from .search import (
    SearchPredicate,
    SearchTranslator,
    get_search_components,
    new_search,
)
from .strategy import SearchComponents

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_ORDER_BY",
    "InvalidResultsError",
    "LinkBuilder",
    "Links",
    "Page",
    "PaginationError",
    "PaginationQuery",
    "QueryValidationError",
    "SearchComponents",
    "SearchConditionsMissingError",
    "SearchError",
    "SearchOperation",
    "SearchOperatorMissingError",
    "SearchPredicate",
    "SearchTranslator",
    "UnknownSearchOperationError",
    "get_search_components",
    "new_links",
    "new_page",
    "new_query",
    "new_search",
    "validate_query",
]
