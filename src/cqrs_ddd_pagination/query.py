"""
Pagination and ordering query parameters.

``validate_query`` checks the raw ``page``, ``limit``, ``order_by`` and
``order`` values; ``PaginationQuery`` exposes them with the defaults a
datastore query needs (limit, offset and an ``ORDER BY`` clause).
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import QueryValidationError
from .query_string import QueryInput, QueryValues, first_value, normalize_query, parse_int

logger = logging.getLogger("cqrs_ddd.pagination.query")

PAGE_KEY = "page"
LIMIT_KEY = "limit"
ORDER_BY_KEY = "order_by"
ORDER_KEY = "order"

DEFAULT_LIMIT = 30
DEFAULT_ORDER_BY = "created_at"

ASC = "asc"
DESC = "desc"


def _is_positive_int(raw: str) -> bool:
    number = parse_int(raw)
    return number is not None and number > 0


def _check(values: QueryValues) -> None:
    page = first_value(values, PAGE_KEY)
    limit = first_value(values, LIMIT_KEY)
    order_by = first_value(values, ORDER_BY_KEY)
    order = first_value(values, ORDER_KEY)

    if page and not _is_positive_int(page):
        raise QueryValidationError("Page is invalid", PAGE_KEY)
    if limit and not page:
        raise QueryValidationError("Page is missing", PAGE_KEY)
    if limit and not _is_positive_int(limit):
        raise QueryValidationError("Limit is invalid", LIMIT_KEY)
    if order and not order_by:
        raise QueryValidationError("Order by is missing", ORDER_BY_KEY)
    if order and order not in (ASC, DESC):
        raise QueryValidationError("Order is invalid", ORDER_KEY)


def validate_query(query: QueryInput | None) -> None:
    """
    Validate pagination parameters, stopping at the first failure.

    Empty values count as absent.

    Raises:
        QueryValidationError: ``page`` or ``limit`` is not a positive
            integer, ``limit`` is given without ``page``, ``order`` is
            given without ``order_by``, or ``order`` is not asc/desc.
    """
    try:
        _check(normalize_query(query))
    except QueryValidationError as exc:
        logger.debug("Rejected pagination query: %s", exc)
        raise


class PaginationQuery(BaseModel):
    """Validated pagination parameters.

    ``page`` and ``limit`` are 0 when not requested.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    order_by: str = ""
    order: Literal["", "asc", "desc"] = ""

    @classmethod
    def from_query(cls, query: QueryInput | None) -> PaginationQuery:
        """Validate *query* and build a ``PaginationQuery`` from it."""
        values = normalize_query(query)
        validate_query(values)
        return cls(
            page=parse_int(first_value(values, PAGE_KEY)) or 0,
            limit=parse_int(first_value(values, LIMIT_KEY)) or 0,
            order_by=first_value(values, ORDER_BY_KEY),
            order=first_value(values, ORDER_KEY),
        )

    def get_order_by(self) -> str:
        return self.order_by if self.order_by else DEFAULT_ORDER_BY

    def get_direction(self) -> str:
        return DESC if self.order == DESC else ASC

    def get_order(self) -> str:
        """Return the ordering clause, e.g. ``"created_at asc"``."""
        return f"{self.get_order_by()} {self.get_direction()}"

    def get_limit(self) -> int:
        """Return the requested limit, or ``DEFAULT_LIMIT`` below 1."""
        if self.limit < 1:
            return DEFAULT_LIMIT
        return self.limit

    def get_offset(self) -> int:
        """Return the row offset; pages below 2 start at 0."""
        if self.page < 2:
            return 0
        return (self.page - 1) * self.get_limit()


def new_query(query: QueryInput | None) -> PaginationQuery:
    return PaginationQuery.from_query(query)
