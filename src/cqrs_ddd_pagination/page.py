"""Page — the list-endpoint response envelope."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidResultsError
from .links import Links, new_links
from .query import validate_query

logger = logging.getLogger("cqrs_ddd.pagination.page")

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """
    A page of results with its navigation links.

    Dump with ``model_dump(by_alias=True)`` to get the wire shape
    ``{"_links": {...}, "count": ..., "results": [...]}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    links: Links = Field(serialization_alias="_links")
    count: int = Field(ge=0)
    results: list[T]


def new_page(url: str, results: Sequence[T]) -> Page[T]:
    """
    Wrap *results* fetched for the request at *url* in a :class:`Page`.

    Raises:
        QueryValidationError: The URL's pagination parameters are invalid.
        InvalidResultsError: *results* is not a sequence of items.
    """
    validate_query(urlsplit(url).query)
    if isinstance(results, (str, bytes)) or not isinstance(results, Sequence):
        raise InvalidResultsError(results)

    items = list(results)
    logger.debug("Built page for %s with %d result(s)", url, len(items))
    return Page(links=new_links(url, len(items)), count=len(items), results=items)
