"""Links — self/next/previous hyperlinks for a page of results."""

from __future__ import annotations

import logging
from urllib.parse import SplitResult, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field

from .query import LIMIT_KEY, PAGE_KEY
from .query_string import QueryValues, encode_query, first_value, parse_int, parse_query_string

logger = logging.getLogger("cqrs_ddd.pagination.links")


class Links(BaseModel):
    """Pagination hyperlinks; ``None`` marks an absent link."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_link: str = Field(serialization_alias="self")
    next: str | None = None
    previous: str | None = None


class LinkBuilder:
    """
    Derive pagination links from the request URL and the result count.

    A next link is produced when the page was full (``count >= limit``), a
    previous link when the current page is above 1. Rebuilt links keep all
    other query parameters and re-encode the query sorted by name.
    """

    def __init__(self, *, page_key: str = PAGE_KEY, limit_key: str = LIMIT_KEY) -> None:
        self._page_key = page_key
        self._limit_key = limit_key

    def build(self, url: str, count: int) -> Links:
        parts = urlsplit(url)
        values = parse_query_string(parts.query)
        page = parse_int(first_value(values, self._page_key))
        if page is None:
            return Links(self_link=url)

        next_link = None
        limit = parse_int(first_value(values, self._limit_key))
        if limit is not None and count >= limit:
            next_link = self._with_page(parts, values, page + 1)

        previous_link = None
        if page > 1:
            previous_link = self._with_page(parts, values, page - 1)

        logger.debug("Links for %s: next=%s previous=%s", url, next_link, previous_link)
        return Links(self_link=url, next=next_link, previous=previous_link)

    def _with_page(self, parts: SplitResult, values: QueryValues, page: int) -> str:
        query = {**values, self._page_key: [str(page)]}
        return urlunsplit(parts._replace(query=encode_query(query)))


_DEFAULT_BUILDER = LinkBuilder()


def new_links(url: str, count: int) -> Links:
    """Build links for *url* using the default ``page``/``limit`` names."""
    return _DEFAULT_BUILDER.build(url, count)
