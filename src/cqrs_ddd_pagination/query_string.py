"""Query-string helpers shared by the search, query and links modules."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Union
from urllib.parse import parse_qsl, urlencode

QueryValues = dict[str, list[str]]
"""Parsed query parameters: name -> ordered list of raw values."""

QueryInput = Union[str, Mapping[str, Union[str, Sequence[str]]]]
"""Anything accepted where query parameters are expected."""

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_query_string(raw: str) -> QueryValues:
    """Parse a raw query string, keeping blank values and value order."""
    values: QueryValues = {}
    for name, value in parse_qsl(raw.lstrip("?"), keep_blank_values=True):
        values.setdefault(name, []).append(value)
    return values


def normalize_query(query: QueryInput | None) -> QueryValues:
    """
    Coerce caller input into :data:`QueryValues`.

    Accepts a raw query string, a ``parse_qs``-style mapping of lists, or a
    flat mapping of single string values (as exposed by most web frameworks).
    """
    if query is None:
        return {}
    if isinstance(query, str):
        return parse_query_string(query)
    values: QueryValues = {}
    for name, value in query.items():
        if isinstance(value, str):
            values[name] = [value]
        else:
            values[name] = [str(v) for v in value]
    return values


def first_value(values: QueryValues, name: str) -> str:
    """Return the first value of *name*, or ``""`` when absent."""
    found = values.get(name)
    if not found:
        return ""
    return found[0]


def parse_int(raw: str) -> int | None:
    """Parse an optionally signed base-10 integer; ``None`` if malformed."""
    if not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def encode_query(values: QueryValues) -> str:
    """Encode parameters sorted by name, values kept in their given order."""
    return urlencode(
        [(name, value) for name in sorted(values) for value in values[name]]
    )
