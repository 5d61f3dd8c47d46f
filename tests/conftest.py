"""Shared fixtures for pagination tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from cqrs_ddd_pagination import SearchTranslator


@dataclass(frozen=True)
class User:
    id: int
    name: str
    surname: str


@pytest.fixture
def translator() -> SearchTranslator:
    return SearchTranslator()


@pytest.fixture
def users() -> list[User]:
    return [
        User(id=1, name="John", surname="Smith"),
        User(id=2, name="Jill", surname="Doe"),
        User(id=3, name="Paul", surname="Johnson"),
    ]
