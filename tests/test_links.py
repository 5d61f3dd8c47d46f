"""Tests for LinkBuilder."""

from __future__ import annotations

import pytest

from cqrs_ddd_pagination import LinkBuilder, Links, new_links

BASE_URL = "api.demo.com/v1/users"


@pytest.mark.parametrize(
    ("url", "count", "expected"),
    [
        (
            BASE_URL,
            3,
            Links(self_link=BASE_URL),
        ),
        (
            f"{BASE_URL}?order_by=name&order=asc",
            3,
            Links(self_link=f"{BASE_URL}?order_by=name&order=asc"),
        ),
        (
            f"{BASE_URL}?page=1&limit=3&order_by=name&order=asc",
            3,
            Links(
                self_link=f"{BASE_URL}?page=1&limit=3&order_by=name&order=asc",
                next=f"{BASE_URL}?limit=3&order=asc&order_by=name&page=2",
            ),
        ),
        (
            f"{BASE_URL}?page=2&limit=3&order_by=name&order=asc",
            3,
            Links(
                self_link=f"{BASE_URL}?page=2&limit=3&order_by=name&order=asc",
                next=f"{BASE_URL}?limit=3&order=asc&order_by=name&page=3",
                previous=f"{BASE_URL}?limit=3&order=asc&order_by=name&page=1",
            ),
        ),
        (
            f"{BASE_URL}?page=3&limit=3&order_by=name&order=asc",
            3,
            Links(
                self_link=f"{BASE_URL}?page=3&limit=3&order_by=name&order=asc",
                next=f"{BASE_URL}?limit=3&order=asc&order_by=name&page=4",
                previous=f"{BASE_URL}?limit=3&order=asc&order_by=name&page=2",
            ),
        ),
        (
            f"{BASE_URL}?page=4&limit=3&order_by=name&order=asc",
            2,
            Links(
                self_link=f"{BASE_URL}?page=4&limit=3&order_by=name&order=asc",
                previous=f"{BASE_URL}?limit=3&order=asc&order_by=name&page=3",
            ),
        ),
    ],
    ids=["no-paging", "ordering-only", "first", "second", "third", "last"],
)
def test_new_links(url: str, count: int, expected: Links) -> None:
    assert new_links(url, count) == expected


def test_page_without_limit_has_only_previous() -> None:
    links = new_links(f"{BASE_URL}?page=2", 100)
    assert links.next is None
    assert links.previous == f"{BASE_URL}?page=1"


def test_count_above_limit_has_next() -> None:
    links = new_links(f"{BASE_URL}?page=1&limit=3", 5)
    assert links.next == f"{BASE_URL}?limit=3&page=2"


def test_unparseable_page_yields_self_only() -> None:
    url = f"{BASE_URL}?page=abc&limit=3"
    assert new_links(url, 10) == Links(self_link=url)


def test_other_parameters_are_preserved_and_encoded() -> None:
    url = "https://api.demo.com/v1/users?page=2&limit=1&name__contains=a+b&searchOperator=&z=1&z=2#top"
    links = new_links(url, 1)
    assert links.self_link == url
    assert links.next == (
        "https://api.demo.com/v1/users?limit=1&name__contains=a+b&page=3"
        "&searchOperator=&z=1&z=2#top"
    )
    assert links.previous == (
        "https://api.demo.com/v1/users?limit=1&name__contains=a+b&page=1"
        "&searchOperator=&z=1&z=2#top"
    )


def test_repeated_page_parameter_is_replaced() -> None:
    links = new_links(f"{BASE_URL}?page=2&page=7", 0)
    assert links.previous == f"{BASE_URL}?page=1"


def test_custom_keys() -> None:
    builder = LinkBuilder(page_key="p", limit_key="size")
    links = builder.build(f"{BASE_URL}?p=2&size=10", 10)
    assert links.next == f"{BASE_URL}?p=3&size=10"
    assert links.previous == f"{BASE_URL}?p=1&size=10"


def test_links_serialise_self_key() -> None:
    links = new_links(f"{BASE_URL}?page=1&limit=1", 1)
    assert links.model_dump(by_alias=True) == {
        "self": f"{BASE_URL}?page=1&limit=1",
        "next": f"{BASE_URL}?limit=1&page=2",
        "previous": None,
    }
