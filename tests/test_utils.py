"""Tests for the type-name and link helpers."""

import pytest

from jsonapi_serializer.utils import collection_link, resource_link, singularize


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("users", "user"),
        ("books", "book"),
        ("Books", "book"),
        ("categories", "category"),
        ("addresses", "address"),
        ("boxes", "box"),
        ("address", "address"),
        ("status", "status"),
        ("people", "person"),
        ("book", "book"),
    ],
)
def test_singularize(name: str, expected: str) -> None:
    assert singularize(name) == expected


def test_collection_link_joins_base_and_type() -> None:
    assert collection_link("http://localhost:3000/api", "users") == "http://localhost:3000/api/users"
    assert collection_link("http://localhost:3000/api/", "users") == "http://localhost:3000/api/users"


def test_collection_link_without_base_is_relative() -> None:
    assert collection_link(None, "users") == "/users"
    assert collection_link("", "users") == "/users"


def test_resource_link() -> None:
    assert resource_link("http://x/api", "users", "7") == "http://x/api/users/7"
