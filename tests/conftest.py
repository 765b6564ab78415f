"""Shared fixtures for the serializer test suite."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def users() -> list[dict[str, Any]]:
    """Two flat user records."""
    return [
        {"id": "54735750e16638ba1eee59cb", "firstName": "Sandro", "lastName": "Munda"},
        {"id": "5490212e69e49d0c4f9fc6b4", "firstName": "Lawrence", "lastName": "Bennett"},
    ]


@pytest.fixture
def users_with_address() -> list[dict[str, Any]]:
    """Users embedding an address that carries its own id."""
    return [
        {
            "id": "54735750e16638ba1eee59cb",
            "firstName": "Sandro",
            "lastName": "Munda",
            "address": {
                "id": "54735722e16620ba1eee36af",
                "addressLine1": "406 Madison Court",
                "zipCode": "49426",
                "country": "USA",
            },
        },
        {
            "id": "5490143e69e49d0c8f9fc6bc",
            "firstName": "Lawrence",
            "lastName": "Bennett",
            "address": {
                "id": "54735697e16624ba1eee36bf",
                "addressLine1": "361 Shady Lane",
                "zipCode": "23185",
                "country": "USA",
            },
        },
    ]


@pytest.fixture
def users_with_books() -> list[dict[str, Any]]:
    """Users embedding arrays of books; both users own the Steve Jobs book."""
    return [
        {
            "id": "54735750e16638ba1eee59cb",
            "firstName": "Sandro",
            "lastName": "Munda",
            "books": [
                {
                    "id": "52735730e16632ba1eee62dd",
                    "title": "Tesla, SpaceX, and the Quest for a Fantastic Future",
                    "ISBN": "978-0062301239",
                },
                {
                    "id": "52735780e16610ba1eee15cd",
                    "title": "Steve Jobs",
                    "ISBN": "978-1451648546",
                },
            ],
        },
        {
            "id": "5490143e69e49d0c8f9fc6bc",
            "firstName": "Lawrence",
            "lastName": "Bennett",
            "books": [
                {
                    "id": "52735780e16610ba1eee15cd",
                    "title": "Steve Jobs (second printing)",
                    "ISBN": "978-1451648546",
                },
                {
                    "id": "52735671e16610ba1eee15ff",
                    "title": "Einstein: His Life and Universe",
                    "ISBN": "978-0743264747",
                },
            ],
        },
    ]
