"""Shared fixtures: raw API record factories."""

from typing import Any

import pytest


@pytest.fixture
def movie_in_factory():
    """Build a raw movie record as returned by the API."""

    def factory(**overrides: Any) -> dict[str, Any]:
        base = {
            "_id": "5cd95395de30eff6ebccde5d",
            "name": "The Return of the King",
            "runtimeInMinutes": 201,
            "budgetInMillions": 94,
            "boxOfficeRevenueInMillions": 1120,
            "academyAwardNominations": 11,
            "academyAwardWins": 11,
            "rottenTomatoesScore": 95,
        }
        return {**base, **overrides}

    return factory


@pytest.fixture
def quote_in_factory():
    """Build a raw quote record as returned by the API."""

    def factory(**overrides: Any) -> dict[str, Any]:
        base = {
            "_id": "5cd96e05de30eff6ebcce84c",
            "dialog": "I didn't think it would end this way.",
            "movie": "5cd95395de30eff6ebccde5d",
            "character": "5cd99d4bde30eff6ebccfe2e",
        }
        return {**base, **overrides}

    return factory
