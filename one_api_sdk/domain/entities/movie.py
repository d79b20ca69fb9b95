"""Domain entity for a Lord of the Rings movie."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """Info about a LotR movie, with stable snake_case field names."""

    id: str
    name: str
    runtime_in_minutes: float
    budget_in_millions: float
    box_office_revenue_in_millions: float
    academy_award_nominations: int
    academy_award_wins: int
    rotten_tomatoes_score: float
