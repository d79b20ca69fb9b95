"""Pydantic schemas for raw API records and their domain mappers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from one_api_sdk.domain.entities import Movie, MovieQuote
from one_api_sdk.domain.exceptions import SchemaViolationError


class MovieIn(BaseModel):
    """Incoming movie data from The One API."""

    id: str = Field(alias="_id")
    name: str
    runtime_in_minutes: float = Field(alias="runtimeInMinutes")
    budget_in_millions: float = Field(alias="budgetInMillions")
    box_office_revenue_in_millions: float = Field(alias="boxOfficeRevenueInMillions")
    academy_award_nominations: int = Field(alias="academyAwardNominations")
    academy_award_wins: int = Field(alias="academyAwardWins")
    rotten_tomatoes_score: float = Field(alias="rottenTomatoesScore")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class QuoteIn(BaseModel):
    """Incoming quote data from The One API."""

    id: str = Field(alias="_id")
    dialog: str
    movie: str
    character: str

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# Domain attribute name -> wire field name, for sorting by domain names
_WIRE_FIELDS: dict[type, dict[str, str]] = {
    Movie: {
        name: field.alias or name for name, field in MovieIn.model_fields.items()
    },
    MovieQuote: {
        "id": "_id",
        "dialog": "dialog",
        "movie_id": "movie",
        "character_id": "character",
    },
}


def wire_field_name(record_type: type, name: str) -> str:
    """Translate a domain attribute name into the API's field name.

    Names that are already in wire form (or unknown) pass through unchanged.
    """
    return _WIRE_FIELDS.get(record_type, {}).get(name, name)


def convert_movie_in(raw: dict[str, Any]) -> Movie:
    """Convert one raw movie record into our Movie model."""
    try:
        movie_in = MovieIn.model_validate(raw)
    except ValidationError as exc:
        raise SchemaViolationError("Unexpected movie data from The One API", exc) from exc
    return Movie(
        id=movie_in.id,
        name=movie_in.name,
        runtime_in_minutes=movie_in.runtime_in_minutes,
        budget_in_millions=movie_in.budget_in_millions,
        box_office_revenue_in_millions=movie_in.box_office_revenue_in_millions,
        academy_award_nominations=movie_in.academy_award_nominations,
        academy_award_wins=movie_in.academy_award_wins,
        rotten_tomatoes_score=movie_in.rotten_tomatoes_score,
    )


def convert_quote_in(raw: dict[str, Any]) -> MovieQuote:
    """Convert one raw quote record into our MovieQuote model."""
    try:
        quote_in = QuoteIn.model_validate(raw)
    except ValidationError as exc:
        raise SchemaViolationError("Unexpected quote data from The One API", exc) from exc
    return MovieQuote(
        id=quote_in.id,
        dialog=quote_in.dialog,
        movie_id=quote_in.movie,
        character_id=quote_in.character,
    )
