"""Domain entity for a quote from a Lord of the Rings movie."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MovieQuote:
    """A single line of dialog, linked to its movie and character."""

    id: str
    dialog: str
    movie_id: str
    character_id: str
