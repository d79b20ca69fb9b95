"""Command line tool that finds which movie a line of dialog comes from."""

import argparse
import asyncio
import re

from one_api_sdk.application.services import TheOneApiClient
from one_api_sdk.config import get_settings
from one_api_sdk.domain.entities import Movie, MovieQuote
from one_api_sdk.domain.filters import regex_filter
from one_api_sdk.infrastructure.logging.log_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the movie a quote is from")
    parser.add_argument("-d", "--dialog", required=True, help="Regular expression to match dialog against")
    parser.add_argument("-t", "--token", help="Access token for The One API")
    parser.add_argument("-l", "--limit", type=int, help="Maximum number of quotes to look up")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="Match dialog case-insensitively")
    return parser.parse_args(argv)


def format_line(quote: MovieQuote, movie: Movie | None) -> str:
    if movie is None:
        return f"From unknown movie: {quote.dialog}"
    return f'From "{movie.name}": {quote.dialog}'


async def main(args: argparse.Namespace) -> list[str]:
    pattern = re.compile(args.dialog, re.IGNORECASE if args.ignore_case else 0)
    async with TheOneApiClient(args.token, settings=get_settings()) as client:
        quotes = await client.fetch_quotes(
            filters=[regex_filter("dialog", pattern)],
            limit=args.limit,
        )
        # Independent single-record lookups, one per distinct movie
        movie_ids = list(dict.fromkeys(quote.movie_id for quote in quotes.data))
        movies = await asyncio.gather(*(client.fetch_movie(movie_id) for movie_id in movie_ids))
        by_id = dict(zip(movie_ids, movies))
        return [format_line(quote, by_id[quote.movie_id]) for quote in quotes.data]


def run() -> int:
    args = parse_args()
    setup_logging()
    for line in asyncio.run(main(args)):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
