"""Command line tool for fetching data from The One API.

Examples:
    Get all movies sorted alphabetically by name:
        one-api-get-data movie --token my-token --sort name

    Get info about "The Return of the King":
        one-api-get-data movie --token my-token --match name="The Return of the King"

    Find up to 5 quotes about Samwise Gamgee:
        one-api-get-data quote --token my-token --filter "dialog=/Sam/" --limit 5

The token falls back to the ONE_API_ACCESS_TOKEN environment variable.
"""

import argparse
import asyncio
import json
from dataclasses import asdict
from typing import Any

from one_api_sdk.application.services import TheOneApiClient
from one_api_sdk.config import get_settings
from one_api_sdk.domain.entities import ResourceKind
from one_api_sdk.domain.filters import FilterRule, match_filter
from one_api_sdk.infrastructure.logging.log_config import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch movies or quotes from The One API")
    parser.add_argument("resource", choices=[kind.value for kind in ResourceKind])
    parser.add_argument("-i", "--id", help="Fetch a single record by ID")
    parser.add_argument("-t", "--token", help="Access token for The One API")
    parser.add_argument("-l", "--limit", type=int, help="Page size")
    parser.add_argument("-o", "--offset", type=int, help="Number of records to skip")
    parser.add_argument("-s", "--sort", help="Field to sort by")
    parser.add_argument("-d", "--direction", choices=["asc", "desc"], help="Sort direction")
    parser.add_argument(
        "-m", "--match", action="append", default=[], help="Equality filter as field=value"
    )
    # Catch-all for the other filter kinds, passed through as raw rules
    parser.add_argument(
        "-f", "--filter", action="append", default=[], help="Raw filter rule, e.g. 'runtimeInMinutes>160'"
    )
    return parser.parse_args(argv)


def build_filters(matches: list[str], raw_filters: list[str]) -> list[FilterRule]:
    """Turn --match field=value pairs and raw --filter rules into filter rules."""
    filters: list[FilterRule] = []
    for match in matches:
        name, _, value = match.partition("=")
        filters.append(match_filter(name, value))
    filters.extend(raw_filters)
    return filters


async def main(args: argparse.Namespace) -> dict[str, Any] | None:
    async with TheOneApiClient(args.token, settings=get_settings()) as client:
        if args.id is not None:
            fetch_one = client.fetch_movie if args.resource == "movie" else client.fetch_quote
            record = await fetch_one(args.id)
            return asdict(record) if record is not None else None

        fetch_many = client.fetch_movies if args.resource == "movie" else client.fetch_quotes
        results = await fetch_many(
            limit=args.limit,
            offset=args.offset,
            sort_by=args.sort,
            sort_direction=args.direction,
            filters=build_filters(args.match, args.filter),
        )
        return {
            "total": results.total,
            "page_size": results.page_size,
            "current_page": results.current_page,
            "has_next": results.has_next,
            "data": [asdict(record) for record in results.data],
        }


def run() -> int:
    args = parse_args()
    setup_logging()
    output = asyncio.run(main(args))
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
