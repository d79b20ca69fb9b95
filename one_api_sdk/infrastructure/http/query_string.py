"""Query string builder for The One API's filter syntax.

Generic encoders (``urllib.parse.urlencode``, ``httpx.QueryParams``) only
know ``key=value`` pairs. The API's filters are single tokens that carry
their own operator (``name!=x``, ``budgetInMillions<100``, ``!name``), so a
filter is appended as a key without a value and percent-encoded as a whole.

That encodes the operator too (``name=x`` is sent as ``name%3Dx``). The One
API accepts this, but a strict query-string parser will read the token as a
bare key.
"""

from collections.abc import Iterable
from urllib.parse import quote

from one_api_sdk.config import DEFAULT_PAGE_SIZE, DEFAULT_SORT_DIRECTION

# encodeURIComponent leaves these unescaped in addition to quote()'s defaults
_SAFE = "!*'()"


def _encode(text: str) -> str:
    return quote(text, safe=_SAFE)


class QueryString:
    """Ordered query parameters where a key may have no value.

    Appending an existing key keeps its original position.
    """

    def __init__(self) -> None:
        self._values: dict[str, str | None] = {}

    def append(self, key: str, value: str | None = None) -> None:
        self._values[key] = value

    def __str__(self) -> str:
        entries = []
        for key, value in self._values.items():
            if value is None:
                entries.append(_encode(key))
            else:
                entries.append(f"{_encode(key)}={_encode(value)}")
        return "&".join(entries)


def build_query_string(
    *,
    limit: int | None = None,
    offset: int | None = None,
    sort_by: str | None = None,
    sort_direction: str | None = None,
    filters: Iterable[str] = (),
    default_limit: int = DEFAULT_PAGE_SIZE,
    default_sort_direction: str = DEFAULT_SORT_DIRECTION,
) -> str:
    """Build the canonical query: sort, limit, offset, then filters."""
    query = QueryString()
    if sort_by:
        query.append("sort", f"{sort_by}:{sort_direction or default_sort_direction}")
    query.append("limit", str(limit if limit is not None else default_limit))
    if offset is not None:
        query.append("offset", str(offset))
    for rule in filters:
        query.append(rule)
    return str(query)
