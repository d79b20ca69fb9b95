"""Filter rule constructors for The One API.

The API's filter grammar embeds the operator and value in a single query
token (``name=value``, ``budgetInMillions<100``, ``!name``), so a rule is
just the token string. See https://the-one-api.dev/documentation#5
"""

import re
from collections.abc import Iterable

FilterRule = str

_REGEX_FLAGS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
)


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def match_filter(field: str, match_value: str) -> FilterRule:
    """Records whose field equals the match value.

    Example:
        match_filter("name", "The Return of the King")
    """
    return f"{field}={match_value}"


def doesnt_match_filter(field: str, match_value: str) -> FilterRule:
    """Records whose field does not equal the match value."""
    return f"{field}!={match_value}"


def include_filter(field: str, match_values: Iterable[str]) -> FilterRule:
    """Records whose field equals one of the match values."""
    return f"{field}={','.join(match_values)}"


def exclude_filter(field: str, match_values: Iterable[str]) -> FilterRule:
    """Records whose field equals none of the match values."""
    return f"{field}!={','.join(match_values)}"


def exists_filter(field: str) -> FilterRule:
    """Records that have any value for the field."""
    return field


def doesnt_exist_filter(field: str) -> FilterRule:
    """Records that have no value for the field."""
    return f"!{field}"


def regex_filter(field: str, pattern: str | re.Pattern[str]) -> FilterRule:
    """Records whose field matches a regular expression.

    Compiled patterns keep their IGNORECASE / MULTILINE / DOTALL flags,
    rendered in the API's ``/source/flags`` form.
    """
    if isinstance(pattern, re.Pattern):
        source = pattern.pattern
        flags = "".join(
            letter for flag, letter in _REGEX_FLAGS if pattern.flags & flag
        )
    else:
        source = pattern
        flags = ""
    return f"{field}=/{source}/{flags}"


def less_than_filter(field: str, match_value: int | float) -> FilterRule:
    return f"{field}<{_format_number(match_value)}"


def less_than_or_equal_filter(field: str, match_value: int | float) -> FilterRule:
    return f"{field}<={_format_number(match_value)}"


def greater_than_filter(field: str, match_value: int | float) -> FilterRule:
    return f"{field}>{_format_number(match_value)}"


def greater_than_or_equal_filter(field: str, match_value: int | float) -> FilterRule:
    return f"{field}>={_format_number(match_value)}"
