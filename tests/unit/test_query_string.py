"""Unit tests for the query string builder."""

from one_api_sdk.domain.filters import doesnt_exist_filter, less_than_filter, match_filter
from one_api_sdk.infrastructure.http.query_string import QueryString, build_query_string


def test_limit_defaults_to_global_page_size():
    assert build_query_string() == "limit=100"


def test_custom_default_limit():
    assert build_query_string(default_limit=25) == "limit=25"


def test_sort_defaults_to_ascending():
    assert build_query_string(sort_by="name", limit=5) == "sort=name%3Aasc&limit=5"


def test_sort_with_direction():
    assert build_query_string(sort_by="name", sort_direction="desc") == "sort=name%3Adesc&limit=100"


def test_offset_is_omitted_when_absent():
    assert "offset" not in build_query_string(limit=5)


def test_zero_offset_is_emitted():
    assert build_query_string(limit=5, offset=0) == "limit=5&offset=0"


def test_parameter_order_is_sort_limit_offset_filters():
    query = build_query_string(
        filters=[match_filter("name", "The Two Towers"), less_than_filter("budgetInMillions", 100)],
        offset=10,
        limit=5,
        sort_by="name",
        sort_direction="asc",
    )
    assert query == (
        "sort=name%3Aasc&limit=5&offset=10"
        "&name%3DThe%20Two%20Towers&budgetInMillions%3C100"
    )


def test_filters_are_encoded_as_opaque_tokens():
    query = build_query_string(filters=[doesnt_exist_filter("name"), "dialog=/Sam/i"])
    assert query == "limit=100&!name&dialog%3D%2FSam%2Fi"


def test_query_string_keeps_first_position_of_repeated_key():
    query = QueryString()
    query.append("limit", "1")
    query.append("name")
    query.append("limit", "2")
    assert str(query) == "limit=2&name"


def test_query_string_encodes_values_independently():
    query = QueryString()
    query.append("sort", "name:asc")
    assert str(query) == "sort=name%3Aasc"
