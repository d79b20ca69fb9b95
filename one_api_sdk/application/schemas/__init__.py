from .api_result import ApiResult
from .records import (
    MovieIn,
    QuoteIn,
    convert_movie_in,
    convert_quote_in,
    wire_field_name,
)

__all__ = [
    "ApiResult",
    "MovieIn",
    "QuoteIn",
    "convert_movie_in",
    "convert_quote_in",
    "wire_field_name",
]
