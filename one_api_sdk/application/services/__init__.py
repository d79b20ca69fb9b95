from .client import TheOneApiClient
from .result_set import Mapper, ResultSet, fetch_result_set

__all__ = [
    "TheOneApiClient",
    "Mapper",
    "ResultSet",
    "fetch_result_set",
]
