from .record_fetcher import RecordFetcher

__all__ = ["RecordFetcher"]
