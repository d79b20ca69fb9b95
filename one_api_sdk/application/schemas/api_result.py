"""Pydantic schema for the JSON envelope every API endpoint returns."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiResult(BaseModel):
    """Body of a successful API call: one page of raw records plus counts.

    Validated strictly so that a malformed body (missing ``docs`` or
    ``total``, strings where numbers belong) is rejected instead of coerced.
    ``limit`` is expected but optional.
    """

    docs: list[dict[str, Any]]
    total: int | float
    limit: int | None = None

    model_config = ConfigDict(strict=True, extra="ignore")
