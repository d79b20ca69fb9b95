"""Centralized logging configuration.

Applies per-category log levels from ClientSettings so that noisy loggers
(httpx / httpcore request lines) can be silenced without hiding the
client's own retry warnings.

Usage:
    from one_api_sdk.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at program start (the CLI samples do)
"""

import logging
import sys

from one_api_sdk.config import ClientSettings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_client": [
        "one_api_sdk",
    ],
}


def setup_logging(settings: ClientSettings | None = None) -> None:
    """Configure Python logging levels from client settings."""
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Library users usually bring their own handler; scripts may not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, http=%s, client=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_client,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
