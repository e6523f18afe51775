"""Shared helpers for naming exports and reading settings."""

from __future__ import annotations

import logging
from pathlib import PurePath

DEFAULT_BASE_NAME = "image"


def original_base_name(file_name: str | None) -> str:
    """Return the file name up to its first dot, e.g. ``photo`` for ``photo.v2.png``."""

    if not file_name:
        return DEFAULT_BASE_NAME
    base = PurePath(file_name).name.split(".", maxsplit=1)[0]
    return base or DEFAULT_BASE_NAME


def thumbnail_filename(file_name: str | None) -> str:
    """Download name for the thumbnail of an uploaded file."""

    return f"thumbnail-{original_base_name(file_name)}.jpg"


def parse_log_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a level name like ``debug`` into a logging level."""

    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {value}")
    return level
