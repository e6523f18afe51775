"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from thumbnail_padder.extract import SAMPLE_MODES
from thumbnail_padder.utils import parse_log_level

OUT_DIR_ENV_VAR = "THUMBNAIL_OUT_DIR"
SAMPLE_MODE_ENV_VAR = "THUMBNAIL_SAMPLE_MODE"
LOG_LEVEL_ENV_VAR = "THUMBNAIL_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    out_dir: Path = Path(".")
    sample_mode: str = "corner"
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls) -> Settings:
        sample_mode = os.getenv(SAMPLE_MODE_ENV_VAR, "corner").strip().lower()
        if sample_mode not in SAMPLE_MODES:
            raise ValueError(
                f"{SAMPLE_MODE_ENV_VAR} must be one of {', '.join(SAMPLE_MODES)}: {sample_mode}"
            )
        return cls(
            out_dir=Path(os.getenv(OUT_DIR_ENV_VAR, ".")),
            sample_mode=sample_mode,
            log_level=parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR)),
        )
