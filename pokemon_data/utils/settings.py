"""Environment-driven settings.

    POKEMON_DATA_LOG_LEVEL    DEBUG / INFO / ... or a number (default INFO)
    POKEMON_DATA_LOG_TO_FILE  1/true/yes/on to add the rotating file handler
    POKEMON_DATA_LOG_DIR      where the log file goes (default ./logs)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

log = logging.getLogger(__name__)

ENV_PREFIX = "POKEMON_DATA_"
_TRUTHY = {"1", "true", "yes", "on"}


def _parse_level(raw: Optional[str]) -> int:
    s = (raw or "").strip()
    if not s:
        return logging.INFO
    if s.isdigit():
        return int(s)
    level = logging.getLevelName(s.upper())
    if isinstance(level, int):
        return level
    log.warning("unknown log level %r, using INFO", raw)
    return logging.INFO


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.INFO
    log_to_file: bool = False
    log_dir: Path = field(default_factory=lambda: Path.cwd() / "logs")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_level(env.get(ENV_PREFIX + "LOG_LEVEL")),
        log_to_file=str(env.get(ENV_PREFIX + "LOG_TO_FILE", "0")).strip().lower() in _TRUTHY,
        log_dir=Path(env.get(ENV_PREFIX + "LOG_DIR") or Settings().log_dir),
    )
