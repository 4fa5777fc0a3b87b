from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LEVEL_ENV = "OPTIONPY_LOG_LEVEL"
JSON_ENV = "OPTIONPY_LOG_JSON"

LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARN"
    log_json: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    level = env.get(LEVEL_ENV, "").strip().upper()
    if level not in LEVELS:
        level = Settings.log_level
    as_json = env.get(JSON_ENV, "").strip().lower() in _TRUTHY
    return Settings(log_level=level, log_json=as_json)
