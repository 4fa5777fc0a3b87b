from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any

from .config import LEVELS, Settings, load_settings


class ConsoleLogger:
    def __init__(self, name: str = "optionpy", level: str = Settings.log_level, json_output: bool = False):
        self.name = name
        self.level = LEVELS.get(level.upper(), LEVELS[Settings.log_level])
        self.json_output = json_output

    @classmethod
    def from_settings(cls, settings: Settings, name: str = "optionpy") -> "ConsoleLogger":
        return cls(name, level=settings.log_level, json_output=settings.log_json)

    def set_level(self, level: str) -> None:
        self.level = LEVELS.get(level.upper(), self.level)

    @property
    def level_name(self) -> str:
        for k, v in LEVELS.items():
            if v == self.level: return k
        return Settings.log_level

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if LEVELS[level] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if fields:
                data["fields"] = fields
            print(json.dumps(data, separators=(",", ":"), default=repr), file=sys.stderr)
        else:
            extras = "".join(f" {k}={v}" for k, v in sorted(fields.items()))
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)


_logger: Optional[ConsoleLogger] = None


def get_logger() -> ConsoleLogger:
    """Package logger, configured from the environment on first use."""
    global _logger
    if _logger is None:
        _logger = ConsoleLogger.from_settings(load_settings())
    return _logger


def set_logger(logger: Optional[ConsoleLogger]) -> None:
    """Replace the package logger; ``None`` resets to environment defaults."""
    global _logger
    _logger = logger
