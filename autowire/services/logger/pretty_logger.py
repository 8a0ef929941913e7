import sys
from datetime import datetime, timezone
from typing import Any

from autowire.services.logger.interface import LoggingInterface

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")

_COLORS = {
    "INFO": "\033[32m",   # green
    "WARN": "\033[33m",   # yellow
    "ERROR": "\033[31m",  # red
    "DEBUG": "\033[36m",  # cyan
}
_RESET = "\033[0m"


class PrettyLogger(LoggingInterface):
    """Colorized human-readable logger writing to stderr."""

    def __init__(self, min_level: str = "INFO") -> None:
        level = min_level.upper()
        if level not in LEVELS:
            raise ValueError(f"Unknown log level: '{min_level}' (available: {', '.join(LEVELS)})")
        self._threshold = LEVELS.index(level)

    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        if LEVELS.index(level) < self._threshold:
            return
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        color = _COLORS.get(level, "")
        extra = f"  {ctx}" if ctx else ""
        print(f"{color}{ts} [{level}]{_RESET} {msg}{extra}", file=sys.stderr)
