from dataclasses import dataclass, field
from typing import Any

from autowire.services.logger.interface import LoggingInterface


@dataclass(frozen=True)
class LogRecord:
    level: str
    msg: str
    ctx: dict[str, Any] = field(default_factory=dict)


class MemoryLogger(LoggingInterface):
    """Keeps every record in order so tests can assert on what was logged."""

    def __init__(self) -> None:
        self.entries: list[LogRecord] = []

    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None:
        self.entries.append(LogRecord(level, msg, dict(ctx)))

    @property
    def messages(self) -> list[str]:
        return [record.msg for record in self.entries]

    def at_level(self, level: str) -> list[LogRecord]:
        return [record for record in self.entries if record.level == level]
