from abc import ABC, abstractmethod
from typing import Any


class LoggingInterface(ABC):
    """Structured logging: every record is a level, a message and keyword context.

    Backends implement :meth:`log`; the per-level helpers route through it.
    """

    @abstractmethod
    def log(self, level: str, msg: str, ctx: dict[str, Any]) -> None: ...

    def debug(self, msg: str, **ctx: Any) -> None:
        self.log("DEBUG", msg, ctx)

    def info(self, msg: str, **ctx: Any) -> None:
        self.log("INFO", msg, ctx)

    def warn(self, msg: str, **ctx: Any) -> None:
        self.log("WARN", msg, ctx)

    def error(self, msg: str, **ctx: Any) -> None:
        self.log("ERROR", msg, ctx)
