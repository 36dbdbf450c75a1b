from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from loguru import logger

from application.ports.logger import LoggerPort


@dataclass(frozen=True)
class ConsoleLogger(LoggerPort):
    """
    LoggerPort on top of loguru.

    The "message" field becomes the printed line; everything else (event
    type, bound fields) travels in loguru's extra dict.
    """

    bound: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return ConsoleLogger(bound=merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("INFO", event, fields)

    def success(self, event: str, **fields: Any) -> None:
        self._emit("SUCCESS", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        payload = dict(self.bound)
        payload.update(fields)
        payload.setdefault("type", event)
        message = payload.pop("message", None)
        if message is None:
            rest = " ".join(f"{k}={v}" for k, v in payload.items() if k not in ("type", "run_id"))
            message = f"{event} {rest}".rstrip()
        logger.bind(**payload).log(level, str(message))
