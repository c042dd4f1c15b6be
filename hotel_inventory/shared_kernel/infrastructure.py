"""
Инфраструктура общего ядра: консольный логгер.
"""
import json
import sys
from typing import Any, Dict, TextIO

from .interfaces import ILogger

LOG_LEVELS: Dict[str, int] = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


class ConsoleLogger(ILogger):
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, level: str = "INFO"):
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._threshold = LOG_LEVELS[level]

    def _emit(self, level: str, message: str, stream: TextIO, context: Dict[str, Any]) -> None:
        if LOG_LEVELS[level] < self._threshold:
            return
        print(f"[{level}] {message}", file=stream, flush=True)
        if context:
            print(
                "  Context:",
                json.dumps(context, default=str, indent=2),
                file=stream,
                flush=True,
            )

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("INFO", message, sys.stdout, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("ERROR", message, sys.stderr, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("WARNING", message, sys.stderr, kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Записывает отладочное сообщение в консоль."""
        self._emit("DEBUG", message, sys.stdout, kwargs)
