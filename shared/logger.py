"""
Structured Logger
==================

Provides :class:`ToolLogger`, a logging facade for the pipeline stages.
Records go to a Rich handler on stderr and, optionally, to a rotating
log file as plain text or JSON lines. Every record carries the component
name and the pipeline stage active when it was emitted.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOGGER_ROOT = "hillplayfair"

_STDLIB_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_STDERR_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)


class _JSONFormatter(logging.Formatter):
    """One JSON object per record.

    ``tool_name`` and ``operation`` are included when bound, and keyword
    data passed to the :class:`ToolLogger` methods lands under ``extra``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in ("tool_name", "operation")
            if getattr(record, name, None) is not None
        )
        fields = getattr(record, "tool_extra", None)
        if fields:
            entry["extra"] = fields
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _stderr_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_STDERR_THEME, stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )


def _file_handler(
    path: Path, level: int, json_lines: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        str(path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    if json_lines:
        handler.setFormatter(_JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    return handler


@dataclass
class Stopwatch:
    """Elapsed-time probe yielded by :meth:`ToolLogger.timed`."""

    started: float

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self.started


class ToolLogger:
    """Logger bound to one component, with an optional stage scope.

    Usage::

        log = ToolLogger("engine", log_file="run.log", json_logs=True)
        with log.operation("hill"):
            log.debug("Block size %d", n, padding=2)

    Keyword arguments other than ``exc_info``, ``stack_info`` and
    ``stacklevel`` are attached to the record as structured data.

    Args:
        tool_name:       Component name; records go to ``hillplayfair.<tool_name>``.
        log_level:       Minimum level name (DEBUG ... CRITICAL).
        log_file:        Rotating log file; ``None`` or ``""`` disables it.
        json_logs:       Write JSON lines instead of plain text to the file.
        max_bytes:       File size that triggers rotation.
        backup_count:    Rotated files to keep.
        console_output:  Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._tool_name = tool_name
        self._operation: str | None = None
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

        self._logger = logging.getLogger(f"{_LOGGER_ROOT}.{tool_name}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        # a second instance for the same component replaces the handlers
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_stderr_handler(level))
        if log_file:
            self._logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )
        if not self._logger.handlers:
            # keeps logging.lastResort from writing to stderr
            self._logger.addHandler(logging.NullHandler())

    @contextmanager
    def operation(self, name: str) -> Iterator[ToolLogger]:
        """Tag records emitted inside the block with stage *name*."""
        outer, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = outer

    @contextmanager
    def timed(self, label: str) -> Iterator[Stopwatch]:
        """Log *label* on entry and its elapsed time on exit."""
        watch = Stopwatch(time.perf_counter())
        self.debug("Started: %s", label)
        try:
            yield watch
        finally:
            self.info("Completed: %s (%.3f sec)", label, watch.elapsed)

    def _emit(self, level: int, msg: str, args: tuple, kwargs: dict[str, Any]) -> None:
        fields = {k: kwargs.pop(k) for k in list(kwargs) if k not in _STDLIB_KWARGS}
        extra = {"tool_name": self._tool_name, "operation": self._operation}
        if fields:
            extra["tool_extra"] = fields
        self._logger.log(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._emit(logging.ERROR, msg, args, kwargs)

    @property
    def tool_name(self) -> str:
        return self._tool_name

    @property
    def underlying(self) -> logging.Logger:
        """The stdlib :class:`logging.Logger` behind this facade."""
        return self._logger
