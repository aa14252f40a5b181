"""Reporter interface used by the dispatcher for diagnostics."""

from typing import Any, Protocol

from tm_bridge.enums import LogLevel
from tm_bridge.logging_setup import get_logger

_STRUCTLOG_METHODS = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
}


class Reporter(Protocol):
    """Receives diagnostic messages at a fixed set of severity levels."""

    def log(self, level: LogLevel, message: str, **fields: Any) -> None: ...


class StructlogReporter:
    """Reporter that forwards to a structlog logger."""

    def __init__(self, logger: Any = None):
        self._logger = logger if logger is not None else get_logger("tm_bridge")

    def log(self, level: LogLevel, message: str, **fields: Any) -> None:
        method = getattr(self._logger, _STRUCTLOG_METHODS[LogLevel(level)])
        method(message, **fields)
