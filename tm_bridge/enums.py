"""Enums for tm-bridge."""

from enum import Enum


class StorageType(str, Enum):
    """Storage backend resolved by the core."""

    FILE = "file"  # Local tasks.json
    API = "api"  # Remote briefs


class OutputFormat(str, Enum):
    """Output format requested by the caller of the tags bridge."""

    TEXT = "text"
    JSON = "json"


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # Minimal output for chaining
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class LogLevel(str, Enum):
    """Severity levels accepted by a Reporter."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class DeferReason(str, Enum):
    """Why the dispatcher handed the request back to the local implementation."""

    CORE_UNAVAILABLE = "core_unavailable"
    NOT_REMOTE = "not_remote"
