"""
Tags bridge for the task-master core.

Lists tags (remote "briefs") with task statistics when a project uses API
storage, and defers to the file-based implementation otherwise. Also ships
the versioned prompt templates used for task complexity analysis.
"""

# Re-export enums
from tm_bridge.enums import DeferReason, LogLevel, OutputFormat, ResponseFormat, StorageType

# Re-export errors
from tm_bridge.errors import CoreFactoryError, PromptParameterError, PromptTemplateError, TmBridgeError

# Re-export models
from tm_bridge.models import (
    Deferred,
    DispatchOutcome,
    Handled,
    ListTagsInput,
    PromptPair,
    PromptParameter,
    PromptTemplate,
    RemoteTagsResult,
    SubtaskCounts,
    TagInfo,
    TagsBridgeInput,
    TagsWithStats,
)

# Re-export core interface and dispatcher
from tm_bridge.core import CoreFactory, CoreHandle, load_core_factory
from tm_bridge.dispatcher import RemoteSession, fetch_tags, open_remote, resolve_tags
from tm_bridge.reporting import Reporter, StructlogReporter

# Re-export prompt loader
from tm_bridge.prompts import list_prompt_templates, load_prompt_template

# Re-export MCP server instance
from tm_bridge.server import mcp

# Re-export tools
from tm_bridge.tools import tm_list_tags, try_list_tags_via_remote

# Re-export utilities (including private functions used by tests)
from tm_bridge.utils import (
    _build_tags_table,
    _compute_column_widths,
    _detect_terminal_width,
    _format_tags_concise,
    _format_tags_markdown,
    _parse_tags_with_stats,
    _render_notice,
    _render_tags,
    _sort_tags,
)

__all__ = [
    # Enums
    "StorageType",
    "OutputFormat",
    "ResponseFormat",
    "LogLevel",
    "DeferReason",
    # Errors
    "TmBridgeError",
    "CoreFactoryError",
    "PromptTemplateError",
    "PromptParameterError",
    # Models
    "TagInfo",
    "SubtaskCounts",
    "TagsWithStats",
    "RemoteTagsResult",
    "Handled",
    "Deferred",
    "DispatchOutcome",
    "TagsBridgeInput",
    "ListTagsInput",
    "PromptTemplate",
    "PromptParameter",
    "PromptPair",
    # Core interface and dispatcher
    "CoreHandle",
    "CoreFactory",
    "load_core_factory",
    "RemoteSession",
    "open_remote",
    "fetch_tags",
    "resolve_tags",
    "Reporter",
    "StructlogReporter",
    # Prompt templates
    "list_prompt_templates",
    "load_prompt_template",
    # Utility functions
    "_parse_tags_with_stats",
    "_sort_tags",
    "_compute_column_widths",
    "_detect_terminal_width",
    "_build_tags_table",
    "_render_notice",
    "_render_tags",
    "_format_tags_markdown",
    "_format_tags_concise",
    # Tools
    "try_list_tags_via_remote",
    "tm_list_tags",
    # MCP server instance
    "mcp",
]
