"""Utility functions for tm-bridge."""

from tm_bridge.utils.formatters import (
    _build_tags_table,
    _compute_column_widths,
    _detect_terminal_width,
    _format_tags_concise,
    _format_tags_markdown,
    _render_notice,
    _render_tags,
)
from tm_bridge.utils.parsers import _parse_tags_with_stats, _sort_tags

__all__ = [
    "_parse_tags_with_stats",
    "_sort_tags",
    "_compute_column_widths",
    "_detect_terminal_width",
    "_build_tags_table",
    "_render_notice",
    "_render_tags",
    "_format_tags_markdown",
    "_format_tags_concise",
]
