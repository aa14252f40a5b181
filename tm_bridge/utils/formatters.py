"""Formatting utilities for tag output."""

import math

from rich import box
from rich.console import Console, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tm_bridge.config import get_settings
from tm_bridge.models.tags import RemoteTagsResult, TagInfo

# Tag Name, Status, Tasks, Completed
COLUMN_PROPORTIONS = (0.4, 0.38, 0.1, 0.12)
NAME_MIN_WIDTH = 20
COLUMN_MIN_WIDTH = 8
FALLBACK_TERMINAL_WIDTH = 120
MIN_TERMINAL_WIDTH = 80

_NOTICE_TONES = {
    "info": "blue",
    "warning": "yellow",
}


def _compute_column_widths(terminal_width: int | None) -> list[int]:
    """
    Derive table column widths from the terminal width.

    95% of the terminal is split 40/38/10/12; the name column never drops
    below 20 characters and the others never below 8.
    """
    terminal = max(terminal_width or FALLBACK_TERMINAL_WIDTH, MIN_TERMINAL_WIDTH)
    usable = math.floor(terminal * 0.95)
    return [
        max(math.floor(usable * share), NAME_MIN_WIDTH if i == 0 else COLUMN_MIN_WIDTH)
        for i, share in enumerate(COLUMN_PROPORTIONS)
    ]


def _render_notice(message: str, tone: str = "info") -> RenderableType:
    """Build a rounded, padded notice box with a blank line above and below."""
    color = _NOTICE_TONES.get(tone, "blue")
    style = f"bold {color}" if tone == "info" else color
    panel = Panel(
        Text(message, style=style),
        box=box.ROUNDED,
        border_style=color,
        padding=1,
        expand=False,
    )
    return Padding(panel, (1, 0))


def _format_tag_name(tag: TagInfo, show_metadata: bool = False) -> Text:
    """
    Format the Tag Name cell.

    Output: "● alpha (current - <briefId>)" for the current tag,
    "  beta (<briefId>)" otherwise.
    """
    if tag.is_current:
        suffix = f"(current - {tag.brief_id})" if tag.brief_id else "(current)"
        cell = Text.assemble(("● ", "green"), (tag.name, "bold green"), " ", (suffix, "bright_black"))
    else:
        cell = Text.assemble("  ", tag.name)
        if tag.brief_id:
            cell.append(f" ({tag.brief_id})", style="bright_black")

    if show_metadata:
        if tag.description:
            cell.append(f"\n  {tag.description}", style="dim")
        if tag.created:
            cell.append(f"\n  Created: {tag.created[:10]}", style="dim")

    return cell


def _build_tags_table(tags: list[TagInfo], terminal_width: int | None = None, show_metadata: bool = False) -> Table:
    """Build the tags table: Tag Name, Status, Tasks, Completed."""
    widths = _compute_column_widths(terminal_width)

    table = Table(box=box.SQUARE, header_style="bold cyan")
    table.add_column("Tag Name", width=widths[0], overflow="fold")
    table.add_column("Status", width=widths[1], overflow="fold")
    table.add_column("Tasks", width=widths[2], justify="right")
    table.add_column("Completed", width=widths[3], justify="right")

    for tag in tags:
        table.add_row(
            _format_tag_name(tag, show_metadata),
            Text(tag.status or "", style="bright_black"),
            Text(str(tag.task_count), style="white"),
            Text(str(tag.completed_tasks), style="green"),
        )

    return table


def _detect_terminal_width(console: Console) -> int:
    """Width of the attached terminal, or the configured default when not a TTY."""
    if console.is_terminal:
        return console.width
    return get_settings().default_terminal_width


def _render_tags(
    console: Console,
    result: RemoteTagsResult,
    show_metadata: bool = False,
    terminal_width: int | None = None,
) -> None:
    """Print the tags table, or a 'No tags found' notice when empty."""
    if not result.tags:
        console.print(_render_notice("No tags found", tone="warning"))
        return

    if terminal_width is None:
        terminal_width = _detect_terminal_width(console)
    console.print(_build_tags_table(result.tags, terminal_width, show_metadata))


def _format_tag_concise(tag: TagInfo) -> str:
    """
    Format a single tag in concise format for token efficiency.

    Output: "* alpha 3/10 (active)"
    """
    marker = "*" if tag.is_current else " "
    line = f"{marker} {tag.name} {tag.completed_tasks}/{tag.task_count}"
    if tag.status:
        line += f" ({tag.status})"
    return line


def _format_tags_concise(result: RemoteTagsResult) -> str:
    """
    Format a tags result in concise format.

    Output:
    2 tag(s) | current:alpha
    * alpha 3/10 (active)
      beta 0/2
    """
    if not result.tags:
        return "0 tags"

    header = f"{result.total_tags} tag(s)"
    if result.current_tag:
        header += f" | current:{result.current_tag}"

    return "\n".join([header] + [_format_tag_concise(tag) for tag in result.tags])


def _format_tag_markdown(tag: TagInfo) -> str:
    """Format a single tag as a markdown list item."""
    name = f"**{tag.name}** (current)" if tag.is_current else f"**{tag.name}**"
    details = [f"{tag.completed_tasks}/{tag.task_count} completed"]
    if tag.status:
        details.append(f"status: {tag.status}")
    if tag.brief_id:
        details.append(f"brief: `{tag.brief_id}`")

    line = f"- {name}: {', '.join(details)}"
    if tag.status_breakdown:
        breakdown = ", ".join(f"{status}: {count}" for status, count in sorted(tag.status_breakdown.items()))
        line += f"\n  - {breakdown}"
    if tag.description:
        line += f"\n  - {tag.description}"
    return line


def _format_tags_markdown(result: RemoteTagsResult, title: str = "Tags") -> str:
    """Format a tags result as markdown."""
    if not result.tags:
        return f"# {title}\n\nNo tags found."

    summary = f"*{result.total_tags} tag(s)*"
    if result.current_tag:
        summary += f" | current: **{result.current_tag}**"

    lines = [f"# {title}", summary, ""]
    lines.extend(_format_tag_markdown(tag) for tag in result.tags)
    return "\n".join(lines)
