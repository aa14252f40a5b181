"""Tag listing entry points: the CLI flow and the MCP tool."""

import json

from mcp.types import ToolAnnotations
from rich.console import Console

from tm_bridge.core import CoreFactory
from tm_bridge.dispatcher import fetch_tags, open_remote, resolve_tags
from tm_bridge.enums import OutputFormat, ResponseFormat
from tm_bridge.models.inputs import ListTagsInput, TagsBridgeInput
from tm_bridge.models.outcome import Deferred
from tm_bridge.models.tags import RemoteTagsResult
from tm_bridge.reporting import Reporter
from tm_bridge.server import mcp
from tm_bridge.utils.formatters import (
    _format_tags_concise,
    _format_tags_markdown,
    _render_notice,
    _render_tags,
)


async def try_list_tags_via_remote(
    params: TagsBridgeInput,
    reporter: Reporter | None = None,
    core_factory: CoreFactory | None = None,
    console: Console | None = None,
) -> RemoteTagsResult | None:
    """
    List tags through remote storage, rendering to the terminal when interactive.

    Args:
        params: TagsBridgeInput with project root and output preferences
        reporter: Diagnostics sink (defaults to structlog)
        core_factory: Async factory for the core handle (defaults to the configured one)
        console: Rich console for notices and the table (defaults to stdout)

    Returns:
        RemoteTagsResult if remote storage handled it, None if the caller
        should fall through to file storage

    Raises:
        Any error raised by the core while fetching tag statistics
    """
    session = await open_remote(params.project_root, reporter, core_factory)
    if isinstance(session, Deferred):
        return None

    if params.interactive:
        console = console or Console()
        console.print(_render_notice("Fetching Tags from Hamster"))

    result = await fetch_tags(session)

    if params.interactive:
        _render_tags(console, result, show_metadata=params.show_metadata)

    return result


@mcp.tool(
    name="tm_list_tags",
    annotations=ToolAnnotations(
        title="List Tags",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def tm_list_tags(params: ListTagsInput) -> str:
    """
    List tags (remote briefs) with task statistics.

    USE THIS WHEN:
    - Discovering which tags/briefs exist for a project
    - Checking which tag is current and how far along each one is

    Only projects on API storage are served here. For file storage the
    response says so, and the local tags listing should be used instead.

    Args:
        params: ListTagsInput with project_root and response_format

    Returns:
        Tags with task counts (markdown, concise, or JSON based on response_format)

    Examples:
        - List tags: params with response_format="markdown"
        - Machine-readable: params with response_format="json"
    """
    bridge_params = TagsBridgeInput(
        project_root=params.project_root,
        is_mcp=True,
        output_format=OutputFormat.JSON,
    )

    try:
        outcome = await resolve_tags(bridge_params)
    except Exception as e:
        return f"Error: {e}"

    if isinstance(outcome, Deferred):
        if params.response_format == ResponseFormat.JSON:
            return json.dumps({"handled": False, "reason": outcome.reason.value, "detail": outcome.detail}, indent=2)
        return f"Tags are not served by remote storage ({outcome.reason.value}). Use the file-based tags listing."

    result = outcome.result
    if params.response_format == ResponseFormat.JSON:
        return json.dumps({"handled": True, **result.model_dump(by_alias=True, exclude_none=True)}, indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tags_concise(result)

    return _format_tags_markdown(result)
