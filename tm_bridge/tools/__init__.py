"""MCP tool definitions for tm-bridge."""

# Import all tools to register them with the MCP server
from tm_bridge.tools.tags import tm_list_tags, try_list_tags_via_remote

__all__ = [
    "tm_list_tags",
    "try_list_tags_via_remote",
]
