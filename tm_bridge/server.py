"""FastMCP server initialization for tm-bridge."""

from mcp.server.fastmcp import FastMCP

from tm_bridge.config import get_settings
from tm_bridge.logging_setup import configure_logging

# Initialize the MCP server
mcp = FastMCP("tm_bridge")


def run() -> None:
    """Run the MCP server over stdio."""
    # stdout carries the protocol; logs must go to stderr
    configure_logging(get_settings())

    import tm_bridge.tools  # noqa: F401  (registers tools)

    mcp.run()


if __name__ == "__main__":
    run()
