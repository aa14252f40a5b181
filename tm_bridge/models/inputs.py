"""Input models for tm-bridge operations and tools."""

from pydantic import BaseModel, ConfigDict, Field

from tm_bridge.enums import OutputFormat, ResponseFormat


class TagsBridgeInput(BaseModel):
    """Options for listing tags through the storage dispatcher."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_root: str = Field(
        default="",
        description="Project root directory (empty means the current working directory)",
    )
    show_metadata: bool = Field(default=False, description="Show brief description and creation date")
    is_mcp: bool = Field(default=False, description="Called from an MCP client; suppresses terminal output")
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT,
        description="Output format: 'text' renders notices and tables, 'json' renders nothing",
    )

    @property
    def interactive(self) -> bool:
        """Whether human-oriented terminal output should be rendered."""
        return self.output_format == OutputFormat.TEXT and not self.is_mcp


class ListTagsInput(BaseModel):
    """Input model for the tags MCP tool."""

    model_config = ConfigDict(str_strip_whitespace=True)

    project_root: str = Field(
        default="",
        description="Project root directory (empty means the server's working directory)",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable, 'concise', or 'json' for machine-readable",
    )
