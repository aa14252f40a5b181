"""Command-line entry point for tm-bridge."""

import asyncio
import json

import click
from rich.console import Console

from tm_bridge.config import get_settings
from tm_bridge.enums import OutputFormat
from tm_bridge.errors import PromptTemplateError
from tm_bridge.logging_setup import configure_logging
from tm_bridge.models.inputs import TagsBridgeInput
from tm_bridge.prompts import list_prompt_templates, load_prompt_template
from tm_bridge.tools.tags import try_list_tags_via_remote

# Exit code telling a wrapper script to run the file-based tags listing
EXIT_DEFERRED = 2


@click.group()
def cli() -> None:
    """Tag listings and prompt templates for the task-master core."""
    configure_logging(get_settings())


@cli.command("tags")
@click.option(
    "--project-root",
    "project_root",
    default="",
    type=click.Path(file_okay=False),
    help="Project root directory (defaults to the current directory)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON for machine consumption")
@click.option("--show-metadata", is_flag=True, help="Show brief descriptions and creation dates")
@click.pass_context
def tags(ctx: click.Context, project_root: str, output_json: bool, show_metadata: bool) -> None:
    """List tags (briefs) with task counts when remote storage is active."""
    params = TagsBridgeInput(
        project_root=project_root,
        show_metadata=show_metadata,
        output_format=OutputFormat.JSON if output_json else OutputFormat.TEXT,
    )

    try:
        result = asyncio.run(try_list_tags_via_remote(params, console=Console()))
    except Exception as e:
        raise click.ClickException(str(e)) from e

    if result is None:
        click.echo("Tags are stored locally; use the file-based tags listing.", err=True)
        ctx.exit(EXIT_DEFERRED)

    if output_json:
        click.echo(json.dumps(result.model_dump(by_alias=True, exclude_none=True), indent=2))
    else:
        click.echo(result.message)


@cli.group("prompt")
def prompt() -> None:
    """Inspect bundled prompt templates."""


@prompt.command("list")
def prompt_list() -> None:
    """List bundled prompt template ids."""
    for template_id in list_prompt_templates():
        click.echo(template_id)


@prompt.command("show")
@click.argument("template_id")
@click.option("--json", "output_json", is_flag=True, help="Output the validated template as JSON")
def prompt_show(template_id: str, output_json: bool) -> None:
    """Show a prompt template's version and parameter schema."""
    try:
        template = load_prompt_template(template_id)
    except PromptTemplateError as e:
        raise click.ClickException(str(e)) from e

    if output_json:
        click.echo(json.dumps(template.model_dump(by_alias=True), indent=2))
        return

    click.echo(f"{template.id} v{template.version}")
    if template.description:
        click.echo(template.description)
    click.echo("")
    click.echo("Parameters:")
    for name, param in template.parameters.items():
        flags = "required" if param.required else f"default={param.default!r}"
        bounds = ""
        if param.minimum is not None and param.maximum is not None:
            bounds = f" [{param.minimum:g}..{param.maximum:g}]"
        click.echo(f"  {name} ({param.type}, {flags}){bounds}")
    click.echo("")
    click.echo(f"Variants: {', '.join(sorted(template.prompts))}")


@cli.command("serve")
def serve() -> None:
    """Run the MCP server over stdio."""
    from tm_bridge.server import run

    run()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
