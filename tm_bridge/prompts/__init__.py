"""Loader for the prompt templates shipped with tm-bridge."""

import json
from importlib import resources

from pydantic import ValidationError

from tm_bridge.errors import PromptTemplateError
from tm_bridge.models.prompts import PromptTemplate

_SUFFIX = ".json"


def list_prompt_templates() -> list[str]:
    """Return the ids of all bundled prompt templates, sorted."""
    package = resources.files(__name__)
    return sorted(
        entry.name[: -len(_SUFFIX)] for entry in package.iterdir() if entry.is_file() and entry.name.endswith(_SUFFIX)
    )


def load_prompt_template(template_id: str) -> PromptTemplate:
    """
    Load and validate a bundled prompt template.

    Args:
        template_id: Template id, which is also the file stem (e.g. 'analyze-complexity')

    Returns:
        Validated PromptTemplate

    Raises:
        PromptTemplateError: If the template does not exist, is not valid JSON,
            violates the template schema, or its id does not match the file name
    """
    source = resources.files(__name__).joinpath(f"{template_id}{_SUFFIX}")
    if not source.is_file():
        available = ", ".join(list_prompt_templates()) or "none"
        raise PromptTemplateError(f"Unknown prompt template '{template_id}' (available: {available})")

    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise PromptTemplateError(f"Prompt template '{template_id}' is not valid JSON - {e}") from e

    try:
        template = PromptTemplate.model_validate(data)
    except ValidationError as e:
        raise PromptTemplateError(f"Prompt template '{template_id}' is invalid - {e}") from e

    if template.id != template_id:
        raise PromptTemplateError(f"Prompt template file '{template_id}' declares id '{template.id}'")
    return template
