"""Models for versioned prompt templates."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tm_bridge.errors import PromptParameterError

ParameterType = Literal["string", "number", "integer", "boolean", "array", "object"]

_TYPE_CHECKS: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "number": (int, float),
    "integer": (int,),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


class PromptParameter(BaseModel):
    """Schema for a single template variable."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ParameterType
    description: str = ""
    required: bool = False
    default: Any = None
    minimum: float | None = Field(default=None, alias="min")
    maximum: float | None = Field(default=None, alias="max")
    enum: list[Any] | None = None

    @model_validator(mode="after")
    def check_bounds(self) -> PromptParameter:
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError(f"min ({self.minimum}) is greater than max ({self.maximum})")
        return self

    def matches_type(self, value: Any) -> bool:
        # bool is an int subclass; keep it out of numeric parameters
        if isinstance(value, bool) and self.type != "boolean":
            return False
        return isinstance(value, _TYPE_CHECKS[self.type])


class PromptPair(BaseModel):
    """System and user instructions for one prompt variant."""

    model_config = ConfigDict(frozen=True)

    system: str
    user: str
    condition: str | None = None


class PromptTemplate(BaseModel):
    """A versioned prompt template loaded from JSON.

    The instruction text uses ``{{variable}}`` interpolation and
    ``{{#if ...}}`` sections; it is kept as opaque text here and rendered by
    whichever prompt component consumes it.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$")
    description: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)
    parameters: dict[str, PromptParameter] = Field(default_factory=dict)
    prompts: dict[str, PromptPair]

    @model_validator(mode="after")
    def check_default_variant(self) -> PromptTemplate:
        if "default" not in self.prompts:
            raise ValueError("prompts must define a 'default' variant")
        return self

    @property
    def default_prompt(self) -> PromptPair:
        return self.prompts["default"]

    def resolve_parameters(self, values: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Validate caller values against the parameter schema and fill in defaults.

        Args:
            values: Variable values keyed by parameter name

        Returns:
            Dictionary with a value for every declared parameter that is either
            supplied or has a default

        Raises:
            PromptParameterError: On a missing required value, unknown name,
                wrong type, out-of-bounds number or value outside the enum
        """
        values = dict(values or {})

        unknown = sorted(set(values) - set(self.parameters))
        if unknown:
            raise PromptParameterError(self.id, unknown[0], "is not declared by this template")

        resolved: dict[str, Any] = {}
        for name, param in self.parameters.items():
            if name not in values or values[name] is None:
                if param.required:
                    raise PromptParameterError(self.id, name, "is required")
                if param.default is not None:
                    resolved[name] = param.default
                continue

            value = values[name]
            if not param.matches_type(value):
                raise PromptParameterError(self.id, name, f"must be of type {param.type}")
            numeric = param.type in ("number", "integer")
            if numeric and param.minimum is not None and value < param.minimum:
                raise PromptParameterError(self.id, name, f"must be >= {param.minimum:g}")
            if numeric and param.maximum is not None and value > param.maximum:
                raise PromptParameterError(self.id, name, f"must be <= {param.maximum:g}")
            if param.enum is not None and value not in param.enum:
                raise PromptParameterError(self.id, name, f"must be one of {param.enum}")
            resolved[name] = value

        return resolved
