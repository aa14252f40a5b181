"""Exception hierarchy for tm-bridge."""


class TmBridgeError(Exception):
    """Base class for errors raised by tm-bridge itself."""


class CoreFactoryError(TmBridgeError):
    """The configured core factory could not be resolved."""


class PromptTemplateError(TmBridgeError):
    """A prompt template is missing or does not match the template schema."""


class PromptParameterError(TmBridgeError):
    """Values supplied for a prompt template violate its parameter schema."""

    def __init__(self, template_id: str, parameter: str, problem: str):
        self.template_id = template_id
        self.parameter = parameter
        self.problem = problem
        super().__init__(f"{template_id}: parameter '{parameter}' {problem}")
