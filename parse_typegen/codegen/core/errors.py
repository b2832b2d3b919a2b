"""
Exception hierarchy for code generation.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


class TargetKindError(ConfigError):
    """Raised when a Pointer or Relation field has no target class."""

    def __init__(self, field_name: str, owning_kind: str = ""):
        self.field_name = field_name
        self.owning_kind = owning_kind
        location = f"{owning_kind}.{field_name}" if owning_kind else field_name
        super().__init__(f"Target kind required for reference field '{location}'")


class TranslationError(ConfigError):
    """Raised when a schema entry cannot be translated; the cause is chained."""

    def __init__(self, kind: str, message: str):
        self.kind = kind
        super().__init__(f"Failed to translate '{kind}': {message}")


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass
