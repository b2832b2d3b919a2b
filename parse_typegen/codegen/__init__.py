"""
Parse Typegen Code Generation Module

Generates TypeScript declarations and Parse subclasses from Parse class
schemas.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    get_registry,
    get_generator,
    get_artifact_info,
    list_all_artifact_info,
    list_supported_artifacts,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import (
    GeneratorError,
    ConfigError,
    TargetKindError,
    TranslationError,
    TemplateError,
    RegistryError,
)
from .core.schema import (
    FieldKind,
    FieldDescriptor,
    SchemaEntry,
    ClassDescriptor,
    convert_schemas,
)
from .core.naming import NameResolver, ReferenceStyle, relative_import_path
from .core.config import GeneratorConfig, ConfigManager, load_config, validate_config
from .core.writer import save_to_file
from .languages.typescript import RecordTranslator, TypeMapper, create_translator

__version__ = "0.1.0"

logger = get_logger(__name__)

ConfigLike = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


def _resolve_config(config: ConfigLike) -> GeneratorConfig:
    if isinstance(config, GeneratorConfig):
        validate_config(config)
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    return load_config(custom_config=config)


class ParseClassGenerator:
    """
    Translate Parse schemas once and render any set of artifacts from them.

    Example:
        generator = ParseClassGenerator({"overrides": {"_User": "CustomUser"}})
        generator.write_artifacts(schemas, ["attributes", "classes"])
    """

    def __init__(self, config: ConfigLike = None):
        self.config = _resolve_config(config)
        self.translator = create_translator(
            self.config.overrides, self.config.reference_style
        )

    @property
    def warnings(self) -> List[str]:
        return list(self.translator.warnings)

    def translate(self, schemas: Iterable[Any]) -> List[ClassDescriptor]:
        """
        Translate raw Parse schemas or SchemaEntry objects.

        Raises:
            TranslationError: A schema entry has an invalid reference field
        """
        return self.translator.translate_all(convert_schemas(schemas))

    def generate_artifact(
        self,
        artifact: str,
        descriptors: List[ClassDescriptor],
        output_path: Optional[str] = None,
    ) -> GenerationResult:
        """Render one artifact; failures are reported in the result."""
        generator = get_generator(artifact, self.config)
        return generate_code(generator, descriptors, output_path)

    def write_artifacts(
        self,
        schemas: Iterable[Any],
        artifacts: Optional[List[str]] = None,
    ) -> Dict[str, GenerationResult]:
        """
        Translate schemas and write every requested artifact.

        Args:
            schemas: Raw Parse schemas or SchemaEntry objects
            artifacts: Artifact names; defaults to the configured list

        Returns:
            Mapping of artifact name to its GenerationResult

        Raises:
            GeneratorError: On the first failing artifact; files already
                written are left in place
        """
        descriptors = self.translate(schemas)
        registry = get_registry()
        results = {}

        for artifact in artifacts or self.config.artifacts:
            name = registry.resolve(artifact)
            output_path = self.config.output_path(name)
            result = self.generate_artifact(name, descriptors, output_path)
            if not result.success:
                raise result.exception or GeneratorError(result.error_message)

            result.warnings = self.warnings + result.warnings
            save_to_file(output_path, result.code)
            results[name] = result

        logger.info("Generated %d artifacts for %d classes", len(results), len(descriptors))
        return results


def generate_from_schemas(
    schemas: Iterable[Any], artifact: str = "classes", config: ConfigLike = None
) -> GenerationResult:
    """
    Generate one artifact from raw Parse schemas.

    Args:
        schemas: Parse REST schema objects or SchemaEntry instances
        artifact: Artifact name ('attributes', 'classes', 'declarations', 'jsdoc')
        config: Generator configuration as object, dict or JSON path

    Returns:
        GenerationResult with generated code
    """
    generator = ParseClassGenerator(config)
    descriptors = generator.translate(schemas)
    result = generator.generate_artifact(artifact, descriptors)
    result.warnings = generator.warnings + result.warnings
    return result


def quick_generate(schemas: Iterable[Any], artifact: str = "classes", **options) -> str:
    """
    Quick code generation from raw schemas.

    Args:
        schemas: Parse REST schema objects
        artifact: Artifact name
        **options: GeneratorConfig options

    Returns:
        Generated code string
    """
    result = generate_from_schemas(schemas, artifact, options)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message)


__all__ = [
    "ParseClassGenerator",
    "GeneratorRegistry",
    "CodeGenerator",
    "GenerationResult",
    "RecordTranslator",
    "TypeMapper",
    "NameResolver",
    "ReferenceStyle",
    "FieldKind",
    "FieldDescriptor",
    "SchemaEntry",
    "ClassDescriptor",
    "GeneratorConfig",
    "ConfigManager",
    "GeneratorError",
    "ConfigError",
    "TargetKindError",
    "TranslationError",
    "TemplateError",
    "RegistryError",
    "create_translator",
    "relative_import_path",
    "save_to_file",
    "generate_code",
    "generate_from_schemas",
    "quick_generate",
    "get_generator",
    "get_artifact_info",
    "list_all_artifact_info",
    "list_supported_artifacts",
    "load_config",
]
