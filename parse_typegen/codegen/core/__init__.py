"""
Core code generation components.

Provides base classes and utilities used by all artifact generators.
"""

from .errors import (
    GeneratorError,
    ConfigError,
    TargetKindError,
    TranslationError,
    TemplateError,
    RegistryError,
)
from .generator import CodeGenerator, GenerationResult, generate_code
from .schema import (
    FieldKind,
    FieldDescriptor,
    SchemaEntry,
    ClassDescriptor,
    AttributeSpec,
    DefaultValueSpec,
    ConstructorSpec,
    ConstructorShape,
    IMPLICIT_FIELDS,
    convert_schema_entry,
    convert_schemas,
)
from .naming import (
    NameResolver,
    ReferenceStyle,
    BUILTIN_BASE_CLASSES,
    BUILTIN_KINDS,
    GENERIC_BASE_CLASS,
    is_builtin,
    attributes_name,
    relative_import_path,
)
from .config import GeneratorConfig, ConfigManager, load_config, validate_config
from .templates import TemplateEngine, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "ConfigError",
    "TargetKindError",
    "TranslationError",
    "TemplateError",
    "RegistryError",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "FieldKind",
    "FieldDescriptor",
    "SchemaEntry",
    "ClassDescriptor",
    "AttributeSpec",
    "DefaultValueSpec",
    "ConstructorSpec",
    "ConstructorShape",
    "IMPLICIT_FIELDS",
    "convert_schema_entry",
    "convert_schemas",
    # Naming
    "NameResolver",
    "ReferenceStyle",
    "BUILTIN_BASE_CLASSES",
    "BUILTIN_KINDS",
    "GENERIC_BASE_CLASS",
    "is_builtin",
    "attributes_name",
    "relative_import_path",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "validate_config",
    # Template system
    "TemplateEngine",
    "create_template_engine",
]
