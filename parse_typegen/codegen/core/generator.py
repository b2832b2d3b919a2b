"""
Base generator interface for all generated artifacts.

Defines the contract that all artifact generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Any, Optional, Sequence

from ...logging_config import get_logger
from .config import GeneratorConfig
from .errors import GeneratorError
from .naming import relative_import_path
from .schema import ClassDescriptor
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all artifact generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def artifact_name(self) -> str:
        """Return the name of the artifact (e.g., 'attributes', 'classes')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for the generated file (e.g., '.d.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def default_output_path(self) -> str:
        return self.config.output_path(self.artifact_name)

    @abstractmethod
    def generate(
        self, descriptors: Sequence[ClassDescriptor], output_path: Optional[str] = None
    ) -> str:
        """
        Generate the artifact for all class descriptors.

        Args:
            descriptors: Translated classes, in schema order
            output_path: Where the artifact will be written; imports of the
                attributes file are computed relative to it

        Returns:
            Generated code as a string
        """
        pass

    def attributes_import_path(self, output_path: Optional[str] = None) -> str:
        """Module specifier of the attributes file as seen from `output_path`."""
        return relative_import_path(
            output_path or self.default_output_path, self.config.attributes_file
        )

    def validate_descriptors(self, descriptors: Sequence[ClassDescriptor]) -> List[str]:
        """
        Validate descriptors for structural issues.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        seen: Dict[str, str] = {}

        for descriptor in descriptors:
            if descriptor.name in seen:
                warnings.append(
                    f"Class name '{descriptor.name}' generated for both "
                    f"'{seen[descriptor.name]}' and '{descriptor.kind}'"
                )
            seen[descriptor.name] = descriptor.kind

            if not descriptor.attributes:
                warnings.append(f"Class '{descriptor.name}' has no attributes")

            for attribute in descriptor.attributes:
                if attribute.type_expr == "any":
                    warnings.append(
                        f"Untyped attribute {descriptor.name}.{attribute.name}"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic whitespace formatting to generated code.

        Trailing whitespace is removed, runs of blank lines are capped at
        two and the file ends with exactly one newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[BaseException] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[BaseException] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    descriptors: Sequence[ClassDescriptor],
    output_path: Optional[str] = None,
) -> GenerationResult:
    """
    Generate an artifact using the specified generator with error handling.

    Args:
        generator: Artifact generator instance
        descriptors: Translated classes
        output_path: Target path of the artifact

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    output_path = output_path or generator.default_output_path
    try:
        warnings = generator.validate_descriptors(descriptors)
        code = generator.generate(descriptors, output_path)
        formatted_code = generator.format_code(code)
    except GeneratorError as e:
        logger.error("Generation of %s failed: %s", generator.artifact_name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "artifact": generator.artifact_name,
        "file_extension": generator.file_extension,
        "output_path": output_path,
        "class_count": len(descriptors),
        "classes": [d.name for d in descriptors],
    }
    logger.debug(
        "Generated %s for %d classes", generator.artifact_name, len(descriptors)
    )
    return GenerationResult(formatted_code, warnings, metadata)
