"""
TypeScript artifact generators.

Each generator renders the same list of class descriptors into one file:
the attributes interfaces, the runtime classes, the pure declarations or
the JSDoc typedefs. Generators never depend on each other's output; the
only shared contract is the location of the attributes file.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ....logging_config import get_logger
from ...core.generator import CodeGenerator
from ...core.naming import ReferenceStyle, relative_import_path
from ...core.schema import ClassDescriptor

logger = get_logger(__name__)

# Top-level identifiers of a type expression; `Parse.Relation` yields only `Parse`
IDENTIFIER = re.compile(r"(?<![\w.])[A-Za-z_$][\w$]*")


class TypeScriptGenerator(CodeGenerator):
    """Shared behaviour of the template-based TypeScript generators."""

    template_name: str = ""

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def build_context(
        self, descriptors: Sequence[ClassDescriptor], output_path: str
    ) -> Dict[str, Any]:
        """Template variables common to every artifact."""
        return {
            "classes": list(descriptors),
            "parse_module": self.config.parse_module,
            "attributes_import": self.attributes_import_path(output_path),
            "add_comments": self.config.add_comments,
        }

    def generate(
        self, descriptors: Sequence[ClassDescriptor], output_path: Optional[str] = None
    ) -> str:
        """Render the artifact template for all descriptors."""
        output_path = output_path or self.default_output_path
        context = self.build_context(descriptors, output_path)
        logger.debug(
            "Rendering %s for %d classes into %s",
            self.template_name,
            len(descriptors),
            output_path,
        )
        return self.render_template(self.template_name, context)


class AttributesGenerator(TypeScriptGenerator):
    """Generates `<Name>Attributes` interfaces plus the shared helper types."""

    template_name = "attributes.d.ts.j2"

    @property
    def artifact_name(self) -> str:
        return "attributes"

    @property
    def file_extension(self) -> str:
        return ".d.ts"

    def build_context(
        self, descriptors: Sequence[ClassDescriptor], output_path: str
    ) -> Dict[str, Any]:
        context = super().build_context(descriptors, output_path)
        type_exprs = [
            attribute.type_expr
            for descriptor in descriptors
            for attribute in descriptor.attributes
        ]
        # Parse is only imported when an attribute type refers to it
        context["uses_parse"] = any("Parse." in expr for expr in type_exprs)
        context["class_imports"] = self.referenced_classes(descriptors, type_exprs)
        context["classes_import"] = relative_import_path(
            output_path, self.config.classes_file
        )
        return context

    def referenced_classes(
        self, descriptors: Sequence[ClassDescriptor], type_exprs: List[str]
    ) -> List[str]:
        """Generated classes named in attribute types, in schema order."""
        if self.config.style != ReferenceStyle.CLASS_NAME:
            return []
        used = set()
        for expr in type_exprs:
            used.update(IDENTIFIER.findall(expr))
        return [d.name for d in descriptors if d.name in used]


class ClassesGenerator(TypeScriptGenerator):
    """Generates runtime subclasses, `registerAll()` and named exports."""

    template_name = "classes.ts.j2"

    @property
    def artifact_name(self) -> str:
        return "classes"

    @property
    def file_extension(self) -> str:
        return ".ts"


class DeclarationsGenerator(TypeScriptGenerator):
    """Generates type-only interface declarations, no runtime code."""

    template_name = "declarations.d.ts.j2"

    @property
    def artifact_name(self) -> str:
        return "declarations"

    @property
    def file_extension(self) -> str:
        return ".d.ts"


class JsDocGenerator(TypeScriptGenerator):
    """Generates JSDoc typedefs for editor hints in plain JavaScript."""

    template_name = "jsdoc.js.j2"

    @property
    def artifact_name(self) -> str:
        return "jsdoc"

    @property
    def file_extension(self) -> str:
        return ".js"


GENERATORS = {
    "attributes": AttributesGenerator,
    "classes": ClassesGenerator,
    "declarations": DeclarationsGenerator,
    "jsdoc": JsDocGenerator,
}
