"""
TypeScript code generator module.

Generates attributes interfaces, Parse subclasses, declarations and JSDoc
typedefs from Parse class schemas.
"""

from typing import Mapping, Optional, Union

from ...core.naming import NameResolver, ReferenceStyle
from .generator import (
    GENERATORS,
    AttributesGenerator,
    ClassesGenerator,
    DeclarationsGenerator,
    JsDocGenerator,
    TypeScriptGenerator,
)
from .translator import RecordTranslator
from .types import DEFAULT_LITERALS, STATIC_TYPES, TsType, TypeMapper, render_literal

__all__ = [
    "GENERATORS",
    "AttributesGenerator",
    "ClassesGenerator",
    "DeclarationsGenerator",
    "JsDocGenerator",
    "TypeScriptGenerator",
    "RecordTranslator",
    "TsType",
    "TypeMapper",
    "DEFAULT_LITERALS",
    "STATIC_TYPES",
    "render_literal",
    "create_translator",
]


def create_translator(
    overrides: Optional[Mapping[str, Union[bool, str, None]]] = None,
    reference_style: Union[ReferenceStyle, str] = ReferenceStyle.BASE_CLASS,
) -> RecordTranslator:
    """
    Create a translator for a set of built-in overrides.

    Args:
        overrides: Built-in class overrides, e.g. {"_User": "CustomUser"}
        reference_style: How Pointer/Relation fields reference other classes

    Returns:
        Configured RecordTranslator instance
    """
    resolver = NameResolver(overrides, ReferenceStyle(reference_style))
    return RecordTranslator(resolver)
