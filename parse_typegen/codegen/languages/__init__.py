"""
Language-specific code generators.

This module contains generators for the supported target languages.
"""

from .typescript import (
    GENERATORS,
    AttributesGenerator,
    ClassesGenerator,
    DeclarationsGenerator,
    JsDocGenerator,
    RecordTranslator,
    create_translator,
)

__all__ = [
    "GENERATORS",
    "AttributesGenerator",
    "ClassesGenerator",
    "DeclarationsGenerator",
    "JsDocGenerator",
    "RecordTranslator",
    "create_translator",
]
