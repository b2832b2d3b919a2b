"""
Record translator.

Turns Parse schema entries into class descriptors that every artifact
generator renders independently.
"""

from typing import Iterable, List, Optional

from ....logging_config import get_logger
from ...core.errors import ConfigError, TranslationError
from ...core.naming import NameResolver, attributes_name
from ...core.schema import (
    AttributeSpec,
    ClassDescriptor,
    ConstructorShape,
    ConstructorSpec,
    DefaultValueSpec,
    SchemaEntry,
)
from .types import TypeMapper

logger = get_logger(__name__)


class RecordTranslator:
    """Translates schema entries using a name resolver and a type mapper."""

    def __init__(self, resolver: Optional[NameResolver] = None):
        self.resolver = resolver or NameResolver()
        self.type_mapper = TypeMapper(self.resolver)
        self.warnings: List[str] = []

    def translate(self, entry: SchemaEntry) -> Optional[ClassDescriptor]:
        """
        Translate one schema entry.

        Returns:
            ClassDescriptor, or None for a built-in class that is not overridden

        Raises:
            TargetKindError: A reference field has no target class
        """
        if not self.resolver.should_emit(entry.kind):
            logger.debug("Skipping unmodified built-in class %s", entry.kind)
            return None

        name = self.resolver.resolve_name(entry.kind)
        attrs_name = attributes_name(name)

        attributes = []
        default_values = []
        for descriptor in entry.translatable_fields():
            ts_type = self.type_mapper.map_field(descriptor, entry.kind)
            self.warnings.extend(ts_type.validation_hints)

            attributes.append(
                AttributeSpec(descriptor.name, ts_type.expr, ts_type.optional)
            )
            if descriptor.required:
                default_values.append(DefaultValueSpec(descriptor.name, ts_type.default))

        logger.debug(
            "Translated %s -> %s (%d attributes)", entry.kind, name, len(attributes)
        )
        return ClassDescriptor(
            kind=entry.kind,
            name=name,
            base_class=self.resolver.base_class_for(entry.kind),
            attributes_name=attrs_name,
            attributes=tuple(attributes),
            default_values=tuple(default_values),
            constructor=ConstructorSpec(
                shape=ConstructorShape.for_kind(entry.kind),
                class_name=name,
                attributes_name=attrs_name,
            ),
        )

    def translate_all(self, entries: Iterable[SchemaEntry]) -> List[ClassDescriptor]:
        """
        Translate every entry in order, dropping the ones not emitted.

        `warnings` afterwards holds only the warnings of this run.

        Raises:
            TranslationError: If any entry fails; the cause is chained
        """
        self.warnings = []
        descriptors = []
        for entry in entries:
            try:
                descriptor = self.translate(entry)
            except ConfigError as e:
                raise TranslationError(entry.kind, str(e)) from e
            if descriptor is not None:
                descriptors.append(descriptor)
        return descriptors
