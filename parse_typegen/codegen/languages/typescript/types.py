"""
TypeScript type system for Parse class generation.

Maps Parse field kinds to TypeScript type expressions and synthesizes
default values for required fields.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Mapping, Optional

from ....logging_config import get_logger
from ...core.errors import TargetKindError
from ...core.naming import NameResolver
from ...core.schema import FieldDescriptor, FieldKind

logger = get_logger(__name__)

NULLABLE_SUFFIX = " | null"

UNKNOWN_TYPE = "any"

# Type expressions that do not depend on the schema.
STATIC_TYPES: Mapping[FieldKind, str] = {
    FieldKind.NUMBER: "number",
    FieldKind.STRING: "string",
    FieldKind.BOOLEAN: "boolean",
    FieldKind.DATE: "Date",
    FieldKind.ARRAY: "SerializableArray",
    FieldKind.OBJECT: "SerializableObject",
    FieldKind.FILE: "Parse.File | null",
    FieldKind.GEOPOINT: "Parse.GeoPoint",
    FieldKind.POLYGON: "Parse.Polygon",
}

# Zero values used for required fields without a schema default.
DEFAULT_LITERALS: Mapping[FieldKind, str] = {
    FieldKind.NUMBER: "0",
    FieldKind.STRING: '""',
    FieldKind.BOOLEAN: "false",
    FieldKind.DATE: "new Date(0)",
    FieldKind.POINTER: "null",
    FieldKind.RELATION: "null",
    FieldKind.ARRAY: "[]",
    FieldKind.OBJECT: "{}",
    FieldKind.FILE: "null",
    FieldKind.GEOPOINT: "new Parse.GeoPoint(0, 0)",
    FieldKind.POLYGON: "null",
    FieldKind.UNKNOWN: "null",
}


@dataclass(frozen=True)
class TsType:
    """
    Immutable result of mapping one field.

    Carries the type expression, whether the property is optional and, for
    required fields, the literal used in the DEFAULT_VALUES table.
    """

    expr: str
    optional: bool = False
    default: Optional[str] = None
    validation_hints: List[str] = field(default_factory=list)

    @property
    def is_nullable(self) -> bool:
        return self.expr.endswith(NULLABLE_SUFFIX)

    def as_non_nullable(self) -> "TsType":
        """Return this type without the `| null` suffix."""
        if not self.is_nullable:
            return self
        return replace(self, expr=self.expr[: -len(NULLABLE_SUFFIX)])

    def with_validation_hint(self, hint: str) -> "TsType":
        """Add a validation hint to this type."""
        return replace(self, validation_hints=list(self.validation_hints) + [hint])


def render_literal(value: Any) -> str:
    """Render a schema default value as a TypeScript literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, dict) and value.get("__type") == "Date" and "iso" in value:
        return f"new Date({json.dumps(value['iso'])})"
    return json.dumps(value, ensure_ascii=False)


class TypeMapper:
    """
    Central engine for mapping Parse schema fields to TypeScript types.

    Reference kinds (Pointer, Relation) are resolved through the
    NameResolver so that renamed built-ins and unmodified built-ins are
    referenced consistently across every generated file.
    """

    def __init__(self, resolver: Optional[NameResolver] = None):
        """Initialize with a name resolver."""
        self.resolver = resolver or NameResolver()
        self._handlers: Dict[FieldKind, Callable[[FieldDescriptor, str], str]] = {
            FieldKind.POINTER: self._map_pointer,
            FieldKind.RELATION: self._map_relation,
            FieldKind.UNKNOWN: self._map_unknown,
        }

    def map_field(self, descriptor: FieldDescriptor, owning_kind: str) -> TsType:
        """
        Map a schema field to a TypeScript type.

        Args:
            descriptor: The field to map
            owning_kind: Kind of the record the field belongs to

        Returns:
            TsType with expression, optionality and default literal

        Raises:
            TargetKindError: Pointer or Relation without a target class
        """
        ts_type = TsType(
            expr=self._map_base_type(descriptor, owning_kind),
            optional=descriptor.optional,
        )

        if descriptor.kind == FieldKind.UNKNOWN:
            ts_type = ts_type.with_validation_hint(
                f"Unknown type '{descriptor.raw_type}' for "
                f"{owning_kind}.{descriptor.name}, using {UNKNOWN_TYPE}"
            )

        if descriptor.required:
            ts_type = replace(
                ts_type.as_non_nullable(), default=self.default_literal(descriptor)
            )

        return ts_type

    def _map_base_type(self, descriptor: FieldDescriptor, owning_kind: str) -> str:
        """Map the type without considering optionality."""
        handler = self._handlers.get(descriptor.kind)
        if handler is not None:
            return handler(descriptor, owning_kind)
        return STATIC_TYPES[descriptor.kind]

    def _target_of(self, descriptor: FieldDescriptor, owning_kind: str) -> str:
        if not descriptor.target_kind:
            raise TargetKindError(descriptor.name, owning_kind)
        return descriptor.target_kind

    def _map_pointer(self, descriptor: FieldDescriptor, owning_kind: str) -> str:
        target = self._target_of(descriptor, owning_kind)
        return f"{self.resolver.reference_type(target)}{NULLABLE_SUFFIX}"

    def _map_relation(self, descriptor: FieldDescriptor, owning_kind: str) -> str:
        target = self._target_of(descriptor, owning_kind)
        owner_type = self.resolver.reference_type(owning_kind)
        target_type = self.resolver.reference_type(target)
        return f"Parse.Relation<{owner_type}, {target_type}>{NULLABLE_SUFFIX}"

    def _map_unknown(self, descriptor: FieldDescriptor, owning_kind: str) -> str:
        logger.warning(
            "Type not found: %s (%s.%s), using %s",
            descriptor.raw_type,
            owning_kind,
            descriptor.name,
            UNKNOWN_TYPE,
        )
        return UNKNOWN_TYPE

    def default_literal(self, descriptor: FieldDescriptor) -> str:
        """Literal for the DEFAULT_VALUES table of a required field."""
        if descriptor.kind == FieldKind.STRING:
            value = "" if descriptor.default is None else str(descriptor.default)
            return json.dumps(value, ensure_ascii=False)
        if descriptor.kind == FieldKind.GEOPOINT:
            return DEFAULT_LITERALS[FieldKind.GEOPOINT]
        if descriptor.has_default:
            return render_literal(descriptor.default)
        return DEFAULT_LITERALS[descriptor.kind]
